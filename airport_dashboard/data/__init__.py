from .mock_airports import MOCK_AIRPORTS, load_mock_catalog

__all__ = ['MOCK_AIRPORTS', 'load_mock_catalog']
