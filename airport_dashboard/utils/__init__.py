from .bounds_filter import filter_by_bounds

__all__ = ['filter_by_bounds']
