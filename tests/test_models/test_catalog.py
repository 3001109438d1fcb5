"""
Tests for the airport catalog.
"""

import pytest

from airport_dashboard.data.mock_airports import MOCK_AIRPORTS
from airport_dashboard.models.catalog import AirportCatalog
from airport_dashboard.models.validation import ModelValidationError


class TestCatalogConstruction:
    """Test catalog creation and validation."""

    def test_seed_catalog(self, mock_catalog):
        """Test that the seed catalog loads in id order."""
        assert len(mock_catalog) == len(MOCK_AIRPORTS)
        assert mock_catalog.ids() == [str(i) for i in range(1, 13)]
        assert mock_catalog.get_airport('1').code == 'LAX'

    def test_duplicate_ids_rejected(self, airport_factory):
        """Test that duplicate ids fail validation."""
        with pytest.raises(ModelValidationError) as exc_info:
            AirportCatalog([airport_factory('1', 0, 0), airport_factory('1', 1, 1)])

        result = exc_info.value.validation_result
        assert not result.is_valid
        assert result.errors[0].field == 'id'
        assert 'Duplicate airport id' in str(exc_info.value)

    def test_negative_runways_rejected(self, airport_factory):
        with pytest.raises(ModelValidationError):
            AirportCatalog([airport_factory('1', 0, 0, runways=-1)])

    def test_validation_error_message(self, airport_factory):
        """Test that the error lists each failed check under its message."""
        with pytest.raises(ModelValidationError) as exc_info:
            AirportCatalog([airport_factory('1', 0, 0, runways=-1)])

        message = str(exc_info.value)
        assert message.startswith('Invalid airport catalog\nErrors:\n  - ')
        assert 'Runway count must be non-negative for 1' in message
        assert str(ModelValidationError('plain')) == 'plain'

    def test_empty_catalog(self):
        catalog = AirportCatalog()

        assert len(catalog) == 0
        assert catalog.airports.all() == []

    def test_lookup_unknown_id(self, mock_catalog):
        """Test that unknown ids resolve to None."""
        assert mock_catalog.get_airport('999') is None
        assert '999' not in mock_catalog
        assert '1' in mock_catalog


class TestRename:
    """Test the rename operation."""

    def test_rename_changes_only_name(self, mock_catalog):
        """Test that rename keeps every field except the name."""
        before = mock_catalog.get_airport('1')

        assert mock_catalog.rename('1', 'New Name') is True

        after = mock_catalog.get_airport('1')
        assert after.name == 'New Name'
        assert after.id == before.id
        assert after.code == before.code
        assert after.city == before.city
        assert after.country == before.country
        assert after.coordinates == before.coordinates
        assert after.elevation == before.elevation
        assert after.runways == before.runways
        assert after.type == before.type
        assert after.has_starbucks == before.has_starbucks

    def test_rename_trims(self, mock_catalog):
        mock_catalog.rename('2', '   SFO Intl  ')

        assert mock_catalog.get_airport('2').name == 'SFO Intl'

    def test_whitespace_rename_is_ignored(self, mock_catalog):
        """Test that a blank name keeps the previous one."""
        original = mock_catalog.get_airport('1').name

        assert mock_catalog.rename('1', '   ') is False
        assert mock_catalog.rename('1', '') is False
        assert mock_catalog.get_airport('1').name == original

    def test_unknown_id_is_ignored(self, mock_catalog):
        before = mock_catalog.to_dict()

        assert mock_catalog.rename('999', 'Nowhere') is False
        assert mock_catalog.to_dict() == before

    def test_rename_keeps_order_and_others(self, mock_catalog):
        """Test that the renamed airport stays in place and others are untouched."""
        others = [a for a in mock_catalog if a.id != '3']

        mock_catalog.rename('3', 'Kennedy')

        assert mock_catalog.ids() == [str(i) for i in range(1, 13)]
        assert [a for a in mock_catalog if a.id != '3'] == others
        assert mock_catalog.airports[2].name == 'Kennedy'
