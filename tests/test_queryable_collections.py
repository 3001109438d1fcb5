"""
Tests for the queryable collections API.
"""

import pytest

from airport_dashboard.models.airport import AirportType
from airport_dashboard.models.airport_collection import AirportCollection
from airport_dashboard.models.queryable_collection import QueryableCollection


class TestQueryableCollection:
    """Test base QueryableCollection functionality."""

    def test_filter_with_predicate(self, mock_catalog):
        """Test filtering with a custom predicate."""
        busy = mock_catalog.airports.filter(lambda a: a.runways >= 6).all()

        assert [a.code for a in busy] == ['ORD', 'DEN']

    def test_where_attribute_matching(self, mock_catalog):
        """Test filtering with attribute matching."""
        result = mock_catalog.airports.where(code='SEA').first()

        assert result is not None
        assert result.id == '7'

    def test_first_on_empty(self):
        assert AirportCollection([]).first() is None
        assert not AirportCollection([])

    def test_all_returns_copy(self, mock_catalog):
        """Test that callers cannot modify the collection through all()."""
        collection = mock_catalog.airports
        items = collection.all()
        items.clear()

        assert collection.count() == 12

    def test_order_by_and_map(self, mock_catalog):
        codes = mock_catalog.airports.order_by(lambda a: a.elevation, reverse=True).map(lambda a: a.code).all()

        assert codes[0] == 'DEN'

    def test_to_dict_duplicate_key(self, mock_catalog):
        with pytest.raises(ValueError):
            mock_catalog.airports.to_dict(lambda a: a.country)

    def test_slicing_keeps_type(self, mock_catalog):
        sliced = mock_catalog.airports[:3]

        assert isinstance(sliced, AirportCollection)
        assert len(sliced) == 3

    def test_repr(self, mock_catalog):
        assert repr(mock_catalog.airports) == "AirportCollection(['LAX', 'SFO', 'JFK', ...], count=12)"
        assert repr(QueryableCollection([])) == "QueryableCollection([])"


class TestAirportCollection:
    """Test the airport-specific filters."""

    def test_in_bounds(self, mock_catalog, west_coast_bounds):
        """Test viewport filtering through the collection API."""
        codes = mock_catalog.airports.in_bounds(west_coast_bounds).map(lambda a: a.code).all()

        assert codes == ['LAX', 'SFO', 'PHX', 'BUR', 'SBA', 'SMO']

    def test_in_bounds_none(self, mock_catalog):
        assert mock_catalog.airports.in_bounds(None).count() == 12

    def test_chaining(self, mock_catalog, west_coast_bounds):
        """Test combining viewport and category filters."""
        result = mock_catalog.airports.in_bounds(west_coast_bounds).by_type('regional').all()

        assert [a.code for a in result] == ['SBA']

    def test_by_type_accepts_enum(self, mock_catalog):
        assert mock_catalog.airports.by_type(AirportType.PRIVATE).first().code == 'SMO'

    def test_by_id(self, mock_catalog):
        assert mock_catalog.airports.by_id('9').code == 'MIA'
        assert mock_catalog.airports.by_id('nope') is None

    def test_group_by_type(self, mock_catalog):
        groups = mock_catalog.airports.group_by_type()

        assert len(groups['international']) == 9
        assert [a.code for a in groups['domestic']] == ['BUR']

    def test_by_country_and_starbucks(self, mock_catalog):
        assert mock_catalog.airports.by_country('USA').count() == 12
        assert not mock_catalog.airports.with_starbucks().exists()
