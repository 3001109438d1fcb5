"""
Tests for viewport filtering of airports.
"""

import pytest

from airport_dashboard.models.viewport_bounds import ViewportBounds
from airport_dashboard.utils.bounds_filter import filter_by_bounds


class TestNoBounds:
    """Behaviour before the map has reported a viewport."""

    def test_returns_all_when_no_bounds(self, sample_airports):
        """Test that None bounds keep every airport in the same order."""
        result = filter_by_bounds(sample_airports, None)

        assert result == sample_airports
        assert [a.id for a in result] == [a.id for a in sample_airports]

    def test_does_not_alias_input(self, sample_airports):
        """Test that the returned list is not the input list."""
        result = filter_by_bounds(sample_airports, None)
        result.pop()

        assert len(sample_airports) == 5

    def test_empty_input(self, west_coast_bounds):
        """Test that filtering nothing yields nothing."""
        assert filter_by_bounds([], west_coast_bounds) == []
        assert filter_by_bounds([], None) == []


class TestSimpleBounds:
    """Viewports that do not cross the antimeridian."""

    def test_filters_by_simple_bounds(self, sample_airports, west_coast_bounds):
        """Test that LAX and SFO fall inside a west coast viewport."""
        codes = [a.code for a in filter_by_bounds(sample_airports, west_coast_bounds)]

        assert 'LAX' in codes
        assert 'SFO' in codes
        assert 'JFK' not in codes
        assert 'ATL' not in codes

    def test_preserves_relative_order(self, mock_catalog, west_coast_bounds):
        """Test that matches keep their catalog order."""
        airports = mock_catalog.airports.all()
        result = filter_by_bounds(airports, west_coast_bounds)

        positions = [airports.index(a) for a in result]
        assert positions == sorted(positions)
        assert [a.code for a in result] == ['LAX', 'SFO', 'PHX', 'BUR', 'SBA', 'SMO']

    def test_does_not_mutate_input(self, sample_airports, west_coast_bounds):
        """Test that the input list is left untouched."""
        before = list(sample_airports)
        filter_by_bounds(sample_airports, west_coast_bounds)

        assert sample_airports == before

    def test_idempotent(self, mock_catalog, west_coast_bounds):
        """Test that filtering twice with the same bounds changes nothing."""
        once = filter_by_bounds(mock_catalog.airports, west_coast_bounds)
        twice = filter_by_bounds(once, west_coast_bounds)

        assert twice == once

    def test_boundaries_are_inclusive(self, airport_factory):
        """Test that airports exactly on an edge are kept."""
        bounds = ViewportBounds(north=10, south=0, west=-10, east=10)
        airports = [
            airport_factory('n', 10, 0),
            airport_factory('s', 0, 0),
            airport_factory('e', 5, 10),
            airport_factory('w', 5, -10),
            airport_factory('out', 10.0001, 0),
        ]

        result = filter_by_bounds(airports, bounds)

        assert [a.id for a in result] == ['n', 's', 'e', 'w']

    def test_degenerate_longitude_slice(self, airport_factory):
        """Test that west == east only admits the exact longitude."""
        bounds = ViewportBounds(north=50, south=-50, west=12.5, east=12.5)
        airports = [airport_factory('hit', 0, 12.5), airport_factory('miss', 0, 12.5001)]

        assert [a.id for a in filter_by_bounds(airports, bounds)] == ['hit']

    def test_degenerate_latitude_slice(self, airport_factory):
        """Test that north == south only admits the exact latitude."""
        bounds = ViewportBounds(north=33.5, south=33.5, west=-180, east=180)
        airports = [airport_factory('hit', 33.5, 0), airport_factory('miss', 33.6, 0)]

        assert [a.id for a in filter_by_bounds(airports, bounds)] == ['hit']

    def test_inverted_latitude_is_empty(self, sample_airports):
        """Test that north < south matches nothing."""
        bounds = ViewportBounds(north=30, south=45, west=-180, east=180)

        assert filter_by_bounds(sample_airports, bounds) == []

    def test_whole_world(self, mock_catalog):
        """Test that a whole-world viewport keeps every airport."""
        bounds = ViewportBounds(north=90, south=-90, west=-180, east=180)

        assert len(filter_by_bounds(mock_catalog.airports, bounds)) == len(mock_catalog)


class TestAntimeridian:
    """Viewports that wrap across the 180/-180 line."""

    def test_antimeridian_wrap(self, dateline_airports, dateline_bounds):
        """Test that both sides of the dateline are kept and far airports dropped."""
        codes = sorted(a.code for a in filter_by_bounds(dateline_airports, dateline_bounds))

        assert codes == ['AAA', 'BBB']

    @pytest.mark.parametrize("longitude,expected", [
        (160, True),
        (180, True),
        (-180, True),
        (-170, True),
        (159.9, False),
        (-169.9, False),
        (0, False),
    ])
    def test_wrap_edges(self, airport_factory, dateline_bounds, longitude, expected):
        """Test the edges of a wrapped viewport."""
        airport = airport_factory('x', 10, longitude)

        assert (filter_by_bounds([airport], dateline_bounds) == [airport]) is expected

    def test_wrap_still_checks_latitude(self, airport_factory, dateline_bounds):
        """Test that a matching longitude outside the latitude band is dropped."""
        airport = airport_factory('x', 45, 175)

        assert filter_by_bounds([airport], dateline_bounds) == []
