"""
Viewport filtering for airports.

The table on the dashboard only lists airports inside the map viewport.
This module holds the pure function that decides which ones those are.
"""

from typing import Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.airport import Airport
    from ..models.viewport_bounds import ViewportBounds


def filter_by_bounds(airports: Iterable['Airport'], bounds: Optional['ViewportBounds']) -> List['Airport']:
    """
    Return the airports located inside the viewport rectangle.

    Latitude edges are inclusive. When ``bounds.west > bounds.east`` the
    viewport spans the antimeridian and a longitude matches if it is east of
    ``west`` or west of ``east``.

    Args:
        airports: Airports to filter, in display order
        bounds: Current viewport, or None before the map reported one

    Returns:
        New list with the matching airports in their original relative order.
        With no bounds every airport is returned.

    Examples:
        bounds = ViewportBounds(north=42, south=32, west=-125, east=-110)
        west_coast = filter_by_bounds(catalog.airports, bounds)
    """
    if bounds is None:
        return list(airports)
    return [
        a for a in airports
        if bounds.contains(a.coordinates.latitude, a.coordinates.longitude)
    ]
