"""
Specialized queryable collection for Airport objects.

Provides domain-specific filtering methods for common dashboard queries
while maintaining the composability of the base QueryableCollection.
"""

from typing import Dict, List, Optional, Union, TYPE_CHECKING
from .queryable_collection import QueryableCollection
from .airport import AirportType
from ..utils.bounds_filter import filter_by_bounds

if TYPE_CHECKING:
    from .airport import Airport
    from .viewport_bounds import ViewportBounds


class AirportCollection(QueryableCollection['Airport']):
    """
    Specialized collection for querying airports with domain-specific filters.

    Examples:
        # Viewport filtering
        collection.in_bounds(bounds)

        # Chaining
        collection.in_bounds(bounds).by_type("international").count()

        # Lookup
        collection.by_id("3")
    """

    def in_bounds(self, bounds: Optional['ViewportBounds']) -> 'AirportCollection':
        """
        Filter airports to those inside a viewport rectangle.

        Handles viewports that cross the antimeridian. With ``None`` bounds the
        collection is returned unfiltered.

        Args:
            bounds: Viewport rectangle or None

        Returns:
            New AirportCollection with airports in the viewport

        Examples:
            # Airports on the US west coast
            west = airports.in_bounds(ViewportBounds(north=49, south=32, west=-125, east=-115))
        """
        return AirportCollection(filter_by_bounds(self._items, bounds))

    def by_type(self, airport_type: Union[str, AirportType]) -> 'AirportCollection':
        """
        Filter airports by category.

        Args:
            airport_type: One of international, domestic, regional, private

        Returns:
            New AirportCollection with airports of that category
        """
        wanted = AirportType(airport_type)
        return AirportCollection([
            a for a in self._items
            if a.type == wanted
        ])

    def by_country(self, country: str) -> 'AirportCollection':
        """Filter airports by country name."""
        return AirportCollection([
            a for a in self._items
            if a.country == country
        ])

    def with_starbucks(self) -> 'AirportCollection':
        return AirportCollection([
            a for a in self._items
            if a.has_starbucks
        ])

    def by_id(self, airport_id: str) -> Optional['Airport']:
        """
        Find an airport by its catalog id.

        Returns:
            The airport, or None when no airport carries this id
        """
        return next((a for a in self._items if a.id == airport_id), None)

    # Grouping methods that return dictionaries

    def group_by_type(self) -> Dict[str, List['Airport']]:
        """
        Group airports by category.

        Returns:
            Dictionary mapping category names to lists of airports
        """
        return self.group_by(lambda a: a.type.value)
