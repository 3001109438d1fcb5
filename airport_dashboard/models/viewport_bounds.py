from dataclasses import dataclass
from typing import Dict, Sequence


@dataclass(frozen=True)
class ViewportBounds:
    """
    The latitude/longitude rectangle currently visible on the map.

    All edges are decimal degrees. ``west > east`` is not an error: it means the
    viewport spans the antimeridian and covers ``[west, 180] U [-180, east]``.

    Edges are inclusive. ``north < south`` is not rejected; such a rectangle
    simply contains no point.
    """

    north: float
    south: float
    east: float
    west: float

    @property
    def crosses_antimeridian(self) -> bool:
        """True when the viewport wraps across the 180/-180 longitude line."""
        return self.west > self.east

    def contains_latitude(self, latitude: float) -> bool:
        return self.south <= latitude <= self.north

    def contains_longitude(self, longitude: float) -> bool:
        if self.west <= self.east:
            return self.west <= longitude <= self.east
        return longitude >= self.west or longitude <= self.east

    def contains(self, latitude: float, longitude: float) -> bool:
        """
        Check whether a point lies inside the rectangle.

        Args:
            latitude: Point latitude in degrees
            longitude: Point longitude in degrees

        Returns:
            True if both the latitude and the longitude test pass
        """
        return self.contains_latitude(latitude) and self.contains_longitude(longitude)

    @classmethod
    def from_extent(cls, extent: Sequence[float]) -> 'ViewportBounds':
        """
        Build bounds from a map extent ordered ``[west, south, east, north]``.

        This is the order map libraries report a lon/lat extent in.
        """
        if len(extent) != 4:
            raise ValueError(f"Extent must have 4 values [west, south, east, north], got {len(extent)}")
        west, south, east, north = extent
        return cls(north=north, south=south, east=east, west=west)

    def to_dict(self) -> Dict[str, float]:
        return {
            'north': self.north,
            'south': self.south,
            'east': self.east,
            'west': self.west,
        }
