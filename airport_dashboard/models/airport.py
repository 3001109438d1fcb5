from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Union


class AirportType(str, Enum):
    """Closed set of airport categories shown on the dashboard."""

    INTERNATIONAL = 'international'
    DOMESTIC = 'domestic'
    REGIONAL = 'regional'
    PRIVATE = 'private'


@dataclass(frozen=True)
class Coordinates:
    """
    WGS84 position in decimal degrees.

    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)
    """

    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    def to_dict(self) -> Dict[str, float]:
        return {'latitude': self.latitude, 'longitude': self.longitude}


@dataclass(frozen=True)
class Airport:
    """
    Data class for storing airport information.

    Records are immutable. The display name is the only field that changes
    over the lifetime of a catalog, and it does so through `with_name`, which
    returns a new record with the same id.
    """

    id: str  # stable catalog identifier
    code: str  # IATA code (e.g. "LAX", "SFO")
    name: str
    city: str
    country: str
    coordinates: Coordinates
    elevation: int  # feet above sea level
    runways: int
    type: AirportType
    has_starbucks: bool = False

    def __post_init__(self):
        # Accept plain strings for the category, as found in seed data.
        if not isinstance(self.type, AirportType):
            object.__setattr__(self, 'type', AirportType(self.type))

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    def with_name(self, name: str) -> 'Airport':
        """Return a copy of this airport carrying a new display name."""
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert airport to the dictionary shape the browser client reads."""
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
            'city': self.city,
            'country': self.country,
            'coordinates': self.coordinates.to_dict(),
            'elevation': self.elevation,
            'runways': self.runways,
            'type': self.type.value,
            'hasStarbucks': self.has_starbucks,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Airport':
        """
        Build an airport from a seed record.

        Both the nested ``coordinates`` mapping and flat ``latitude`` /
        ``longitude`` keys are accepted.

        Args:
            data: Mapping with the airport fields

        Returns:
            Airport instance

        Raises:
            KeyError: if a required field is missing
            ValueError: if coordinates or type are out of range
        """
        coords: Union[Dict[str, float], Coordinates] = data.get('coordinates') or {
            'latitude': data['latitude'],
            'longitude': data['longitude'],
        }
        if not isinstance(coords, Coordinates):
            coords = Coordinates(latitude=float(coords['latitude']), longitude=float(coords['longitude']))
        return cls(
            id=str(data['id']),
            code=data['code'],
            name=data['name'],
            city=data.get('city', ''),
            country=data.get('country', ''),
            coordinates=coords,
            elevation=int(data.get('elevation', 0)),
            runways=int(data.get('runways', 0)),
            type=data.get('type', AirportType.REGIONAL),
            has_starbucks=bool(data.get('hasStarbucks', data.get('has_starbucks', False))),
        )

    def __str__(self):
        return f"{self.code} - {self.name}"
