from typing import Any, Dict, Iterable, Iterator, List, Optional
import logging

from .airport import Airport
from .airport_collection import AirportCollection
from .validation import ValidationResult, ModelValidationError

logger = logging.getLogger(__name__)


class AirportCatalog:
    """
    Ordered, in-memory set of airports keyed by id.

    The catalog is the dataset both dashboard views read from. Airport ids are
    unique and keep their insertion order, which is the display order of the
    table. Records are immutable; the only supported change is `rename`, which
    swaps in a renamed copy at the same position.
    """

    def __init__(self, airports: Optional[Iterable[Airport]] = None):
        """
        Create a catalog.

        Args:
            airports: Initial airports, in display order

        Raises:
            ModelValidationError: if ids are duplicated or records are inconsistent
        """
        self._airports: Dict[str, Airport] = {}
        items = list(airports or [])
        result = self._validate(items)
        if not result.is_valid:
            raise ModelValidationError("Invalid airport catalog", validation_result=result)
        for warning in result.warnings:
            logger.warning(warning)
        for airport in items:
            self._airports[airport.id] = airport
        logger.debug(f"Catalog created with {len(self._airports)} airports")

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> 'AirportCatalog':
        """Build a catalog from plain seed records (see `Airport.from_dict`)."""
        return cls(Airport.from_dict(record) for record in records)

    # ========================================================================
    # Query API
    # ========================================================================

    @property
    def airports(self) -> AirportCollection:
        """
        Get queryable collection of all airports, in catalog order.

        Examples:
            visible = catalog.airports.in_bounds(bounds).all()
            international = catalog.airports.by_type("international").count()
        """
        return AirportCollection(list(self._airports.values()))

    def get_airport(self, airport_id: str) -> Optional[Airport]:
        """
        Get an airport by id.

        Args:
            airport_id: Catalog id

        Returns:
            The airport, or None if no airport carries this id
        """
        return self._airports.get(airport_id)

    def ids(self) -> List[str]:
        return list(self._airports.keys())

    # ========================================================================
    # Mutation
    # ========================================================================

    def rename(self, airport_id: str, new_name: str) -> bool:
        """
        Change the display name of one airport.

        The new name is trimmed first. A blank name or an unknown id leaves the
        catalog unchanged. Every other field of the airport is preserved.

        Args:
            airport_id: Id of the airport to rename
            new_name: Requested display name

        Returns:
            True if the catalog changed, False if the rename was ignored
        """
        name = (new_name or '').strip()
        if not name:
            logger.debug(f"Ignoring blank rename for airport {airport_id}")
            return False

        airport = self._airports.get(airport_id)
        if airport is None:
            logger.warning(f"Airport {airport_id} not found in catalog, rename ignored")
            return False

        if airport.name == name:
            return False

        # Dict assignment to an existing key keeps its position.
        self._airports[airport_id] = airport.with_name(name)
        logger.debug(f"Renamed airport {airport_id} ({airport.code}) from '{airport.name}' to '{name}'")
        return True

    # ========================================================================
    # Validation
    # ========================================================================

    @staticmethod
    def _validate(airports: List[Airport]) -> ValidationResult:
        result = ValidationResult()
        seen = set()
        for airport in airports:
            if not airport.id:
                result.add_error('id', 'Airport id is required', airport.code)
            elif airport.id in seen:
                result.add_error('id', 'Duplicate airport id', airport.id)
            seen.add(airport.id)

            if airport.runways < 0:
                result.add_error('runways', f'Runway count must be non-negative for {airport.id}', airport.runways)
            if not airport.name.strip():
                result.add_warning(f"Airport {airport.id} has an empty name")
        return result

    # ========================================================================
    # Container protocol
    # ========================================================================

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[Airport]:
        return iter(list(self._airports.values()))

    def __contains__(self, airport_id: object) -> bool:
        return airport_id in self._airports

    def to_dict(self) -> Dict[str, Any]:
        """Convert catalog to dictionary for serialization."""
        return {
            'airports': [a.to_dict() for a in self._airports.values()],
            'count': len(self._airports),
        }

    def __repr__(self):
        return f"AirportCatalog(airports={len(self._airports)})"
