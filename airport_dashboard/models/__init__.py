"""
Data models for the airport_dashboard package.

This package contains the airport record, the viewport rectangle, the
airport catalog and the queryable collections used to query them.
"""

from .airport import Airport, AirportType, Coordinates
from .viewport_bounds import ViewportBounds
from .queryable_collection import QueryableCollection
from .airport_collection import AirportCollection
from .catalog import AirportCatalog
from .validation import (
    ValidationResult,
    ValidationError,
    ModelValidationError,
    ContextNotInitializedError,
)

__all__ = [
    # Core models
    'Airport',
    'AirportType',
    'Coordinates',
    'ViewportBounds',
    'AirportCatalog',
    # Queryable collections
    'QueryableCollection',
    'AirportCollection',
    # Validation
    'ValidationResult',
    'ValidationError',
    'ModelValidationError',
    'ContextNotInitializedError',
]
