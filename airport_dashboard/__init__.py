"""
Airport dashboard state library.

Keeps a map view and a table view of airports in sync: the map viewport
filters the table, and a selection made in either view is shared by both.

The main public API includes:
- Airport: Airport record
- ViewportBounds: Map viewport rectangle
- AirportCatalog: Ordered airport dataset with rename support
- filter_by_bounds: Viewport filter with antimeridian handling
- SelectionState: Shared toggle selection
- DashboardCoordinator: Owner of the dashboard state and view bindings
"""

from .models import Airport, AirportType, Coordinates, ViewportBounds, AirportCatalog
from .utils.bounds_filter import filter_by_bounds
from .sync import SelectionState, DashboardCoordinator

__version__ = '0.1.0'
__all__ = [
    'Airport',
    'AirportType',
    'Coordinates',
    'ViewportBounds',
    'AirportCatalog',
    'filter_by_bounds',
    'SelectionState',
    'DashboardCoordinator',
]
