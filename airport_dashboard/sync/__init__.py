"""
Selection and viewport synchronization between the dashboard views.
"""

from .events import EventEmitter, Subscription
from .selection import SelectionState
from .bindings import ViewBinding, MapBinding, TableBinding
from .coordinator import DashboardCoordinator, DashboardSnapshot

__all__ = [
    'EventEmitter',
    'Subscription',
    'SelectionState',
    'ViewBinding',
    'MapBinding',
    'TableBinding',
    'DashboardCoordinator',
    'DashboardSnapshot',
]
