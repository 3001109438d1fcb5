"""
Dashboard coordinator.

Owns the airport catalog, the selection and the latest map viewport, and keeps
the table's list of visible airports derived from them. Views never talk to
each other: the map and the table each get a binding from the coordinator and
re-render from the shared state it notifies them about.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, TYPE_CHECKING
import logging

from ..models.catalog import AirportCatalog
from ..models.validation import ContextNotInitializedError
from ..utils.bounds_filter import filter_by_bounds
from .events import EventEmitter, Subscription
from .selection import SelectionState
from .bindings import MapBinding, TableBinding, RenderCallback

if TYPE_CHECKING:
    from ..models.airport import Airport
    from ..models.viewport_bounds import ViewportBounds
    from .bindings import ViewBinding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Point-in-time summary of the dashboard state."""

    bounds: Optional['ViewportBounds']
    selected_id: Optional[str]
    visible_ids: List[str] = field(default_factory=list)
    total_count: int = 0

    @property
    def visible_count(self) -> int:
        return len(self.visible_ids)


class DashboardCoordinator:
    """
    Single source of truth for the map and table views.

    The visible airport list is recomputed from scratch after every change to
    the catalog or the viewport, so it never lags behind either of them.

    The coordinator is the owning context of the dashboard state: once closed,
    every accessor raises `ContextNotInitializedError`.

    Examples:
        >>> with DashboardCoordinator(catalog) as dashboard:
        ...     table = dashboard.bind_table(render=draw_rows)
        ...     dashboard.set_viewport_bounds(bounds)   # draw_rows called
        ...     dashboard.select("1")                   # draw_rows called
    """

    def __init__(self, catalog: Optional[AirportCatalog] = None):
        """
        Initialize the coordinator.

        Args:
            catalog: Airport dataset; the built-in seed catalog when omitted
        """
        if catalog is None:
            from ..data.mock_airports import load_mock_catalog
            catalog = load_mock_catalog()

        self._catalog = catalog
        self._selection = SelectionState()
        self._bounds: Optional['ViewportBounds'] = None
        self._visible: List['Airport'] = []
        self._closed = False

        self._visible_changed = EventEmitter('visible_airports')
        self._catalog_changed = EventEmitter('catalog')
        self._bindings: List['ViewBinding'] = []

        self._recompute_visible()
        logger.info(f"Dashboard coordinator ready with {len(self._catalog)} airports")

    # ========================================================================
    # Read accessors
    # ========================================================================

    @property
    def catalog(self) -> AirportCatalog:
        self._ensure_open()
        return self._catalog

    @property
    def bounds(self) -> Optional['ViewportBounds']:
        """Latest viewport reported by the map, None before the first report."""
        self._ensure_open()
        return self._bounds

    @property
    def all_airports(self) -> List['Airport']:
        """Every airport in the catalog. The map always shows all of them."""
        self._ensure_open()
        return self._catalog.airports.all()

    @property
    def visible_airports(self) -> List['Airport']:
        """Airports inside the current viewport, in catalog order."""
        self._ensure_open()
        return list(self._visible)

    @property
    def selected_id(self) -> Optional[str]:
        self._ensure_open()
        return self._selection.selected_id

    @property
    def selected_airport(self) -> Optional['Airport']:
        """The selected airport, or None if nothing (or a stale id) is selected."""
        self._ensure_open()
        return self._selection.resolve(self._catalog)

    def is_selected(self, airport_id: str) -> bool:
        self._ensure_open()
        return self._selection.is_selected(airport_id)

    def snapshot(self) -> DashboardSnapshot:
        self._ensure_open()
        return DashboardSnapshot(
            bounds=self._bounds,
            selected_id=self._selection.selected_id,
            visible_ids=[a.id for a in self._visible],
            total_count=len(self._catalog),
        )

    # ========================================================================
    # Mutators
    # ========================================================================

    def set_viewport_bounds(self, bounds: Optional['ViewportBounds']) -> List['Airport']:
        """
        Record the viewport the map settled on and re-derive the visible list.

        Args:
            bounds: New viewport, or None for "no viewport reported"

        Returns:
            The new visible airport list
        """
        self._ensure_open()
        self._bounds = bounds
        logger.debug(f"Viewport bounds updated to {bounds.to_dict() if bounds else None}")
        self._recompute_visible()
        self._visible_changed.emit(self.visible_airports)
        return self.visible_airports

    def select(self, airport_id: str) -> Optional[str]:
        """
        Toggle the selection on an airport.

        Returns:
            The new selected id, None if the call deselected
        """
        self._ensure_open()
        return self._selection.select(airport_id)

    def clear_selection(self) -> None:
        self._ensure_open()
        self._selection.clear()

    def rename(self, airport_id: str, new_name: str) -> bool:
        """
        Rename one airport.

        The name is trimmed; blank names and unknown ids are ignored. Only the
        airport's name changes. The selection is not touched.

        Args:
            airport_id: Id of the airport to rename
            new_name: Requested display name

        Returns:
            True if the airport was renamed
        """
        self._ensure_open()
        changed = self._catalog.rename(airport_id, new_name)
        if changed:
            self._recompute_visible()
            self._catalog_changed.emit(self.all_airports)
            self._visible_changed.emit(self.visible_airports)
        return changed

    def replace_catalog(self, catalog: AirportCatalog) -> None:
        """
        Swap in a new dataset.

        The selection is kept as is; if its id is no longer in the catalog it
        resolves to nothing selected.
        """
        self._ensure_open()
        self._catalog = catalog
        logger.info(f"Catalog replaced, now {len(catalog)} airports")
        self._recompute_visible()
        self._catalog_changed.emit(self.all_airports)
        self._visible_changed.emit(self.visible_airports)

    def reset(self) -> None:
        """Clear the selection and forget the viewport."""
        self._ensure_open()
        # Visible list must be current before selection listeners render
        self._bounds = None
        logger.debug("Viewport bounds cleared")
        self._recompute_visible()
        self._selection.clear()
        self._visible_changed.emit(self.visible_airports)

    # ========================================================================
    # Observers
    # ========================================================================

    def on_visible_change(self, listener: Callable[[List['Airport']], None]) -> Subscription:
        self._ensure_open()
        return self._visible_changed.subscribe(listener)

    def on_catalog_change(self, listener: Callable[[List['Airport']], None]) -> Subscription:
        self._ensure_open()
        return self._catalog_changed.subscribe(listener)

    def on_selection_change(self, listener: Callable[[Optional[str]], None]) -> Subscription:
        self._ensure_open()
        return self._selection.on_change(listener)

    # ========================================================================
    # View bindings
    # ========================================================================

    def bind_map(self, render: Optional[RenderCallback] = None) -> MapBinding:
        """
        Attach a map view.

        Args:
            render: Called with (all airports, selected id) on bind and after
                every catalog or selection change

        Returns:
            MapBinding; close it (or use it as a context manager) on teardown
        """
        self._ensure_open()
        binding = MapBinding(self, render)
        self._bindings.append(binding)
        binding.refresh()
        return binding

    def bind_table(self, render: Optional[RenderCallback] = None) -> TableBinding:
        """
        Attach a table view.

        Args:
            render: Called with (visible airports, selected id) on bind and
                after every viewport, catalog or selection change

        Returns:
            TableBinding; close it (or use it as a context manager) on teardown
        """
        self._ensure_open()
        binding = TableBinding(self, render)
        self._bindings.append(binding)
        binding.refresh()
        return binding

    def _release(self, binding: 'ViewBinding') -> None:
        if binding in self._bindings:
            self._bindings.remove(binding)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear down: close every binding and drop all listeners."""
        if self._closed:
            return
        for binding in list(self._bindings):
            binding.close()
        self._visible_changed.clear()
        self._catalog_changed.clear()
        self._selection.close()
        self._closed = True
        logger.info("Dashboard coordinator closed")

    def __enter__(self) -> 'DashboardCoordinator':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _ensure_open(self) -> None:
        if self._closed:
            raise ContextNotInitializedError("Dashboard coordinator has been closed")

    def _recompute_visible(self) -> None:
        self._visible = filter_by_bounds(self._catalog.airports, self._bounds)

    def __repr__(self):
        state = 'closed' if self._closed else f"airports={len(self._catalog)}, visible={len(self._visible)}"
        return f"DashboardCoordinator({state})"
