"""
Collaborator-facing handles for the map and table views.

A binding gives a view read access to the state it renders, plus the narrow
set of actions that view may perform. It subscribes the view's render
callback to the coordinator and releases those subscriptions on `close()`.
"""

from typing import Callable, List, Optional, TYPE_CHECKING
import logging

from ..models.validation import ContextNotInitializedError
from .events import Subscription

if TYPE_CHECKING:
    from ..models.airport import Airport
    from ..models.viewport_bounds import ViewportBounds
    from .coordinator import DashboardCoordinator

logger = logging.getLogger(__name__)

RenderCallback = Callable[[List['Airport'], Optional[str]], None]


class ViewBinding:
    """Common plumbing for map and table bindings."""

    view_name = 'view'

    def __init__(self, coordinator: 'DashboardCoordinator', render: Optional[RenderCallback] = None):
        self._coordinator: Optional['DashboardCoordinator'] = coordinator
        self._render = render
        self._last_rendered = None
        self._subscriptions: List[Subscription] = [
            coordinator.on_selection_change(self._on_state_change),
        ]
        self._subscribe(coordinator)

    def _subscribe(self, coordinator: 'DashboardCoordinator') -> None:
        raise NotImplementedError

    @property
    def coordinator(self) -> 'DashboardCoordinator':
        self._ensure_open()
        return self._coordinator

    def _ensure_open(self) -> None:
        if self._coordinator is None:
            raise ContextNotInitializedError(f"{self.view_name} binding used after it was closed")

    @property
    def airports(self) -> List['Airport']:
        raise NotImplementedError

    @property
    def selected_id(self) -> Optional[str]:
        return self.coordinator.selected_id

    def is_selected(self, airport_id: str) -> bool:
        return self.coordinator.is_selected(airport_id)

    def select(self, airport_id: str) -> Optional[str]:
        """Toggle the shared selection on an airport."""
        return self.coordinator.select(airport_id)

    def refresh(self) -> None:
        """Invoke the render callback with the current state."""
        airports, selected_id = self.airports, self.selected_id
        self._last_rendered = (list(airports), selected_id)
        if self._render is not None:
            self._render(airports, selected_id)

    @property
    def closed(self) -> bool:
        return self._coordinator is None

    def close(self) -> None:
        """Release subscriptions. Closing twice is harmless."""
        if self._coordinator is None:
            return
        for subscription in self._subscriptions:
            subscription.close()
        self._subscriptions = []
        coordinator = self._coordinator
        self._coordinator = None
        coordinator._release(self)
        logger.debug(f"{self.view_name} binding closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _on_state_change(self, *_args) -> None:
        # Another view may have closed this one earlier in the same notification
        if self.closed:
            return
        if (self.airports, self.selected_id) == self._last_rendered:
            return
        self.refresh()


class MapBinding(ViewBinding):
    """
    Handle used by the map view.

    The map shows the full catalog, highlights the selected airport, reports
    viewport changes and forwards marker clicks and hovers. Hover is local to
    the map and never touches the shared selection.
    """

    view_name = 'map'

    def __init__(self, coordinator: 'DashboardCoordinator', render: Optional[RenderCallback] = None):
        self._hovered_id: Optional[str] = None
        super().__init__(coordinator, render)

    def _subscribe(self, coordinator: 'DashboardCoordinator') -> None:
        self._subscriptions.append(coordinator.on_catalog_change(self._on_state_change))

    @property
    def airports(self) -> List['Airport']:
        return self.coordinator.all_airports

    @property
    def selected_airport(self) -> Optional['Airport']:
        return self.coordinator.selected_airport

    @property
    def hovered_airport(self) -> Optional['Airport']:
        """Airport under the pointer, None when not hovering or the id is unknown."""
        if self._hovered_id is None:
            return None
        return self.coordinator.catalog.get_airport(self._hovered_id)

    def on_viewport_change(self, bounds: 'ViewportBounds') -> None:
        self.coordinator.set_viewport_bounds(bounds)

    def on_marker_click(self, airport_id: str) -> Optional[str]:
        return self.select(airport_id)

    def on_marker_hover(self, airport_id: Optional[str]) -> None:
        self._ensure_open()
        self._hovered_id = airport_id


class TableBinding(ViewBinding):
    """
    Handle used by the table view.

    The table lists only the airports inside the map viewport, highlights the
    selected row, forwards row clicks and commits inline name edits.
    """

    view_name = 'table'

    def _subscribe(self, coordinator: 'DashboardCoordinator') -> None:
        self._subscriptions.append(coordinator.on_visible_change(self._on_state_change))

    @property
    def airports(self) -> List['Airport']:
        return self.coordinator.visible_airports

    def on_row_click(self, airport_id: str) -> Optional[str]:
        return self.select(airport_id)

    def on_name_edit_commit(self, airport_id: str, new_name: str) -> bool:
        return self.coordinator.rename(airport_id, new_name)
