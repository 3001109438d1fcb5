from typing import Callable, Optional, TYPE_CHECKING
import logging

from .events import EventEmitter, Subscription

if TYPE_CHECKING:
    from ..models.airport import Airport
    from ..models.catalog import AirportCatalog

logger = logging.getLogger(__name__)


class SelectionState:
    """
    The single "currently selected airport" shared by the map and the table.

    Both views change the selection through `select`, which toggles: selecting
    the airport that is already selected clears the selection. The id is not
    checked against the catalog; lookups through `resolve` treat an unknown id
    as nothing selected.
    """

    def __init__(self):
        self._selected_id: Optional[str] = None
        self._changed = EventEmitter('selection')

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def select(self, airport_id: str) -> Optional[str]:
        """
        Apply a click on an airport from either view.

        Args:
            airport_id: Id of the clicked airport

        Returns:
            The new selected id, None if the click deselected
        """
        new_id = None if airport_id == self._selected_id else airport_id
        self._set(new_id)
        return new_id

    def clear(self) -> None:
        self._set(None)

    def is_selected(self, airport_id: str) -> bool:
        return self._selected_id is not None and self._selected_id == airport_id

    def resolve(self, catalog: 'AirportCatalog') -> Optional['Airport']:
        """
        Look the selection up in a catalog.

        Returns:
            The selected airport, or None when nothing is selected or the id is
            not in the catalog
        """
        if self._selected_id is None:
            return None
        return catalog.get_airport(self._selected_id)

    def on_change(self, listener: Callable[[Optional[str]], None]) -> Subscription:
        """Register a callback invoked with the new id whenever it changes."""
        return self._changed.subscribe(listener)

    def close(self) -> None:
        self._changed.clear()

    def _set(self, new_id: Optional[str]) -> None:
        if new_id == self._selected_id:
            return
        previous = self._selected_id
        self._selected_id = new_id
        logger.debug(f"Selection changed from {previous} to {new_id}")
        self._changed.emit(new_id)

    def __repr__(self):
        return f"SelectionState(selected_id={self._selected_id!r})"
