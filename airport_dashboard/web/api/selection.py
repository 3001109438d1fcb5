from fastapi import APIRouter, HTTPException
from typing import Optional
import logging

from airport_dashboard.sync.coordinator import DashboardCoordinator
from .models import AirportResponse, DashboardResponse, SelectRequest, SelectionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["selection"])

# Global coordinator reference
coordinator: Optional[DashboardCoordinator] = None

def set_coordinator(c: Optional[DashboardCoordinator]):
    """Set the global coordinator reference."""
    global coordinator
    coordinator = c

def _require_coordinator() -> DashboardCoordinator:
    if coordinator is None or coordinator.closed:
        raise HTTPException(status_code=500, detail="Coordinator not loaded")
    return coordinator

def _selection_response(c: DashboardCoordinator) -> SelectionResponse:
    airport = c.selected_airport
    return SelectionResponse(
        selected_id=c.selected_id,
        airport=AirportResponse.from_airport(airport, c.selected_id) if airport else None,
    )

@router.get("/selection", response_model=SelectionResponse)
async def get_selection():
    """Get the currently selected airport."""
    return _selection_response(_require_coordinator())

@router.post("/selection", response_model=SelectionResponse)
async def select_airport(body: SelectRequest):
    """
    Apply a click on a map marker or a table row.

    Clicking the selected airport again clears the selection.
    """
    c = _require_coordinator()
    c.select(body.id)
    return _selection_response(c)

@router.delete("/selection", response_model=SelectionResponse)
async def clear_selection():
    """Clear the selection."""
    c = _require_coordinator()
    c.clear_selection()
    return _selection_response(c)

@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard():
    """Get a summary of the shared dashboard state."""
    return DashboardResponse.from_snapshot(_require_coordinator().snapshot())

@router.post("/dashboard/reset", response_model=DashboardResponse)
async def reset_dashboard():
    """Clear the selection and forget the viewport."""
    c = _require_coordinator()
    c.reset()
    logger.info("Dashboard state reset")
    return DashboardResponse.from_snapshot(c.snapshot())
