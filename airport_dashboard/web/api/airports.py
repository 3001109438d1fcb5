from fastapi import APIRouter, HTTPException, Path
from typing import List, Optional
import logging

from airport_dashboard.sync.coordinator import DashboardCoordinator
from airport_dashboard.web.config import MAX_ID_LENGTH
from .models import AirportResponse, RenameRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["airports"])

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

@router.get("", response_model=List[AirportResponse])
async def get_airports():
    """Get every airport in the catalog, for the map markers."""
    c = _require_coordinator()
    selected_id = c.selected_id
    return [AirportResponse.from_airport(a, selected_id) for a in c.all_airports]

@router.get("/visible", response_model=List[AirportResponse])
async def get_visible_airports():
    """Get the airports inside the current viewport, for the table rows."""
    c = _require_coordinator()
    selected_id = c.selected_id
    return [AirportResponse.from_airport(a, selected_id) for a in c.visible_airports]

@router.get("/{airport_id}", response_model=AirportResponse)
async def get_airport(airport_id: str = Path(..., max_length=MAX_ID_LENGTH)):
    """Get one airport by id."""
    c = _require_coordinator()
    airport = c.catalog.get_airport(airport_id)
    if not airport:
        raise HTTPException(status_code=404, detail=f"Airport {airport_id} not found")
    return AirportResponse.from_airport(airport, c.selected_id)

@router.patch("/{airport_id}/name", response_model=AirportResponse)
async def rename_airport(body: RenameRequest, airport_id: str = Path(..., max_length=MAX_ID_LENGTH)):
    """
    Commit an inline name edit from the table.

    Blank names are ignored and the airport is returned unchanged.
    """
    c = _require_coordinator()
    if airport_id not in c.catalog:
        raise HTTPException(status_code=404, detail=f"Airport {airport_id} not found")

    if c.rename(airport_id, body.name):
        logger.info(f"Airport {airport_id} renamed to '{body.name.strip()}'")

    return AirportResponse.from_airport(c.catalog.get_airport(airport_id), c.selected_id)
