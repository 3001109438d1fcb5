from fastapi import APIRouter, HTTPException
from typing import List, Optional
import logging

from airport_dashboard.sync.coordinator import DashboardCoordinator
from .models import AirportResponse, BoundsModel, ViewportResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["viewport"])

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

@router.get("", response_model=ViewportResponse)
async def get_viewport():
    """Get the last viewport reported by the map."""
    c = _require_coordinator()
    bounds = c.bounds
    return ViewportResponse(
        bounds=BoundsModel.from_bounds(bounds) if bounds else None,
        crosses_antimeridian=bool(bounds and bounds.crosses_antimeridian),
        visible_count=len(c.visible_airports),
        total_count=len(c.catalog),
    )

@router.put("", response_model=List[AirportResponse])
async def set_viewport(body: BoundsModel):
    """
    Report the viewport after a pan or zoom settles.

    Returns the airports the table should now show.
    """
    c = _require_coordinator()
    visible = c.set_viewport_bounds(body.to_bounds())
    selected_id = c.selected_id
    return [AirportResponse.from_airport(a, selected_id) for a in visible]
