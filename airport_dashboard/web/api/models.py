"""
Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from airport_dashboard.models.airport import Airport
from airport_dashboard.models.viewport_bounds import ViewportBounds
from airport_dashboard.sync.coordinator import DashboardSnapshot
from airport_dashboard.web.config import MAX_ID_LENGTH, MAX_NAME_LENGTH


class CoordinatesModel(BaseModel):
    latitude: float
    longitude: float


class AirportResponse(BaseModel):
    """Pydantic model for airport rows and markers."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    city: str
    country: str
    coordinates: CoordinatesModel
    elevation: int
    runways: int
    type: str
    has_starbucks: bool
    selected: bool = False

    @classmethod
    def from_airport(cls, airport: Airport, selected_id: Optional[str] = None):
        """Create AirportResponse from Airport domain model."""
        return cls(
            id=airport.id,
            code=airport.code,
            name=airport.name,
            city=airport.city,
            country=airport.country,
            coordinates=CoordinatesModel(
                latitude=airport.latitude,
                longitude=airport.longitude,
            ),
            elevation=airport.elevation,
            runways=airport.runways,
            type=airport.type.value,
            has_starbucks=airport.has_starbucks,
            selected=selected_id is not None and airport.id == selected_id,
        )


class BoundsModel(BaseModel):
    """Viewport rectangle reported by the map. West may exceed east."""

    north: float = Field(..., ge=-90, le=90)
    south: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)
    west: float = Field(..., ge=-180, le=180)

    def to_bounds(self) -> ViewportBounds:
        return ViewportBounds(north=self.north, south=self.south, east=self.east, west=self.west)

    @classmethod
    def from_bounds(cls, bounds: ViewportBounds):
        return cls(north=bounds.north, south=bounds.south, east=bounds.east, west=bounds.west)


class ViewportResponse(BaseModel):
    bounds: Optional[BoundsModel]
    crosses_antimeridian: bool
    visible_count: int
    total_count: int


class SelectRequest(BaseModel):
    id: str = Field(..., min_length=1, max_length=MAX_ID_LENGTH)


class RenameRequest(BaseModel):
    name: str = Field(..., max_length=MAX_NAME_LENGTH)


class SelectionResponse(BaseModel):
    """Current selection. ``airport`` is None when the id is not in the catalog."""

    selected_id: Optional[str]
    airport: Optional[AirportResponse] = None


class DashboardResponse(BaseModel):
    bounds: Optional[BoundsModel]
    selected_id: Optional[str]
    visible_ids: List[str]
    visible_count: int
    total_count: int

    @classmethod
    def from_snapshot(cls, snapshot: DashboardSnapshot):
        return cls(
            bounds=BoundsModel.from_bounds(snapshot.bounds) if snapshot.bounds else None,
            selected_id=snapshot.selected_id,
            visible_ids=snapshot.visible_ids,
            visible_count=snapshot.visible_count,
            total_count=snapshot.total_count,
        )
