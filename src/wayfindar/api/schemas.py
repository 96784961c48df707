# src/wayfindar/api/schemas.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel

from wayfindar.db.models import ARBuilding


# ------------------------------------------------------------
# Building schemas (aligned with db.models.ARBuilding)
# ------------------------------------------------------------
class PositionOut(BaseModel):
    x: float
    y: float
    z: float


class BuildingOut(BaseModel):
    id: int
    name: str
    description: str
    position: PositionOut
    model_type: str
    category: str
    floor_level: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, b: ARBuilding) -> "BuildingOut":
        x, y, z = b.position
        return cls(
            id=b.id,
            name=b.name,
            description=b.description,
            position=PositionOut(x=x, y=y, z=z),
            model_type=b.model_type,
            category=b.category,
            floor_level=b.floor_level,
            created_at=b.created_at,
        )


class BuildingListResponse(BaseModel):
    total: int
    items: List[BuildingOut]


# ------------------------------------------------------------
# Home / navigation
# ------------------------------------------------------------
class HomeOut(BaseModel):
    app: str
    message: str
    buildings: int


class ErrorOut(BaseModel):
    error: str
    request_id: Optional[str] = None


class DestinationOut(BaseModel):
    building: Optional[BuildingOut] = None
    selected_at: Optional[datetime] = None
