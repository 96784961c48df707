# src/wayfindar/db/seed_data.py
"""Default campus buildings inserted into an empty ``ar_buildings`` table."""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import ARBuilding
from .types import Position


class BuildingSeed(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = ""
    position: Position
    model_type: str
    category: str
    floor_level: str
    is_active: bool = True

    @field_validator("position")
    @classmethod
    def _finite_position(cls, v: Position) -> Position:
        return Position.of(v)

    def to_model(self) -> ARBuilding:
        # created_at is left to the column default so it reflects insert time
        return ARBuilding(
            name=self.name,
            description=self.description,
            position=Position(*self.position),
            model_type=self.model_type,
            category=self.category,
            floor_level=self.floor_level,
            is_active=self.is_active,
        )


SEED_BUILDINGS: Tuple[BuildingSeed, ...] = (
    BuildingSeed(
        name="Main Building",
        description="Administration and offices",
        position=Position(0, 0, 0),
        model_type="main",
        category="Administration",
        floor_level="Ground Floor",
    ),
    BuildingSeed(
        name="Library",
        description="Study resources center",
        position=Position(2, 0, 1),
        model_type="library",
        category="Academic",
        floor_level="Ground Floor",
    ),
    BuildingSeed(
        name="Science Center",
        description="Laboratories and research",
        position=Position(-2, 0, -1),
        model_type="science",
        category="Academic",
        floor_level="Level 1",
    ),
    BuildingSeed(
        name="Main Cafeteria",
        description="Food court and dining area",
        position=Position(1, 0, 2),
        model_type="cafeteria",
        category="Services",
        floor_level="Ground Floor",
    ),
)
