from __future__ import annotations
from typing import Iterable, List, Optional
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from wayfindar.db.models import ARBuilding, User


class BuildingRepository:
    def __init__(self, session: Session):
        self.session = session

    def count(self) -> int:
        return int(self.session.scalar(select(func.count()).select_from(ARBuilding)) or 0)

    def list_active(self) -> List[ARBuilding]:
        stmt = select(ARBuilding).where(ARBuilding.is_active.is_(True)).order_by(ARBuilding.name)
        return list(self.session.scalars(stmt).all())

    def get_active(self, building_id: int) -> Optional[ARBuilding]:
        stmt = select(ARBuilding).where(
            ARBuilding.id == building_id,
            ARBuilding.is_active.is_(True),
        )
        return self.session.scalar(stmt)

    def names(self) -> List[str]:
        return list(self.session.scalars(select(ARBuilding.name).order_by(ARBuilding.name)).all())

    def add_all(self, buildings: Iterable[ARBuilding]) -> int:
        """
        Stage buildings for insert and flush so constraint errors surface here.
        Note: commit is the caller's responsibility.
        """
        items = list(buildings)
        self.session.add_all(items)
        self.session.flush()
        return len(items)


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def count(self) -> int:
        return int(self.session.scalar(select(func.count()).select_from(User)) or 0)
