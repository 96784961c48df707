# src/wayfindar/api/controllers.py
import logging
import uuid

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from wayfindar.db.repository import BuildingRepository
from wayfindar.services.destination_tracker import DestinationTracker, get_destination_tracker

from .db import get_db
from .routing import Controller
from .schemas import BuildingListResponse, BuildingOut, DestinationOut, ErrorOut, HomeOut

logger = logging.getLogger("wayfindar.api")

APP_NAME = "WayFind AR"
GENERIC_ERROR = "An error occurred while processing your request."

home = Controller("home")
buildings = Controller("buildings")
navigation = Controller("navigation")


# ---------------------------
# Home
# ---------------------------
@home.action()
def index(db: Session = Depends(get_db)) -> HomeOut:
    return HomeOut(
        app=APP_NAME,
        message=f"Welcome to {APP_NAME}",
        buildings=BuildingRepository(db).count(),
    )


@home.action()
def privacy() -> dict:
    return {
        "policy": (
            f"{APP_NAME} stores only a session cookie holding your selected "
            "destination. No location data leaves your device."
        )
    }


def error_payload(request_id: str | None = None) -> ErrorOut:
    return ErrorOut(error=GENERIC_ERROR, request_id=request_id or uuid.uuid4().hex)


@home.action("error")
def error(request: Request) -> ErrorOut:
    return error_payload(request.headers.get("x-request-id"))


# ---------------------------
# Buildings
# ---------------------------
@buildings.action("index")
def list_buildings(db: Session = Depends(get_db)) -> BuildingListResponse:
    items = [BuildingOut.from_model(b) for b in BuildingRepository(db).list_active()]
    return BuildingListResponse(total=len(items), items=items)


@buildings.action()
def details(id: int, db: Session = Depends(get_db)) -> BuildingOut:
    building = BuildingRepository(db).get_active(id)
    if building is None:
        raise HTTPException(status_code=404, detail=f"Building {id} not found")
    return BuildingOut.from_model(building)


# ---------------------------
# Navigation (destination kept in the session)
# ---------------------------
@navigation.action("set")
def set_destination(
    id: int,
    db: Session = Depends(get_db),
    tracker: DestinationTracker = Depends(get_destination_tracker),
) -> DestinationOut:
    building = BuildingRepository(db).get_active(id)
    if building is None:
        raise HTTPException(status_code=404, detail=f"Building {id} not found")
    tracker.set(building.id)
    logger.info("Destination set to %s (id=%s)", building.name, building.id)
    return DestinationOut(building=BuildingOut.from_model(building), selected_at=tracker.selected_at)


@navigation.action()
def current(
    db: Session = Depends(get_db),
    tracker: DestinationTracker = Depends(get_destination_tracker),
) -> DestinationOut:
    building_id = tracker.building_id
    if building_id is None:
        return DestinationOut()
    building = BuildingRepository(db).get_active(building_id)
    if building is None:
        # destination was removed or deactivated since it was selected
        tracker.clear()
        return DestinationOut()
    return DestinationOut(building=BuildingOut.from_model(building), selected_at=tracker.selected_at)


@navigation.action()
def clear(tracker: DestinationTracker = Depends(get_destination_tracker)) -> DestinationOut:
    tracker.clear()
    return DestinationOut()


CONTROLLERS = (home, buildings, navigation)
