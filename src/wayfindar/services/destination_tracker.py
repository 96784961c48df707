from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, MutableMapping, Optional

from fastapi import Request

DESTINATION_KEY = "destination_building_id"
SELECTED_AT_KEY = "destination_selected_at"


class DestinationTracker:
    """Remembers which building the visitor is navigating to, per session."""

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    @property
    def building_id(self) -> Optional[int]:
        value = self.session.get(DESTINATION_KEY)
        return int(value) if value is not None else None

    @property
    def selected_at(self) -> Optional[datetime]:
        raw = self.session.get(SELECTED_AT_KEY)
        return datetime.fromisoformat(raw) if raw else None

    def set(self, building_id: int) -> None:
        self.session[DESTINATION_KEY] = int(building_id)
        self.session[SELECTED_AT_KEY] = datetime.now(timezone.utc).isoformat()

    def clear(self) -> None:
        self.session.pop(DESTINATION_KEY, None)
        self.session.pop(SELECTED_AT_KEY, None)


def get_destination_tracker(request: Request) -> DestinationTracker:
    # FastAPI dependency; one tracker per request over the session cookie
    return DestinationTracker(request.session)
