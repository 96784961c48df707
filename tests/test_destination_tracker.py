from datetime import datetime

from wayfindar.services.destination_tracker import DESTINATION_KEY, DestinationTracker


def test_set_and_clear():
    session = {}
    tracker = DestinationTracker(session)
    assert tracker.building_id is None
    assert tracker.selected_at is None

    tracker.set(3)
    assert session[DESTINATION_KEY] == 3
    assert tracker.building_id == 3
    assert isinstance(tracker.selected_at, datetime)

    tracker.clear()
    assert session == {}
    assert tracker.building_id is None


def test_clear_on_empty_session_is_harmless():
    tracker = DestinationTracker({})
    tracker.clear()
    assert tracker.building_id is None
