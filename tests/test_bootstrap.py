import logging

import pytest

from wayfindar.db import bootstrap
from wayfindar.db.base import build_engine
from wayfindar.db.bootstrap import initialize_database
from wayfindar.db.migrations import head_revision
from wayfindar.scripts.bootstrap_db import main as bootstrap_main


def test_fresh_store_is_migrated_and_seeded(engine):
    report = initialize_database(engine)

    assert report.ok
    assert report.migrated
    assert report.revision == head_revision()
    assert report.seed.inserted == 4
    assert report.building_count == 4
    assert report.user_count == 0


def test_restart_does_not_duplicate(engine):
    initialize_database(engine)
    report = initialize_database(engine)

    assert report.ok
    assert report.seed.inserted == 0
    assert report.building_count == 4


def test_seeding_can_be_disabled(engine):
    report = initialize_database(engine, seed=False)

    assert report.ok
    assert report.seed is None
    assert report.building_count == 0


def test_unreachable_store_is_logged_not_raised(unreachable_url, caplog):
    engine = build_engine(unreachable_url)
    with caplog.at_level(logging.ERROR, logger="wayfindar.bootstrap"):
        report = initialize_database(engine)
    engine.dispose()

    assert not report.ok
    assert not report.migrated
    assert report.building_count is None
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors
    assert "initializing the database" in errors[0].getMessage()
    assert errors[0].exc_info is not None


def test_programming_errors_are_not_swallowed(engine, monkeypatch):
    def broken(session):
        raise RuntimeError("bug in seeding code")

    monkeypatch.setattr(bootstrap, "ensure_seeded", broken)
    with pytest.raises(RuntimeError):
        initialize_database(engine)


def test_bootstrap_script(database_url, unreachable_url):
    assert bootstrap_main(["--database-url", database_url]) == 0
    # second run finds the schema current and the table populated
    assert bootstrap_main(["--database-url", database_url]) == 0
    assert bootstrap_main(["--database-url", unreachable_url]) == 1
