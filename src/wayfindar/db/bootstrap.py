# src/wayfindar/db/bootstrap.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from alembic.util import CommandError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .base import build_session_factory, get_session
from .migrations import run_migrations
from .repository import BuildingRepository, UserRepository
from .seeder import SeedResult, ensure_seeded

logger = logging.getLogger("wayfindar.bootstrap")

# store and migration failures; anything else propagates
STARTUP_ERRORS = (SQLAlchemyError, CommandError)


@dataclass
class StartupReport:
    migrated: bool = False
    revision: Optional[str] = None
    seed: Optional[SeedResult] = None
    building_count: Optional[int] = None
    user_count: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def initialize_database(
    engine: Engine,
    session_factory: Optional[sessionmaker] = None,
    seed: bool = True,
) -> StartupReport:
    """
    Migrate the schema, seed sample buildings into an empty table and log counts.

    Store and migration errors are logged and returned in the report, never
    raised; the application keeps starting with whatever the database holds.
    """
    report = StartupReport()
    factory = session_factory or build_session_factory(engine)
    try:
        report.revision = run_migrations(engine)
        report.migrated = True
        logger.info("Database migrated successfully.")

        with get_session(factory) as db:
            if seed:
                report.seed = ensure_seeded(db)
            report.building_count = BuildingRepository(db).count()
            report.user_count = UserRepository(db).count()
    except STARTUP_ERRORS as e:
        report.error = e
        logger.exception("An error occurred while initializing the database: %s", e)
        return report

    logger.info("Total buildings in database: %d", report.building_count)
    logger.info("Total users in database: %d", report.user_count)
    return report
