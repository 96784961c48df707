# src/wayfindar/db/seeder.py
"""Insert the default buildings into an empty ``ar_buildings`` table.

The check is "table is empty", not "these particular rows exist": once any
building is present the seeder never writes again, even if the sample rows
were edited or deleted afterwards.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .repository import BuildingRepository
from .seed_data import SEED_BUILDINGS, BuildingSeed

logger = logging.getLogger("wayfindar.seeder")


class SeedState(enum.Enum):
    NOT_SEEDED = "not_seeded"
    SEEDED = "seeded"


@dataclass(frozen=True)
class SeedResult:
    before: int
    after: int
    inserted: int
    # another instance seeded the table between our count and our insert
    raced: bool = False

    @property
    def state(self) -> SeedState:
        return SeedState.SEEDED if self.after > 0 else SeedState.NOT_SEEDED


def seed_state(session: Session) -> SeedState:
    if BuildingRepository(session).count() == 0:
        return SeedState.NOT_SEEDED
    return SeedState.SEEDED


def ensure_seeded(session: Session, seeds: Sequence[BuildingSeed] = SEED_BUILDINGS) -> SeedResult:
    """
    Insert ``seeds`` in a single transaction if the buildings table is empty.

    A unique-name violation means a concurrent instance won the race; the
    batch is rolled back and reported as already seeded. Any other store
    error propagates to the caller.
    """
    repo = BuildingRepository(session)
    before = repo.count()
    if before > 0:
        logger.info("Buildings table already has %d rows; skipping sample data.", before)
        return SeedResult(before=before, after=before, inserted=0)

    logger.info("Adding %d sample AR buildings...", len(seeds))
    try:
        inserted = repo.add_all(seed.to_model() for seed in seeds)
        session.commit()
    except IntegrityError:
        session.rollback()
        after = repo.count()
        logger.warning(
            "Sample buildings were inserted by a concurrent instance; keeping existing %d rows.",
            after,
        )
        return SeedResult(before=before, after=after, inserted=0, raced=True)
    except Exception:
        session.rollback()
        raise

    after = repo.count()
    logger.info("Sample buildings added successfully (%d inserted, %d total).", inserted, after)
    return SeedResult(before=before, after=after, inserted=inserted)
