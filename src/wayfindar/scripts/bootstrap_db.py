"""Migrate the database and seed sample buildings without starting the web server.

    python -m wayfindar.scripts.bootstrap_db [--database-url URL] [--no-seed]
"""
import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv


def main(argv: Optional[List[str]] = None) -> int:
    # .env into os.environ before settings are read
    load_dotenv()

    from wayfindar.config import settings
    from wayfindar.db.base import build_engine
    from wayfindar.db.bootstrap import initialize_database
    from wayfindar.logging_setup import setup_logging

    parser = argparse.ArgumentParser(description="Apply migrations and seed sample data.")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    parser.add_argument("--no-seed", action="store_true", help="only run migrations")
    args = parser.parse_args(argv)

    # initialize logging (console)
    setup_logging(level=settings.LOG_LEVEL)
    logger = logging.getLogger("wayfindar")

    engine = build_engine(args.database_url)
    try:
        report = initialize_database(engine, seed=not args.no_seed)
    finally:
        engine.dispose()

    if not report.ok:
        logger.error("Database initialization failed: %s", report.error)
        return 1
    logger.info("✅ Database ready at revision %s.", report.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
