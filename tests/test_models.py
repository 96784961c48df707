from sqlalchemy import inspect

from wayfindar.db.migrations import current_revision, head_revision, run_migrations

TABLES = {"ar_buildings", "users", "alembic_version"}


def test_tables_exist(migrated_engine):
    insp = inspect(migrated_engine)
    names = set(insp.get_table_names())
    assert TABLES.issubset(names)


def test_building_name_is_unique(migrated_engine):
    insp = inspect(migrated_engine)
    unique_indexes = [ix for ix in insp.get_indexes("ar_buildings") if ix["unique"]]
    assert any(ix["column_names"] == ["name"] for ix in unique_indexes)


def test_fresh_database_has_no_revision(engine):
    assert current_revision(engine) is None


def test_migrations_reach_head_and_are_idempotent(engine):
    first = run_migrations(engine)
    second = run_migrations(engine)
    assert first == second == head_revision()
    assert current_revision(engine) == head_revision()
