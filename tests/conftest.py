import pytest

from wayfindar.db.base import build_engine, build_session_factory
from wayfindar.db.migrations import run_migrations


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'wayfindar.db'}"


@pytest.fixture
def engine(database_url):
    eng = build_engine(database_url)
    yield eng
    eng.dispose()


@pytest.fixture
def migrated_engine(engine):
    run_migrations(engine)
    return engine


@pytest.fixture
def session(migrated_engine):
    db = build_session_factory(migrated_engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def unreachable_url(tmp_path):
    # parent directory does not exist, so sqlite cannot open the file
    return f"sqlite:///{tmp_path / 'missing' / 'nested' / 'wayfindar.db'}"
