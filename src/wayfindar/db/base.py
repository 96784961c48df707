from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from ..config import settings
from contextlib import contextmanager


# Base class for all ORM models
class Base(DeclarativeBase):
    pass


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for ``database_url``.

    SQLite connections are shared with FastAPI's threadpool, so the
    same-thread check is turned off for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,             # set to True for raw SQL debugging
        pool_pre_ping=True,    # recycle dead connections automatically
        connect_args=connect_args,
    )


def build_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )


# Default engine & session factory built from settings
engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_session_factory(engine)


# Convenience session context manager
@contextmanager
def get_session(factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    db = (factory or SessionLocal)()
    try:
        yield db
    finally:
        db.close()
