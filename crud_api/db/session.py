"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from crud_api.core.config import get_settings

Base = declarative_base()

# widest value an INTEGER column holds (SQLite and the BIGINT of other engines)
MAX_DB_INTEGER = 2**63 - 1


@lru_cache
def get_engine() -> Engine:
    url = make_url((get_settings().database_url or "").strip() or "sqlite://")
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        # requests are served from the FastAPI threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, future=True, pool_pre_ping=True, connect_args=connect_args)


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True)


def reset_engine() -> None:
    """Dispose the cached engine and forget settings, so the next call re-reads DATABASE_URL."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    _get_sessionmaker.cache_clear()
    get_engine.cache_clear()
    get_settings.cache_clear()


@contextmanager
def get_session() -> Iterator[Session]:
    session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
