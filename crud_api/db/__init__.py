"""Database helpers (engine/session export)."""

from .session import MAX_DB_INTEGER, Base, get_engine, get_session, reset_engine

__all__ = ["MAX_DB_INTEGER", "Base", "get_engine", "get_session", "reset_engine"]
