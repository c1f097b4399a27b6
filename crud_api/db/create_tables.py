"""Utility script to bring the database schema up to date."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from crud_api.core.config import get_settings
from crud_api.core.logging import configure_logging

from .migrations import run_migrations
from .session import get_engine


def create_all() -> list[int]:
    engine = get_engine()
    return run_migrations(engine)


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    try:
        applied = create_all()
        if applied:
            print(f"Migrations applied: {', '.join(str(v) for v in applied)}")
        else:
            print("Database schema already up to date.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to migrate database: {exc}") from exc
