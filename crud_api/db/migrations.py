"""
Versioned schema migrations.

Each step runs once, in order, inside its own transaction and is recorded in
the ``schema_version`` table. Re-running ``run_migrations`` is a no-op once the
database is current.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, NamedTuple

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection, Engine

from . import models

logger = logging.getLogger(__name__)


class Migration(NamedTuple):
    version: int
    description: str
    apply: Callable[[Connection], None]


def _create_users(conn: Connection) -> None:
    models.User.__table__.create(bind=conn, checkfirst=True)


def _create_filmes(conn: Connection) -> None:
    models.Filme.__table__.create(bind=conn, checkfirst=True)


MIGRATIONS: tuple[Migration, ...] = (
    Migration(1, "create users table", _create_users),
    Migration(2, "create filmes table", _create_filmes),
)


def current_version(engine: Engine) -> int:
    """Highest applied version (0 for an empty database)."""
    table = models.SchemaVersion.__table__
    with engine.begin() as conn:
        table.create(bind=conn, checkfirst=True)
        versions = conn.execute(select(table.c.version)).scalars().all()
    return max(versions, default=0)


def run_migrations(engine: Engine) -> list[int]:
    """Apply pending migrations and return the versions applied by this call."""
    table = models.SchemaVersion.__table__
    start = current_version(engine)
    applied: list[int] = []
    for migration in MIGRATIONS:
        if migration.version <= start:
            continue
        with engine.begin() as conn:
            migration.apply(conn)
            conn.execute(
                insert(table).values(
                    version=migration.version,
                    description=migration.description,
                    applied_at=datetime.now(timezone.utc),
                )
            )
        logger.info("Applied migration %s (%s)", migration.version, migration.description)
        applied.append(migration.version)
    if not applied:
        logger.debug("Schema already at version %s", start)
    return applied
