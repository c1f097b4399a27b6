"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import delete, select

from crud_api.db.models import Filme, User
from crud_api.db.session import MAX_DB_INTEGER, get_session


def _storable_id(value: int) -> bool:
    # ids outside the INTEGER column range cannot exist
    return -MAX_DB_INTEGER - 1 <= value <= MAX_DB_INTEGER


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _next_timestamp(previous: datetime | None) -> datetime:
    """Current UTC time, bumped past ``previous`` so updated_at always moves forward."""
    now = _utcnow()
    if previous is None:
        return now
    # SQLite hands datetimes back naive
    last = previous.replace(tzinfo=timezone.utc) if previous.tzinfo is None else previous
    if now <= last:
        return last + timedelta(microseconds=1)
    return now


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- users --------------------------
    def create_user(self, values: dict[str, Any]) -> User:
        now = _utcnow()
        entity = User(
            name=values["name"],
            email=values["email"],
            age=values.get("age"),
            is_active=values.get("is_active", True),
            created_at=now,
            updated_at=now,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def list_users(self, active: Optional[bool] = None) -> list[User]:
        stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
        if active is not None:
            stmt = stmt.where(User.is_active == active)
        with get_session() as session:
            return session.execute(stmt).scalars().all()

    def get_user(self, user_id: int) -> Optional[User]:
        if not _storable_id(user_id):
            return None
        with get_session() as session:
            return session.get(User, user_id)

    def update_user(self, user_id: int, values: dict[str, Any]) -> Optional[User]:
        if not _storable_id(user_id):
            return None
        with get_session() as session:
            user = session.get(User, user_id)
            if not user:
                return None
            for field in ("name", "email", "age", "is_active"):
                if field in values:
                    setattr(user, field, values[field])
            user.updated_at = _next_timestamp(user.updated_at)
            session.commit()
            session.refresh(user)
            return user

    def delete_user(self, user_id: int) -> bool:
        if not _storable_id(user_id):
            return False
        with get_session() as session:
            result = session.execute(delete(User).where(User.id == user_id))
            session.commit()
            return result.rowcount > 0

    # -------------------------- filmes --------------------------
    def create_filme(self, values: dict[str, Any]) -> Filme:
        now = _utcnow()
        entity = Filme(
            nome=values["nome"],
            descricao=values["descricao"],
            genero=values["genero"],
            duracao=values["duracao"],
            anolancamento=values["anolancamento"],
            created_at=now,
            updated_at=now,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def list_filmes(self) -> list[Filme]:
        stmt = select(Filme).order_by(Filme.created_at.desc(), Filme.id.desc())
        with get_session() as session:
            return session.execute(stmt).scalars().all()

    def get_filme(self, filme_id: int) -> Optional[Filme]:
        if not _storable_id(filme_id):
            return None
        with get_session() as session:
            return session.get(Filme, filme_id)

    def update_filme(self, filme_id: int, values: dict[str, Any]) -> Optional[Filme]:
        if not _storable_id(filme_id):
            return None
        with get_session() as session:
            filme = session.get(Filme, filme_id)
            if not filme:
                return None
            for field in ("nome", "descricao", "genero", "duracao", "anolancamento"):
                if field in values:
                    setattr(filme, field, values[field])
            filme.updated_at = _next_timestamp(filme.updated_at)
            session.commit()
            session.refresh(filme)
            return filme

    def delete_filme(self, filme_id: int) -> bool:
        if not _storable_id(filme_id):
            return False
        with get_session() as session:
            result = session.execute(delete(Filme).where(Filme.id == filme_id))
            session.commit()
            return result.rowcount > 0
