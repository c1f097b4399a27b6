"""User use cases (create, list, lookup, partial update, delete)."""

from __future__ import annotations

import logging
from typing import Optional

from crud_api.core.errors import NotFoundError
from crud_api.db.models import User
from crud_api.repositories.sql_repository import SQLRepository
from crud_api.schemas.users import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Stateless between calls; everything lives in the repository."""

    def __init__(self, repository: SQLRepository | None = None) -> None:
        self.repository = repository or SQLRepository()

    def create(self, payload: UserCreate) -> User:
        user = self.repository.create_user(payload.to_values())
        logger.info("Usuario %s criado", user.id)
        return user

    def find_all(self, active: Optional[bool] = None) -> list[User]:
        return self.repository.list_users(active=active)

    def find_one(self, user_id: int) -> User:
        user = self.repository.get_user(user_id)
        if not user:
            raise NotFoundError(f"Usuário com o ID {user_id} não encontrado")
        return user

    def update(self, user_id: int, payload: UserUpdate) -> User:
        self.find_one(user_id)
        changes = payload.changes()
        user = self.repository.update_user(user_id, changes)
        if not user:
            # removed between the lookup and the write
            raise NotFoundError(f"Usuário com o ID {user_id} não encontrado")
        logger.info("Usuario %s atualizado (%s)", user_id, ", ".join(sorted(changes)) or "sem campos")
        return user

    def remove(self, user_id: int) -> None:
        self.find_one(user_id)
        if not self.repository.delete_user(user_id):
            raise NotFoundError(f"Usuário com o ID {user_id} não encontrado")
        logger.info("Usuario %s removido", user_id)
