"""Filme use cases, mirroring the user workflow."""

from __future__ import annotations

import logging

from crud_api.core.errors import NotFoundError
from crud_api.db.models import Filme
from crud_api.repositories.sql_repository import SQLRepository
from crud_api.schemas.filmes import FilmeCreate, FilmeUpdate

logger = logging.getLogger(__name__)


def _not_found(filme_id: int) -> NotFoundError:
    return NotFoundError(f"Filme com o ID {filme_id} não encontrado")


class FilmeService:
    def __init__(self, repository: SQLRepository | None = None) -> None:
        self.repository = repository or SQLRepository()

    def create(self, payload: FilmeCreate) -> Filme:
        filme = self.repository.create_filme(payload.to_values())
        logger.info("Filme %s criado", filme.id)
        return filme

    def find_all(self) -> list[Filme]:
        return self.repository.list_filmes()

    def find_one(self, filme_id: int) -> Filme:
        filme = self.repository.get_filme(filme_id)
        if not filme:
            raise _not_found(filme_id)
        return filme

    def update(self, filme_id: int, payload: FilmeUpdate) -> Filme:
        self.find_one(filme_id)
        filme = self.repository.update_filme(filme_id, payload.changes())
        if not filme:
            raise _not_found(filme_id)
        logger.info("Filme %s atualizado", filme_id)
        return filme

    def remove(self, filme_id: int) -> None:
        self.find_one(filme_id)
        if not self.repository.delete_filme(filme_id):
            raise _not_found(filme_id)
        logger.info("Filme %s removido", filme_id)
