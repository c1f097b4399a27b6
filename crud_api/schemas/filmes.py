"""Validation rules for filme payloads."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from crud_api.db.session import MAX_DB_INTEGER

_PAYLOAD_CONFIG = ConfigDict(extra="forbid", str_strip_whitespace=True)

PRIMEIRO_ANO = 1900


class FilmeCreate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    nome: str = Field(..., min_length=1, max_length=255)
    descricao: str = Field(..., min_length=1)
    genero: str = Field(..., min_length=1, max_length=120)
    duracao: int = Field(..., ge=1, le=MAX_DB_INTEGER, strict=True, description="Duracao em minutos")
    anolancamento: int = Field(..., ge=PRIMEIRO_ANO, le=MAX_DB_INTEGER, strict=True, description="Ano de lancamento")

    def to_values(self) -> dict[str, Any]:
        return self.model_dump()


class FilmeUpdate(BaseModel):
    model_config = _PAYLOAD_CONFIG

    nome: Optional[str] = Field(None, min_length=1, max_length=255)
    descricao: Optional[str] = Field(None, min_length=1)
    genero: Optional[str] = Field(None, min_length=1, max_length=120)
    duracao: Optional[int] = Field(None, ge=1, le=MAX_DB_INTEGER, strict=True)
    anolancamento: Optional[int] = Field(None, ge=PRIMEIRO_ANO, le=MAX_DB_INTEGER, strict=True)

    @model_validator(mode="after")
    def reject_nulls(self) -> "FilmeUpdate":
        for field in sorted(self.model_fields_set):
            if getattr(self, field) is None:
                raise ValueError(f"{field} nao pode ser nulo")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class FilmeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: str
    descricao: str
    genero: str
    duracao: int
    anolancamento: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
