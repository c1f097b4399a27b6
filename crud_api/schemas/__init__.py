"""Pydantic payload/response models for each resource."""

from .filmes import FilmeCreate, FilmeRead, FilmeUpdate
from .users import UserCreate, UserRead, UserUpdate

__all__ = [
    "FilmeCreate",
    "FilmeRead",
    "FilmeUpdate",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
