"""
High-level use cases for the CRUD API.

Each service orchestrates the repository for one resource (users, filmes) and
translates missing rows into NotFoundError. Routers call these services instead
of touching SQLAlchemy sessions directly.
"""

from .filme_service import FilmeService
from .user_service import UserService

__all__ = ["FilmeService", "UserService"]
