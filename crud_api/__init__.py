"""CRUD API de usuarios e filmes (FastAPI + SQLAlchemy)."""
