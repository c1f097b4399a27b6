"""
Persistence adapters.

Services depend on the repository instead of opening SQLAlchemy sessions
themselves; the repository exclusively owns the storage representation.
"""
