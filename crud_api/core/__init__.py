"""
Core utilities shared across the CRUD API.

- configuration helpers (env vars, database URL, CORS, port)
- the error taxonomy and its FastAPI handlers
- logging setup

Routers and services depend on these primitives instead of reading os.environ
or building error payloads on their own.
"""
