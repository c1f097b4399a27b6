"""
FastAPI routers grouped by resource (users, filmes, health).

Each module exposes an APIRouter included by ``crud_api.app.create_app``.
Services are resolved from ``app.state`` so the app decides which repository
they run against.
"""
