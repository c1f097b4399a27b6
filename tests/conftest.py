from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que os pacotes sejam importáveis durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from crud_api.db import models  # noqa: E402
from crud_api.db import session as db_session  # noqa: E402
from crud_api.db.migrations import run_migrations  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """SQLite temporário com o schema migrado; teardown completo para não deixar o arquivo bloqueado."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    db_session.reset_engine()

    engine = db_session.get_engine()
    run_migrations(engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    db_session.reset_engine()
    if db_file.exists():
        try:
            db_file.unlink()
        except Exception:
            pass


@pytest.fixture()
def client(temp_db):
    from fastapi.testclient import TestClient

    from crud_api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
