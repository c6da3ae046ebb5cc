from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure `backend/` is on sys.path so `import app.*` works in tests.
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

# Settings are read at import time, so the environment must be set up first.
DATA_DIR = Path(tempfile.mkdtemp(prefix="bookmark-api-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DATA_DIR / 'test.db'}"
os.environ["JWT_SECRET_KEY"] = "unit-test-secret"
os.environ.pop("LOG_FILE", None)


def _remove_database_files():
    for path in DATA_DIR.glob("test.db*"):
        path.unlink()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import create_app

    _remove_database_files()
    with TestClient(create_app()) as c:
        yield c


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def signup(client, email: str = "test@test.com", password: str = "123456") -> str:
    r = client.post("/auth/signup", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    return r.json()["access_token"]
