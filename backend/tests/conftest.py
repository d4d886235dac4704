import os

# Settings are read at import time; point them at throwaway values first.
os.environ.setdefault("SECRET_KEY", "eventhub-test-signing-secret-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from eventhub.core.config import settings
from eventhub.db.init_db import create_tables
from eventhub.db.session import get_db
from eventhub.main import app


@pytest.fixture()
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(target))
    return target


@pytest.fixture()
def client(session_factory, upload_dir):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: startup hooks (DB check, migrations) stay off
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, email="ada@example.com", password="s3cret", name="Ada"):
    r = client.post("/register", json={"name": name, "email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()


def login(client, email="ada@example.com", password="s3cret"):
    r = client.post("/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()
