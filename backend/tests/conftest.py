import os

# Must be set before config/database are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from config import settings
from database import Base, SessionLocal, engine, init_db
from main import app
from seed import seed_products


@pytest.fixture()
def db():
    init_db()
    session = SessionLocal()
    seed_products(session)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    return TestClient(app)


@pytest.fixture()
def guest_checkout_disabled(monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_GUEST_CHECKOUT", False)
