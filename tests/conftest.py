import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-for-pytest-0123456789")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.data import models  # noqa: F401
from app.data.database import Base, get_db
from app.main import create_app
from tests.helpers import register_and_login


@pytest.fixture()
def engine():
    """Swieza baza in-memory na kazdy test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture()
def alice(client):
    return register_and_login(client)


@pytest.fixture()
def bob(client):
    return register_and_login(client, name="Bob", email="bob@example.com", password="hunter22")

