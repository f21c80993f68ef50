import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from order_service.app.db import Base, SessionLocal, engine
from order_service.app.main import app, get_user_directory


class StubUserDirectory:
    """In-memory stand-in for the user service."""

    def __init__(self, known_ids=(), error=None):
        self.known_ids = set(known_ids)
        self.error = error
        self.calls = []

    async def exists(self, user_id):
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return user_id in self.known_ids


@pytest.fixture(autouse=True)
def setup_test_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def users():
    return StubUserDirectory(known_ids={1, 2})

@pytest.fixture
def client(users):
    app.dependency_overrides[get_user_directory] = lambda: users
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
