import base64
import time

import pytest
import redis
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker

from files_manager.config import Settings
from files_manager.database import Base
from files_manager.main import create_app
from files_manager.models.user_model import User
from files_manager.utils.auth import hash_password

DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(DATABASE_URL,
                       connect_args={
                           "check_same_thread": False,
                       },
                       poolclass=StaticPool)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)

SEED_PASSWORD_HASH = hash_password("password")


class FakeRedis:
    """In-memory stand-in for the redis client, honoring TTLs."""

    def __init__(self):
        self.data = {}
        self.expires_at = {}

    def _purge(self, name):
        deadline = self.expires_at.get(name)
        if deadline is not None and deadline <= time.monotonic():
            self.data.pop(name, None)
            self.expires_at.pop(name, None)

    def setex(self, name, time_seconds, value):
        self.data[name] = str(value)
        self.expires_at[name] = time.monotonic() + time_seconds
        return True

    def get(self, name):
        self._purge(name)
        return self.data.get(name)

    def delete(self, *names):
        removed = 0
        for name in names:
            self._purge(name)
            if self.data.pop(name, None) is not None:
                removed += 1
            self.expires_at.pop(name, None)
        return removed

    def ttl(self, name):
        self._purge(name)
        if name not in self.data:
            return -2
        return int(self.expires_at[name] - time.monotonic())

    def expire_now(self, name):
        self.expires_at[name] = time.monotonic()

    def ping(self):
        return True


class BrokenRedis(FakeRedis):
    def get(self, name):
        raise redis.exceptions.ConnectionError("Connection refused")

    def ping(self):
        raise redis.exceptions.ConnectionError("Connection refused")


def basic_auth(email, password):
    credentials = base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {credentials}"}


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def settings(tmp_path):
    test_settings = Settings()
    test_settings.folder_path = str(tmp_path / "files_manager")
    return test_settings


@pytest.fixture
def client(settings, fake_redis):
    return TestClient(create_app(settings, engine=engine, redis_client=fake_redis))


@pytest.fixture
def db():
    database = TestingSessionLocal()
    try:
        yield database
    finally:
        database.close()


@pytest.fixture
def token(client):
    response = client.get("/connect", headers=basic_auth("user@example.com", "password"))
    return response.json()["token"]


@pytest.fixture
def other_token(client):
    client.post("/users", json={"email": "bob@example.com", "password": "secret"})
    response = client.get("/connect", headers=basic_auth("bob@example.com", "secret"))
    return response.json()["token"]


@pytest.fixture(autouse=True)
def setup_and_teardown():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    db_user = User(email="user@example.com", password_hash=SEED_PASSWORD_HASH)
    session.add(db_user)
    session.commit()
    session.close()

    yield
    Base.metadata.drop_all(bind=engine)
