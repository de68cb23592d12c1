"""Shared fixtures for API tests: fresh SQLite database and app per test, per auth strategy."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from tracker.core.config import Settings
from tracker.core.database import build_engine, get_db
from tracker.main import create_app
from tracker.models import Base
from tracker.services.session_store import SessionStore

PASSWORD = "correct-horse-battery"


class DatabaseTestCase(unittest.TestCase):
    """Gives each test an empty in-memory database and a session bound to it."""

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self.db: Session = self.SessionTesting()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    """App wired to the test database. Subclasses pick the strategy via auth_strategy."""

    auth_strategy = "session"

    def setUp(self) -> None:
        super().setUp()
        self.settings = Settings(
            AUTH_STRATEGY=self.auth_strategy,
            DATABASE_URL="sqlite://",
            JWT_SECRET="test-secret-with-enough-length-for-hs256",
        )
        self.session_store = SessionStore()
        self.app = create_app(self.settings, session_store=self.session_store)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.clients: list[TestClient] = []
        self.client = self.new_client()

    def tearDown(self) -> None:
        for client in self.clients:
            client.close()
        self.app.dependency_overrides.clear()
        super().tearDown()

    def new_client(self) -> TestClient:
        client = TestClient(self.app)
        self.clients.append(client)
        return client

    def register(self, email: str, role: str = "employee", name: str | None = None) -> dict:
        resp = self.client.post(
            "/api/register",
            json={"name": name or email.split("@")[0], "email": email, "password": PASSWORD, "role": role},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["user"]

    def login(self, email: str, password: str = PASSWORD) -> TestClient:
        """Log in on a fresh client; the returned client presents the credential on every request."""
        client = self.new_client()
        resp = client.post("/api/login", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        if self.auth_strategy == "token":
            client.headers["Authorization"] = f"Bearer {body['token']}"
        return client

    def user_client(self, email: str, role: str = "employee") -> tuple[dict, TestClient]:
        user = self.register(email, role)
        return user, self.login(email)
