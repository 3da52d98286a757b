import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "60"

from athlete_monitor.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from athlete_monitor.main import app  # noqa: E402

engine = create_engine(
    os.environ["DATABASE_URL"],
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def reset_database() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def _prepare_db():
    reset_database()


@pytest.fixture()
def client():
    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_headers(client: TestClient):
    """Register a user, log in and return bearer headers."""

    def _make(
        email: str,
        role: str,
        team_name: str = "Tim Utama",
        name: str = "Test User",
        password: str = "password123",
    ) -> dict[str, str]:
        response = client.post(
            "/auth/register",
            json={
                "name": name,
                "email": email,
                "role": role,
                "password": password,
                "team_name": team_name,
            },
        )
        assert response.status_code == 201, response.text
        login = client.post("/auth/login", params={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['access_token']}"}

    return _make


@pytest.fixture()
def medis_headers(make_headers) -> dict[str, str]:
    return make_headers("medis@test.com", "medis", name="Dr. Budi")


@pytest.fixture()
def coach_headers(make_headers) -> dict[str, str]:
    return make_headers("pelatih@test.com", "pelatih", name="Coach Andi")


@pytest.fixture()
def athlete(client: TestClient, coach_headers) -> dict:
    response = client.post(
        "/athletes",
        json={"name": "Rafi Ahmad", "position": "Striker"},
        headers=coach_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()
