"""
Test configuration and fixtures.
"""
import os
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

# Point the app at an in-memory store before importing it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("JWT_SECRET", None)

from app.main import app
from app.database import engine, get_session
from app.models.restaurant import Restaurant
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.seed import seed_default_users

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Carlos123"
USER_EMAIL = "user@example.com"
USER_PASSWORD = "Camila123"


@pytest.fixture(autouse=True)
def reset_db() -> Generator[None, None, None]:
    """Fresh tables for every test."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """Create a database session for the test."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session: Session) -> Generator[TestClient, None, None]:
    """
    Test client sharing the test session.

    The lifespan is not run here; seeding is done by fixtures.
    Server errors come back as 500 responses instead of raising.
    """

    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(session: Session) -> dict[str, User]:
    """Default admin and user accounts."""
    seed_default_users(session)
    repo = UserRepository(session)
    return {
        "admin": repo.get_by_email(ADMIN_EMAIL),
        "user": repo.get_by_email(USER_EMAIL),
    }


@pytest.fixture
def admin_user(seeded: dict[str, User]) -> User:
    return seeded["admin"]


@pytest.fixture
def regular_user(seeded: dict[str, User]) -> User:
    return seeded["user"]


def _login(client: TestClient, email: str, password: str) -> dict:
    response = client.post(
        "/api/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    token = response.json()["token"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client: TestClient, admin_user: User) -> dict:
    """Auth headers for the seeded admin."""
    return _login(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def user_headers(client: TestClient, regular_user: User) -> dict:
    """Auth headers for the seeded (non-admin) user."""
    return _login(client, USER_EMAIL, USER_PASSWORD)


@pytest.fixture
def make_restaurant(session: Session) -> Callable[..., Restaurant]:
    """Factory inserting a restaurant straight into the store."""

    counter = {"n": 0}

    def _make(**overrides) -> Restaurant:
        counter["n"] += 1
        data = {
            "name": f"Restaurant {counter['n']}",
            "address": "Calle 10 # 5-20",
            "city": "Bogota",
            "nit": f"900{counter['n']:06d}",
            "phone": "3001234567",
        }
        data.update(overrides)
        restaurant = Restaurant(**data)
        session.add(restaurant)
        session.commit()
        session.refresh(restaurant)
        return restaurant

    return _make
