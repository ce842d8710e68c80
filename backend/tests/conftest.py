"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import uuid
import pytest
from datetime import datetime, timezone, timedelta
from typing import Any, Optional
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.exceptions import DuplicateUserError
from modules.auth.models import UserRecord
from modules.auth.service import AuthService
from modules.catalog.service import CatalogService
from modules.catalog.store import CatalogStore
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a bearer token the way the auth service does.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates a token issued 25 hours ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    iat = now - timedelta(hours=25) if expired else now
    payload = {
        "userId": user_id,
        "email": email,
        "iat": int(iat.timestamp()),
        "exp": int((iat + timedelta(hours=24)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_product(
    product_id: str,
    prices: list[float],
    name: Optional[str] = None,
    brand: str = "Acme",
    category: str = "Grocery",
    subcategory: Optional[str] = "Dairy",
    platforms: Optional[list[str]] = None,
) -> dict[str, Any]:
    """Build a raw product record with one offer per price."""
    names = platforms or ["Zepto", "Blinkit", "Instamart", "Amazon"][: len(prices)]
    return {
        "id": product_id,
        "name": name or product_id.title(),
        "brand": brand,
        "category": category,
        "subcategory": subcategory,
        "packageSize": "1 unit",
        "unitPrice": prices[0] if prices else 0,
        "unit": "per unit",
        "nutritionalInfo": None,
        "platforms": [
            {"platform": platform, "price": price, "available": True, "deliveryTime": "15 mins"}
            for platform, price in zip(names, prices)
        ],
    }


class FakeUserRepository:
    """In-memory stand-in for the Supabase-backed user repository."""

    def __init__(self) -> None:
        self.users: dict[str, UserRecord] = {}

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.email == email), None)

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def create(self, data: dict[str, Any]) -> UserRecord:
        if self.find_by_email(data["email"]) is not None:
            raise DuplicateUserError(data["email"])
        user = UserRecord(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **data,
        )
        self.users[user.id] = user
        return user

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]:
        user = self.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update=changes)
        self.users[user_id] = updated
        return updated


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the test secret and the cheapest bcrypt cost."""
    return Settings(jwt_secret=TEST_JWT_SECRET, bcrypt_rounds=4)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def auth_service(user_repository: FakeUserRepository, test_settings: Settings) -> AuthService:
    """Auth service over the in-memory repository."""
    return AuthService(user_repository, settings=test_settings)


@pytest.fixture
def sample_store() -> CatalogStore:
    """A small catalog covering the interesting shapes."""
    return CatalogStore.from_records([
        make_product("milk_a", [52, 55, 54], name="Milk", brand="Amul"),
        make_product("milk_b", [50, 52], name="Milk", brand="Mother Dairy"),
        make_product("cheese", [100, 80, 120], name="Cheese Slices", brand="Amul"),
        make_product(
            "phone", [999], name="Phone", brand="Apple",
            category="Electronics", subcategory="Mobile Phones", platforms=["Amazon"],
        ),
        make_product("rice", [60, 60], name="Basmati Rice", brand="India Gate",
                     category="Grains", subcategory=None),
    ])


@pytest.fixture
def catalog_service(sample_store: CatalogStore) -> CatalogService:
    return CatalogService(sample_store)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization headers with a valid token for test-user-123."""
    return {"Authorization": f"Bearer {create_test_token()}"}
