from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from config import Settings
from src.app.services.passwords import hash_password
from src.domain.entities import Role, User

REPOSITORY_METHODS = {
    "users": [
        "get_by_email",
        "get_by_id",
        "find_by_email_or_username",
        "list_all",
        "create",
        "update",
        "delete",
        "set_last_login",
    ],
    "roles": [
        "get_by_id",
        "get_by_name",
        "get_default_by_name",
        "list_all",
        "list_active_names",
        "create",
        "update",
        "delete",
    ],
    "password_reset_tokens": ["create", "get_by_token_hash", "get_outstanding_since", "mark_used"],
    "contacts": ["create", "get_recent_by_email"],
    "blogs": [
        "create",
        "get_by_id",
        "get_by_slug",
        "update",
        "delete",
        "list_published",
        "list_featured",
        "category_counts",
        "increment_views",
        "increment_likes",
    ],
    "trainings": [
        "create",
        "get_by_id",
        "get_active_by_code",
        "find_by_title",
        "count_codes_with_prefix",
        "get_many",
        "update",
        "list_active",
        "list_featured",
        "list_upcoming",
        "category_counts",
    ],
    "training_sessions": [
        "create",
        "get",
        "list_for_training",
        "list_for_trainings",
        "update",
        "delete",
    ],
    "testimonials": [
        "create",
        "get_by_id",
        "update",
        "delete",
        "list_visible",
        "list_featured",
        "list_for_training",
        "count_visible",
        "average_rating",
        "rating_counts",
        "list_recent",
        "top_trainings",
    ],
}


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repository, methods in REPOSITORY_METHODS.items():
        repo = MagicMock()
        for method in methods:
            setattr(repo, method, AsyncMock())
        setattr(uow, repository, repo)

    return uow


@pytest.fixture
def settings():
    return Settings(BCRYPT_ROUNDS=4, JWT_SECRET="unit-test-secret", FRONTEND_URL="http://frontend.test")


@pytest.fixture
def email_sender():
    sender = MagicMock()
    sender.send = AsyncMock(return_value=True)
    return sender


@pytest.fixture
def token_service():
    service = MagicMock()
    service.issue = MagicMock(return_value="signed-token")
    return service


@pytest.fixture
def user_role():
    return Role(id=uuid4(), name="user", is_default=True)


@pytest.fixture
def make_user(user_role):
    def _make_user(password: str = "Str0ng!Pass", **overrides) -> User:
        fields = dict(
            id=uuid4(),
            name="Alice Nguyen",
            username="alice",
            email="alice@example.com",
            password_hash=hash_password(password, rounds=4),
            role_id=user_role.id,
            role=user_role.name,
        )
        fields.update(overrides)
        return User(**fields)

    return _make_user
