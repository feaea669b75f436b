"""Unit test fixtures shared across bounded contexts."""

from datetime import UTC, datetime

import pytest
import structlog

from social.domain.aggregates import User
from social.domain.value_objects import UserId


@pytest.fixture
def created_at():
    """A fixed creation instant in the past."""
    return datetime(2024, 1, 15, 9, 30, tzinfo=UTC)


@pytest.fixture
def user(created_at):
    """Provide a fully populated user with fixed timestamps."""
    return User(
        id=UserId.generate(),
        handle="alice",
        name="Alice",
        hashed_password="$argon2id$v=19$hash",
        icon_url="https://cdn.example.com/alice.png",
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()
