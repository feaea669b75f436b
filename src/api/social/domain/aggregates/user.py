"""User aggregate for the social context."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar

from shared_kernel.exceptions import ValidationError
from social.domain.aggregates.post import Post
from social.domain.aggregates.session import Session
from social.domain.value_objects import (
    PostId,
    SessionId,
    UserId,
    UserRef,
    Visibility,
)

HANDLE_PATTERN = re.compile(r"[a-z0-9-]*")
HANDLE_MIN_LENGTH = 3
HANDLE_MAX_LENGTH = 16


@dataclass(frozen=True)
class User:
    """User aggregate representing an account that posts and logs in.

    Users are immutable values. Every change goes through update(), which
    builds a fresh User and leaves the receiver untouched.

    Business rules:
    - handle only contains a-z, 0-9 and "-"
    - handle is 3 to 16 characters long (both bounds inclusive)
    - id, handle, hashed_password and created_at never change after creation
    - updated_at is refreshed by every update

    Posts and Sessions derived from a user hold its UserRef, not the User.
    """

    type: ClassVar[str] = "User"

    id: UserId
    handle: str
    name: str | None
    hashed_password: str = field(repr=False)
    icon_url: str | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "handle", _validate_handle(self.handle))
        object.__setattr__(self, "name", _validate_name(self.name))

    @property
    def ref(self) -> UserRef:
        """Return a back-reference carrying only this user's id."""
        return UserRef(id=self.id)

    @classmethod
    def create(
        cls,
        handle: str,
        hashed_password: str,
        id: UserId | None = None,
        name: str | None = None,
        icon_url: str | None = None,
    ) -> User:
        """Factory method for creating a new user.

        Generates the ID when none is supplied and stamps both timestamps
        with the same instant.

        Args:
            handle: Login handle, validated by the constructor
            hashed_password: Already-hashed password, stored verbatim
            id: Optional pre-assigned identifier
            name: Optional display name; empty values are stored as None
            icon_url: Optional avatar URL; empty values are stored as None

        Returns:
            A new User aggregate

        Raises:
            ValidationError: If the handle breaks a handle rule
        """
        now = datetime.now(UTC)
        return cls(
            id=id or UserId.generate(),
            handle=handle,
            name=name or None,
            hashed_password=hashed_password,
            icon_url=icon_url or None,
            created_at=now,
            updated_at=now,
        )

    def update(self, name: str | None = None, icon_url: str | None = None) -> User:
        """Return a copy of this user with a new name and/or icon.

        A field is only replaced when the new value is truthy, so passing an
        empty string keeps the current value rather than clearing it.
        updated_at is refreshed even when nothing else changes.
        """
        return User(
            id=self.id,
            handle=self.handle,
            name=name or self.name,
            hashed_password=self.hashed_password,
            icon_url=icon_url or self.icon_url,
            created_at=self.created_at,
            updated_at=datetime.now(UTC),
        )

    def create_post(
        self,
        text: str,
        id: PostId | None = None,
        visibility: Visibility | str | None = None,
    ) -> Post:
        """Derive a new post authored by this user.

        Args:
            text: Post body
            id: Optional pre-assigned identifier
            visibility: Audience for the post (default: public)

        Returns:
            A new Post whose author is this user's reference
        """
        return Post(
            id=id or PostId.generate(),
            author=self.ref,
            created_at=datetime.now(UTC),
            text=text,
            visibility=visibility or Visibility.PUBLIC,
        )

    def create_session(self, client: str, id: SessionId | None = None) -> Session:
        """Derive a new login session for this user.

        Args:
            client: Free-form description of the client (e.g. "web")
            id: Optional pre-assigned identifier

        Returns:
            A new Session pointing back at this user
        """
        return Session(
            id=id or SessionId.generate(),
            user=self.ref,
            client=client,
            created_at=datetime.now(UTC),
        )

    def __str__(self) -> str:
        return f"User({self.handle})"


def _validate_handle(handle: str) -> str:
    if HANDLE_PATTERN.fullmatch(handle) is None:
        raise ValidationError(
            'Each "handle" characters must be a-z, 0-9, and "-"', field="handle"
        )
    if not HANDLE_MIN_LENGTH <= len(handle) <= HANDLE_MAX_LENGTH:
        raise ValidationError(
            f'"handle" must be at least {HANDLE_MIN_LENGTH} characters '
            f"and not more than {HANDLE_MAX_LENGTH} characters",
            field="handle",
        )
    return handle


def _validate_name(name: str | None) -> str | None:
    # No rules yet; kept as the hook for future display-name constraints.
    return name
