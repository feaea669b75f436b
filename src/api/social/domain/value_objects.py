"""Value objects for the social domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from ulid import ULID


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> UserId:
        """Generate a new UserId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> UserId:
        """Create UserId from string value.

        Args:
            value: ULID string

        Returns:
            UserId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid UserId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class PostId:
    """Identifier for a Post aggregate."""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PostId:
        """Generate a new PostId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> PostId:
        """Create PostId from a ULID string, raising ValueError otherwise."""
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid PostId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class SessionId:
    """Identifier for a login Session."""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> SessionId:
        """Generate a new SessionId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> SessionId:
        """Create SessionId from a ULID string, raising ValueError otherwise."""
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid SessionId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class UserRef:
    """Back-reference to a User held by the aggregates it owns.

    Posts and Sessions point at their user through this value rather than
    embedding the User. It is a lookup key, never a live handle: resolve it
    through IUserRepository when the full record is needed.
    """

    type: ClassVar[str] = "UserRef"

    id: UserId

    def __str__(self) -> str:
        return f"UserRef({self.id})"


class Visibility(StrEnum):
    """Audience a post is shown to."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
