"""Repository protocols (ports) for the social bounded context.

Repository protocols define the interface for persisting and retrieving
aggregates. They are also the lookup collaborators that turn a UserRef
back into the User it points at.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from social.domain.aggregates import Post, Session, User
from social.domain.value_objects import PostId, SessionId, UserId, UserRef


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence.

    Users are immutable, so saving a user always stores the latest value
    produced by User.create() or User.update() under its id.
    """

    async def save(self, user: User) -> None:
        """Persist a user aggregate.

        Creates a new user or replaces the stored value for the same id.

        Args:
            user: The User aggregate to persist

        Raises:
            DuplicateHandleError: If another user already owns the handle
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def get_by_handle(self, handle: str) -> User | None:
        """Retrieve a user by their handle.

        Args:
            handle: The user's handle

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def resolve(self, ref: UserRef) -> User | None:
        """Resolve a back-reference into the full User.

        Args:
            ref: Reference held by a Post or Session

        Returns:
            The referenced User, or None if it no longer exists
        """
        ...


@runtime_checkable
class IPostRepository(Protocol):
    """Repository for Post aggregate persistence."""

    async def save(self, post: Post) -> None:
        """Persist a post aggregate."""
        ...

    async def get_by_id(self, post_id: PostId) -> Post | None:
        """Retrieve a post by its ID, or None if not found."""
        ...

    async def list_by_author(self, author: UserRef) -> list[Post]:
        """List posts written by a user, newest first.

        Args:
            author: Reference to the author

        Returns:
            List of Post aggregates (empty if the user has not posted)
        """
        ...


@runtime_checkable
class ISessionRepository(Protocol):
    """Repository for Session aggregate persistence."""

    async def save(self, session: Session) -> None:
        """Persist a session aggregate."""
        ...

    async def get_by_id(self, session_id: SessionId) -> Session | None:
        """Retrieve a session by its ID, or None if not found."""
        ...

    async def list_by_user(self, user: UserRef) -> list[Session]:
        """List sessions opened by a user, oldest first."""
        ...
