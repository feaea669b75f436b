"""In-memory implementations of the social repository ports.

Stores aggregates in plain dicts keyed by id. Aggregates are immutable,
so handing out the stored instances is safe.
"""

from __future__ import annotations

from social.domain.aggregates import Post, Session, User
from social.domain.value_objects import PostId, SessionId, UserId, UserRef
from social.ports.exceptions import DuplicateHandleError
from social.ports.repositories import (
    IPostRepository,
    ISessionRepository,
    IUserRepository,
)


class InMemoryUserRepository(IUserRepository):
    """Dict-backed repository for User aggregates with a handle index."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids_by_handle: dict[str, UserId] = {}

    async def save(self, user: User) -> None:
        owner = self._ids_by_handle.get(user.handle)
        if owner is not None and owner != user.id:
            raise DuplicateHandleError(user.handle)

        self._users[user.id] = user
        self._ids_by_handle[user.handle] = user.id

    async def get_by_id(self, user_id: UserId) -> User | None:
        return self._users.get(user_id)

    async def get_by_handle(self, handle: str) -> User | None:
        user_id = self._ids_by_handle.get(handle)
        if user_id is None:
            return None
        return self._users.get(user_id)

    async def resolve(self, ref: UserRef) -> User | None:
        return self._users.get(ref.id)


class InMemoryPostRepository(IPostRepository):
    """Dict-backed repository for Post aggregates."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def save(self, post: Post) -> None:
        self._posts[post.id] = post

    async def get_by_id(self, post_id: PostId) -> Post | None:
        return self._posts.get(post_id)

    async def list_by_author(self, author: UserRef) -> list[Post]:
        posts = [p for p in self._posts.values() if p.author == author]
        return sorted(posts, key=lambda p: (p.created_at, p.id.value), reverse=True)


class InMemorySessionRepository(ISessionRepository):
    """Dict-backed repository for Session aggregates."""

    def __init__(self) -> None:
        self._sessions: dict[SessionId, Session] = {}

    async def save(self, session: Session) -> None:
        self._sessions[session.id] = session

    async def get_by_id(self, session_id: SessionId) -> Session | None:
        return self._sessions.get(session_id)

    async def list_by_user(self, user: UserRef) -> list[Session]:
        sessions = [s for s in self._sessions.values() if s.user == user]
        return sorted(sessions, key=lambda s: (s.created_at, s.id.value))
