"""User application service for the social bounded context.

Handles registration, profile updates, and the posts and sessions users
derive from their account.
"""

from __future__ import annotations

from social.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from social.domain.aggregates import Post, Session, User
from social.domain.value_objects import UserId, Visibility
from social.ports.exceptions import DuplicateHandleError, UserNotFoundError
from social.ports.repositories import (
    IPostRepository,
    ISessionRepository,
    IUserRepository,
)


class UserService:
    """Application service for user use cases.

    Orchestrates the User aggregate and its repositories. Every failure is
    reported through the probe and re-raised unchanged.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        post_repository: IPostRepository,
        session_repository: ISessionRepository,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence and lookup
            post_repository: Repository for post persistence
            session_repository: Repository for session persistence
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._post_repository = post_repository
        self._session_repository = session_repository
        self._probe = probe or DefaultUserServiceProbe()

    async def register(
        self,
        handle: str,
        hashed_password: str,
        name: str | None = None,
        icon_url: str | None = None,
    ) -> User:
        """Register a new user.

        The password must already be hashed; this service never sees the
        plaintext.

        Args:
            handle: Desired handle
            hashed_password: Hash of the user's password
            name: Optional display name
            icon_url: Optional avatar URL

        Returns:
            The newly created User aggregate

        Raises:
            ValidationError: If the handle breaks a handle rule
            DuplicateHandleError: If the handle is already taken
        """
        try:
            user = User.create(
                handle=handle,
                hashed_password=hashed_password,
                name=name,
                icon_url=icon_url,
            )
            if await self._user_repository.get_by_handle(handle) is not None:
                raise DuplicateHandleError(handle)

            await self._user_repository.save(user)

        except Exception as e:
            self._probe.operation_failed(
                operation="register",
                error=str(e),
                handle=handle,
            )
            raise

        self._probe.user_registered(user_id=user.id.value, handle=user.handle)
        return user

    async def update_profile(
        self,
        user_id: UserId,
        name: str | None = None,
        icon_url: str | None = None,
    ) -> User:
        """Update a user's display name and/or icon.

        Empty values leave the current value in place (see User.update).

        Returns:
            The updated User aggregate

        Raises:
            UserNotFoundError: If the user does not exist
        """
        try:
            current = await self._get_user(user_id)
            updated = current.update(name=name, icon_url=icon_url)
            await self._user_repository.save(updated)

        except Exception as e:
            self._probe.operation_failed(
                operation="update_profile",
                error=str(e),
                user_id=user_id.value,
            )
            raise

        self._probe.user_updated(
            user_id=user_id.value,
            name_changed=updated.name != current.name,
            icon_changed=updated.icon_url != current.icon_url,
        )
        return updated

    async def publish_post(
        self,
        user_id: UserId,
        text: str,
        visibility: Visibility | str | None = None,
    ) -> Post:
        """Publish a post on behalf of a user.

        Args:
            user_id: The author
            text: Post body
            visibility: Audience for the post (default: public)

        Returns:
            The stored Post

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If visibility is not a known value
        """
        try:
            user = await self._get_user(user_id)
            post = user.create_post(text=text, visibility=visibility)
            await self._post_repository.save(post)

        except Exception as e:
            self._probe.operation_failed(
                operation="publish_post",
                error=str(e),
                user_id=user_id.value,
            )
            raise

        self._probe.post_published(
            post_id=post.id.value,
            user_id=user_id.value,
            visibility=post.visibility.value,
        )
        return post

    async def open_session(self, user_id: UserId, client: str) -> Session:
        """Record a new login session for a user.

        Checking credentials happens before this call; this only records
        that the login took place.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        try:
            user = await self._get_user(user_id)
            session = user.create_session(client=client)
            await self._session_repository.save(session)

        except Exception as e:
            self._probe.operation_failed(
                operation="open_session",
                error=str(e),
                user_id=user_id.value,
            )
            raise

        self._probe.session_opened(
            session_id=session.id.value,
            user_id=user_id.value,
            client=client,
        )
        return session

    async def get_author(self, post: Post) -> User:
        """Resolve the author reference of a post into the full User.

        Raises:
            UserNotFoundError: If the author no longer exists
        """
        try:
            author = await self._user_repository.resolve(post.author)
            if author is None:
                raise UserNotFoundError(post.author.id.value)

        except Exception as e:
            self._probe.operation_failed(
                operation="get_author",
                error=str(e),
                user_id=post.author.id.value,
            )
            raise

        return author

    async def _get_user(self, user_id: UserId) -> User:
        user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id.value)
        return user
