"""Unit tests for UserService."""

import pytest
from unittest.mock import AsyncMock, create_autospec

from shared_kernel.exceptions import ValidationError
from social.domain.aggregates import User
from social.domain.value_objects import UserId, UserRef, Visibility
from social.ports.exceptions import DuplicateHandleError, UserNotFoundError
from social.ports.repositories import (
    IPostRepository,
    ISessionRepository,
    IUserRepository,
)


@pytest.fixture
def mock_user_repository():
    """Create mock user repository."""
    return create_autospec(IUserRepository, instance=True)


@pytest.fixture
def mock_post_repository():
    """Create mock post repository."""
    return create_autospec(IPostRepository, instance=True)


@pytest.fixture
def mock_session_repository():
    """Create mock session repository."""
    return create_autospec(ISessionRepository, instance=True)


@pytest.fixture
def mock_probe():
    """Create mock user service probe."""
    from social.application.observability import UserServiceProbe

    return create_autospec(UserServiceProbe, instance=True)


@pytest.fixture
def user_service(
    mock_user_repository, mock_post_repository, mock_session_repository, mock_probe
):
    """Create UserService with mock dependencies."""
    from social.application.services.user_service import UserService

    return UserService(
        user_repository=mock_user_repository,
        post_repository=mock_post_repository,
        session_repository=mock_session_repository,
        probe=mock_probe,
    )


class TestUserServiceInit:
    """Tests for UserService initialization."""

    def test_uses_default_probe_when_not_provided(
        self, mock_user_repository, mock_post_repository, mock_session_repository
    ):
        """Service should create default probe when not provided."""
        from social.application.observability import DefaultUserServiceProbe
        from social.application.services.user_service import UserService

        service = UserService(
            user_repository=mock_user_repository,
            post_repository=mock_post_repository,
            session_repository=mock_session_repository,
        )

        assert isinstance(service._probe, DefaultUserServiceProbe)


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_creates_and_saves_user(
        self, user_service, mock_user_repository, mock_probe
    ):
        """Should create a user and persist it."""
        mock_user_repository.get_by_handle = AsyncMock(return_value=None)
        mock_user_repository.save = AsyncMock()

        result = await user_service.register(
            handle="alice", hashed_password="hash", name="Alice"
        )

        assert result.handle == "alice"
        assert result.name == "Alice"
        assert result.icon_url is None
        mock_user_repository.save.assert_called_once_with(result)
        mock_probe.user_registered.assert_called_once_with(
            user_id=result.id.value,
            handle="alice",
        )

    @pytest.mark.asyncio
    async def test_rejects_taken_handle(
        self, user_service, mock_user_repository, mock_probe, user
    ):
        """Should raise DuplicateHandleError when the handle is in use."""
        mock_user_repository.get_by_handle = AsyncMock(return_value=user)
        mock_user_repository.save = AsyncMock()

        with pytest.raises(DuplicateHandleError):
            await user_service.register(handle="alice", hashed_password="hash")

        mock_user_repository.save.assert_not_called()
        mock_probe.user_registered.assert_not_called()
        call_args = mock_probe.operation_failed.call_args[1]
        assert call_args["operation"] == "register"
        assert call_args["handle"] == "alice"
        assert "already taken" in call_args["error"]

    @pytest.mark.asyncio
    async def test_reports_invalid_handle(
        self, user_service, mock_user_repository, mock_probe
    ):
        """Validation failures are probed and re-raised before any lookup."""
        mock_user_repository.get_by_handle = AsyncMock(return_value=None)

        with pytest.raises(ValidationError):
            await user_service.register(handle="No Way", hashed_password="hash")

        mock_user_repository.get_by_handle.assert_not_called()
        mock_probe.operation_failed.assert_called_once()
        assert mock_probe.operation_failed.call_args[1]["handle"] == "No Way"


class TestUpdateProfile:
    """Tests for update_profile method."""

    @pytest.mark.asyncio
    async def test_updates_and_saves(
        self, user_service, mock_user_repository, mock_probe, user
    ):
        """Should save the updated copy and report which fields changed."""
        mock_user_repository.get_by_id = AsyncMock(return_value=user)
        mock_user_repository.save = AsyncMock()

        result = await user_service.update_profile(user.id, name="Alicia")

        assert result.name == "Alicia"
        assert result.icon_url == user.icon_url
        mock_user_repository.save.assert_called_once_with(result)
        mock_probe.user_updated.assert_called_once_with(
            user_id=user.id.value,
            name_changed=True,
            icon_changed=False,
        )

    @pytest.mark.asyncio
    async def test_raises_when_user_missing(
        self, user_service, mock_user_repository, mock_probe
    ):
        """Should raise UserNotFoundError for unknown ids."""
        user_id = UserId.generate()
        mock_user_repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundError) as exc_info:
            await user_service.update_profile(user_id, name="Ghost")

        assert exc_info.value.user_id == user_id.value
        mock_user_repository.save.assert_not_called()
        call_args = mock_probe.operation_failed.call_args[1]
        assert call_args["operation"] == "update_profile"
        assert call_args["user_id"] == user_id.value


class TestPublishPost:
    """Tests for publish_post method."""

    @pytest.mark.asyncio
    async def test_publishes_post(
        self, user_service, mock_user_repository, mock_post_repository, mock_probe, user
    ):
        """Should derive a post from the user and persist it."""
        mock_user_repository.get_by_id = AsyncMock(return_value=user)
        mock_post_repository.save = AsyncMock()

        post = await user_service.publish_post(user.id, text="hello world")

        assert post.author == user.ref
        assert post.visibility is Visibility.PUBLIC
        mock_post_repository.save.assert_called_once_with(post)
        mock_probe.post_published.assert_called_once_with(
            post_id=post.id.value,
            user_id=user.id.value,
            visibility="public",
        )

    @pytest.mark.asyncio
    async def test_reports_bad_visibility(
        self, user_service, mock_user_repository, mock_post_repository, mock_probe, user
    ):
        """Unknown visibility is a validation failure."""
        mock_user_repository.get_by_id = AsyncMock(return_value=user)

        with pytest.raises(ValidationError):
            await user_service.publish_post(user.id, text="hi", visibility="friends")

        mock_post_repository.save.assert_not_called()
        assert (
            mock_probe.operation_failed.call_args[1]["operation"] == "publish_post"
        )


class TestOpenSession:
    """Tests for open_session method."""

    @pytest.mark.asyncio
    async def test_opens_session(
        self,
        user_service,
        mock_user_repository,
        mock_session_repository,
        mock_probe,
        user,
    ):
        """Should derive a session from the user and persist it."""
        mock_user_repository.get_by_id = AsyncMock(return_value=user)
        mock_session_repository.save = AsyncMock()

        session = await user_service.open_session(user.id, client="web")

        assert session.user == user.ref
        assert session.client == "web"
        mock_session_repository.save.assert_called_once_with(session)
        mock_probe.session_opened.assert_called_once_with(
            session_id=session.id.value,
            user_id=user.id.value,
            client="web",
        )

    @pytest.mark.asyncio
    async def test_raises_when_user_missing(
        self, user_service, mock_user_repository, mock_session_repository
    ):
        """Should not record sessions for unknown users."""
        mock_user_repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundError):
            await user_service.open_session(UserId.generate(), client="web")

        mock_session_repository.save.assert_not_called()


class TestGetAuthor:
    """Tests for get_author method."""

    @pytest.mark.asyncio
    async def test_resolves_author(self, user_service, mock_user_repository, user):
        """Should resolve the post's UserRef through the repository."""
        post = user.create_post(text="hi")
        mock_user_repository.resolve = AsyncMock(return_value=user)

        author = await user_service.get_author(post)

        assert author == user
        mock_user_repository.resolve.assert_called_once_with(user.ref)

    @pytest.mark.asyncio
    async def test_raises_for_dangling_reference(
        self, user_service, mock_user_repository, mock_probe, user
    ):
        """Should report and raise UserNotFoundError when the author is gone."""
        post = user.create_post(text="hi")
        mock_user_repository.resolve = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundError):
            await user_service.get_author(post)

        mock_probe.operation_failed.assert_called_once()
        call_kwargs = mock_probe.operation_failed.call_args[1]
        assert call_kwargs["operation"] == "get_author"
        assert call_kwargs["user_id"] == user.id.value
        assert user.id.value in call_kwargs["error"]

    @pytest.mark.asyncio
    async def test_reports_repository_errors(
        self, user_service, mock_user_repository, mock_probe, user
    ):
        """Should report lookup failures and re-raise them unchanged."""
        post = user.create_post(text="hi")
        failure = RuntimeError("lookup failed")
        mock_user_repository.resolve = AsyncMock(side_effect=failure)

        with pytest.raises(RuntimeError) as exc_info:
            await user_service.get_author(post)

        assert exc_info.value is failure
        mock_probe.operation_failed.assert_called_once_with(
            operation="get_author",
            error="lookup failed",
            user_id=user.id.value,
        )


class TestUserServiceWithInMemoryRepositories:
    """End-to-end flow through the in-memory adapters."""

    @pytest.mark.asyncio
    async def test_register_update_post_and_login(self, mock_probe):
        from social.application.services.user_service import UserService
        from social.infrastructure.in_memory_repositories import (
            InMemoryPostRepository,
            InMemorySessionRepository,
            InMemoryUserRepository,
        )

        users = InMemoryUserRepository()
        posts = InMemoryPostRepository()
        sessions = InMemorySessionRepository()
        service = UserService(
            user_repository=users,
            post_repository=posts,
            session_repository=sessions,
            probe=mock_probe,
        )

        user = await service.register(handle="dana", hashed_password="hash")
        updated = await service.update_profile(user.id, icon_url="https://x/d.png")
        post = await service.publish_post(user.id, text="first!")
        session = await service.open_session(user.id, client="web")

        assert await users.get_by_id(user.id) == updated
        assert await posts.list_by_author(UserRef(id=user.id)) == [post]
        assert await sessions.list_by_user(user.ref) == [session]
        assert await service.get_author(post) == updated

        with pytest.raises(DuplicateHandleError):
            await service.register(handle="dana", hashed_password="other")

        assert isinstance(updated, User)
