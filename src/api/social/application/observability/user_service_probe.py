"""Protocol for user application service observability.

Defines the interface for domain probes that capture application-level
domain events for user service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user application service operations."""

    def user_registered(self, user_id: str, handle: str) -> None:
        """Record that a new user was registered."""
        ...

    def user_updated(
        self,
        user_id: str,
        name_changed: bool,
        icon_changed: bool,
    ) -> None:
        """Record that a user's profile was updated."""
        ...

    def post_published(self, post_id: str, user_id: str, visibility: str) -> None:
        """Record that a user published a post."""
        ...

    def session_opened(self, session_id: str, user_id: str, client: str) -> None:
        """Record that a user opened a login session."""
        ...

    def operation_failed(
        self,
        operation: str,
        error: str,
        user_id: str | None = None,
        handle: str | None = None,
    ) -> None:
        """Record that a user service operation failed."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def user_registered(self, user_id: str, handle: str) -> None:
        """Record that a new user was registered."""
        self._logger.info(
            "user_registered",
            user_id=user_id,
            handle=handle,
            **self._get_context_kwargs(),
        )

    def user_updated(
        self,
        user_id: str,
        name_changed: bool,
        icon_changed: bool,
    ) -> None:
        """Record that a user's profile was updated."""
        self._logger.info(
            "user_updated",
            user_id=user_id,
            name_changed=name_changed,
            icon_changed=icon_changed,
            **self._get_context_kwargs(),
        )

    def post_published(self, post_id: str, user_id: str, visibility: str) -> None:
        """Record that a user published a post."""
        self._logger.info(
            "post_published",
            post_id=post_id,
            user_id=user_id,
            visibility=visibility,
            **self._get_context_kwargs(),
        )

    def session_opened(self, session_id: str, user_id: str, client: str) -> None:
        """Record that a user opened a login session."""
        self._logger.info(
            "session_opened",
            session_id=session_id,
            user_id=user_id,
            client=client,
            **self._get_context_kwargs(),
        )

    def operation_failed(
        self,
        operation: str,
        error: str,
        user_id: str | None = None,
        handle: str | None = None,
    ) -> None:
        """Record that a user service operation failed."""
        self._logger.warning(
            "user_operation_failed",
            operation=operation,
            error=error,
            user_id=user_id,
            handle=handle,
            **self._get_context_kwargs(),
        )
