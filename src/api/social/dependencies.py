"""Dependency composition for the social bounded context.

Wires the in-memory repositories and the default probe into a UserService.
Repositories are process-wide singletons so every service instance sees
the same users, posts and sessions.
"""

from functools import lru_cache

import structlog

from infrastructure.logging import configure_logging
from infrastructure.observability import ObservationContext
from infrastructure.settings import Settings, get_settings
from social.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from social.application.services import UserService
from social.infrastructure.in_memory_repositories import (
    InMemoryPostRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)


@lru_cache
def configure_application() -> Settings:
    """Configure process-wide logging from settings (runs once).

    Hosts call this at startup, before handing out services.

    Returns:
        The loaded application settings
    """
    settings = get_settings()
    configure_logging(settings.logging)
    structlog.get_logger().info(
        "application_configured",
        app_name=settings.app_name,
        debug=settings.debug,
    )
    return settings


@lru_cache
def get_user_repository() -> InMemoryUserRepository:
    """Get the application-scoped user repository (singleton)."""
    return InMemoryUserRepository()


@lru_cache
def get_post_repository() -> InMemoryPostRepository:
    """Get the application-scoped post repository (singleton)."""
    return InMemoryPostRepository()


@lru_cache
def get_session_repository() -> InMemorySessionRepository:
    """Get the application-scoped session repository (singleton)."""
    return InMemorySessionRepository()


def get_user_service_probe(
    context: ObservationContext | None = None,
) -> UserServiceProbe:
    """Get a user service probe, bound to the given context if any."""
    probe = DefaultUserServiceProbe()
    if context is not None:
        return probe.with_context(context)
    return probe


def get_user_service(context: ObservationContext | None = None) -> UserService:
    """Get a UserService backed by the shared repositories.

    Args:
        context: Optional observation context for the current request

    Returns:
        UserService instance
    """
    return UserService(
        user_repository=get_user_repository(),
        post_repository=get_post_repository(),
        session_repository=get_session_repository(),
        probe=get_user_service_probe(context),
    )
