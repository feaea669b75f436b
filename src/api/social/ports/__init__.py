"""Ports (interfaces) for the social bounded context.

Ports define the contracts for repositories without specifying
implementation details. This allows for dependency inversion and keeps
the domain layer independent of infrastructure.
"""

from social.ports.exceptions import DuplicateHandleError, UserNotFoundError
from social.ports.repositories import (
    IPostRepository,
    ISessionRepository,
    IUserRepository,
)

__all__ = [
    "IPostRepository",
    "ISessionRepository",
    "IUserRepository",
    "DuplicateHandleError",
    "UserNotFoundError",
]
