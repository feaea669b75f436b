"""Application services for the social bounded context.

Application services orchestrate domain aggregates and repositories to
fulfill use cases. They are the "front door" to the social context.
"""

from social.application.services.user_service import UserService

__all__ = [
    "UserService",
]
