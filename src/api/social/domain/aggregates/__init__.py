"""Domain aggregates for the social context.

Aggregates are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from social.domain.aggregates.post import Post
from social.domain.aggregates.session import Session
from social.domain.aggregates.user import User

__all__ = [
    "Post",
    "Session",
    "User",
]
