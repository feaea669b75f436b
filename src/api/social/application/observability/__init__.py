"""Domain-Oriented Observability for the social application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from social.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
