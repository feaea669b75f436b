"""Domain-oriented observability infrastructure.

Probes throughout the application bind an ObservationContext so that every
structured event they emit carries the same request metadata.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from infrastructure.observability.context import ObservationContext

__all__ = [
    "ObservationContext",
]
