"""Entity and Reference shapes shared across bounded contexts.

Every aggregate exposes a ``type`` discriminator and an ``id``. Other
aggregates point back to it through a Reference: a small value that carries
the same discriminator convention and the identifier only, never the
referenced aggregate itself. Resolving a reference into the full aggregate
is the job of a repository.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """An identifiable aggregate.

    Attributes:
        type: Discriminator naming the aggregate kind (e.g. "User")
        id: Opaque unique identifier assigned once at creation
    """

    type: str
    id: Any


@runtime_checkable
class Reference(Protocol):
    """A non-owning pointer to an Entity.

    Attributes:
        type: Discriminator naming the reference kind (e.g. "UserRef")
        id: Identifier of the referenced entity
    """

    type: str
    id: Any
