"""Session aggregate for the social context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from social.domain.value_objects import SessionId, UserRef


@dataclass(frozen=True)
class Session:
    """A login session opened by a user from a given client.

    Validating or expiring sessions belongs to the authentication layer;
    this aggregate only records who logged in, from where and when.
    """

    type: ClassVar[str] = "Session"

    id: SessionId
    user: UserRef
    client: str
    created_at: datetime
