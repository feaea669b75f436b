"""Post aggregate for the social context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from shared_kernel.exceptions import ValidationError
from social.domain.value_objects import PostId, UserRef, Visibility


@dataclass(frozen=True)
class Post:
    """A piece of text published by a user.

    The author is held as a UserRef so a Post never owns or embeds the
    User that wrote it. Posts are normally derived via User.create_post().
    """

    type: ClassVar[str] = "Post"

    id: PostId
    author: UserRef
    created_at: datetime
    text: str
    visibility: Visibility = Visibility.PUBLIC

    def __post_init__(self) -> None:
        if not isinstance(self.visibility, Visibility):
            try:
                visibility = Visibility(self.visibility)
            except ValueError as e:
                allowed = ", ".join(v.value for v in Visibility)
                raise ValidationError(
                    f'"visibility" must be one of: {allowed}', field="visibility"
                ) from e
            object.__setattr__(self, "visibility", visibility)
