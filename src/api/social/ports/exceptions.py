"""Port exceptions for the social bounded context.

These exceptions represent errors raised while looking up or persisting
aggregates. They should be caught and handled by the caller of the
application layer.
"""


class DuplicateHandleError(Exception):
    """Raised when a handle is already owned by another user.

    Handles identify users at login, so two accounts may not share one.
    """

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f'Handle "{handle}" is already taken')


class UserNotFoundError(Exception):
    """Raised when a user id or reference points at no stored user."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
