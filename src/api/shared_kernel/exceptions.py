"""Exceptions shared by every bounded context."""


class ValidationError(ValueError):
    """Raised when input fails a business-rule check before an entity exists.

    Validation failures are deterministic and caller-correctable, so there
    is nothing to retry. The application layer is expected to report them
    back to whoever supplied the input.

    Attributes:
        message: Human-readable description of what failed and why
        field: Name of the offending field, when one can be singled out
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)
