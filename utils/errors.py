"""
utils/errors.py
-----------------
Error types raised by the operations and converted into response
envelopes at the operation boundary (see utils/responses.py).
"""


class FieldError:
    """A single (field, message) pair attached to a response."""

    def __init__(self, field, message):
        self.field = field
        self.message = message

    def to_dict(self):
        return {"field": self.field, "message": self.message}

    def __eq__(self, other):
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def __repr__(self):
        return f"FieldError({self.field!r}, {self.message!r})"


class AppError(Exception):
    """Base class for every error that ends up in an envelope."""

    # None means "use the failure message of the operation"
    message = None

    def __init__(self, errors=None, message=None):
        if message is not None:
            self.message = message
        self.errors = list(errors or [])
        super().__init__(self.message or "; ".join(e.message for e in self.errors))


class ValidationError(AppError):
    message = "Validation failed"


class NotFoundError(AppError):
    message = "Not found"


class AuthenticationError(AppError):
    message = "Invalid password"


class ConflictError(AppError):
    message = "Duplicate value"

    def __init__(self, field):
        self.field = field
        super().__init__([FieldError(field, f"{field} already exists")])


class UpstreamError(AppError):
    """The store or the upload service failed."""

    def __init__(self, detail, field="server"):
        super().__init__([FieldError(field, str(detail))])
