"""
utils/responses.py
-----------------
Uniform response envelopes: {success, message, <payload>, errors}.

Every GraphQL operation returns an envelope. The payload key depends on
the response type ("user", "employee", "employees" or nothing at all).
"""

import logging
from functools import wraps

from utils.errors import AppError, FieldError, ValidationError

logger = logging.getLogger(__name__)

# Payload value used when an operation fails
_EMPTY = {"employees": []}


def success(message, key=None, data=None):
    envelope = {"success": True, "message": message, "errors": []}
    if key:
        envelope[key] = data
    return envelope


def failure(message, errors, key=None):
    envelope = {
        "success": False,
        "message": message,
        "errors": [e.to_dict() if isinstance(e, FieldError) else e for e in errors],
    }
    if key:
        envelope[key] = _EMPTY.get(key)
    return envelope


def from_error(err, fallback_message, key=None):
    """Turn an AppError into a failure envelope."""
    return failure(err.message or fallback_message, err.errors, key)


def shape_response(key=None, failure_message="Request failed"):
    """
    Decorator for operations.

    The wrapped function returns (message, data) on success and raises an
    AppError for anything expected. Unexpected exceptions are logged and
    reported with their message as the single "server" FieldError.
    """
    def decorator(operation):
        @wraps(operation)
        def wrapper(*args, **kwargs):
            try:
                message, data = operation(*args, **kwargs)
            except AppError as err:
                log = logger.info if isinstance(err, ValidationError) else logger.warning
                log("%s rejected: %s", operation.__name__, err)
                return from_error(err, failure_message, key)
            except Exception as err:
                logger.exception("%s failed unexpectedly", operation.__name__)
                return failure(failure_message, [FieldError("server", str(err))], key)
            return success(message, key, data)
        return wrapper
    return decorator
