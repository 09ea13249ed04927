# handler_wrappers.py
"""Shared wrappers and errors for item handlers.

This module provides the functionality the @Item decorator stacks around
every handler:
- Error handling wrapper (turns exceptions into ErrorResult)
- Response normalization (turns plain return values into typed results)

Error Handling Strategy:
    Handlers raise ItemValidationError for bad parameters. The _error_handler
    wrapper converts any ItemError into an ErrorResult carrying its message
    and hint. Unexpected exceptions are logged with a traceback and reported
    as ErrorResult too, so a broken item never takes the host down.
"""

from typing import Any, Callable, Optional
from functools import wraps
import logging

from .results import ErrorResult, ResultBase, ResultKind, make_result

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# ItemError - Base exception for failed queries
# ------------------------------------------------------------------------------
# - message: What went wrong (returned to the caller verbatim)
# - hint: Actionable suggestion (optional)
# - **data: Extra context like the item key or raw parameters (optional)
#
# Example: raise ItemValidationError("Invalid range specified.", hint="from must not exceed to")
# ------------------------------------------------------------------------------
class ItemError(Exception):
    """Structured failure of a single item query.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion for the caller (optional)
        **data: Extra context (optional)
    """
    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data

    def to_result(self) -> ErrorResult:
        return ErrorResult(message=self.message, hint=self.hint)


class ItemValidationError(ItemError):
    """Wrong parameter count or an unusable parameter value."""


class UnknownItemError(ItemError):
    """The requested key is not in the registry."""


# ------------------------------------------------------------------------------
# _error_handler - Outermost wrapper that catches exceptions
# ------------------------------------------------------------------------------
# Converts any exception into an ErrorResult:
#   - ItemError -> ErrorResult(message, hint)
#   - Other exceptions -> ErrorResult("TypeError: ...")
# ------------------------------------------------------------------------------
def _error_handler(func: Callable[..., Any]) -> Callable[..., ResultBase]:
    """Wrap a handler so every call ends in a result instead of a raise.

    Args:
        func: The handler function to wrap

    Returns:
        Wrapped function that reports failures as ErrorResult
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> ResultBase:
        try:
            return func(*args, **kwargs)
        except ItemError as e:
            logger.warning("Item error: %s (hint: %s, context: %s)", e.message, e.hint, e.data)
            return e.to_result()
        except Exception as e:
            # Log full traceback for debugging, return clean error to caller
            logger.exception("Unexpected item error: %s", e)
            return ErrorResult(message=f"{type(e).__name__}: {e}")

    return wrapper


# ------------------------------------------------------------------------------
# _auto_response - Normalize return values to a typed result
# ------------------------------------------------------------------------------
#   - Already a result model -> pass through unchanged
#   - anything else -> wrapped in the model for the item's declared kind
# ------------------------------------------------------------------------------
def _auto_response(func: Callable[..., Any], kind: ResultKind) -> Callable[..., ResultBase]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> ResultBase:
        result = func(*args, **kwargs)

        if isinstance(result, ResultBase):
            return result

        if result is None:
            raise TypeError(f"{func.__name__} returned no value")

        return make_result(kind, result)

    return wrapper
