"""Result type for per-item outcomes without exceptions.

Batch lookups report one outcome per name; a Result keeps the failure
(an exception instance) next to the value so one bad name never aborts
the rest of the batch.
"""

from typing import TypedDict, Optional, TypeVar, Callable, Any

T = TypeVar("T")


class Result(TypedDict):
    """Result type for operations that can succeed or fail.

    Attributes:
        ok: True if operation succeeded, False if it failed
        value: The successful result value (None if failed)
        error: The exception describing the failure (None if succeeded)
    """

    ok: bool
    value: Optional[Any]
    error: Optional[Exception]


def success(value: T) -> Result:
    """Create a successful result.

    Args:
        value: The successful result value

    Returns:
        Result with ok=True and the value
    """
    return Result(ok=True, value=value, error=None)


def failure(error: Exception) -> Result:
    """Create a failed result.

    Args:
        error: Exception describing the failure

    Returns:
        Result with ok=False and the error
    """
    return Result(ok=False, value=None, error=error)


def from_exception(exc: Exception) -> Result:
    """Alias of failure() that reads better inside except blocks."""
    return failure(exc)


def try_operation(operation: Callable[[], T]) -> Result:
    """Execute an operation and return a Result.

    Args:
        operation: Function to execute

    Returns:
        Result with either the return value or the raised exception
    """
    try:
        value = operation()
        return success(value)
    except Exception as exc:
        return from_exception(exc)


def unwrap(result: Result) -> Any:
    """Extract value from Result or re-raise its error.

    Raises:
        Exception: The stored error if ok=False
    """
    if result["ok"]:
        return result["value"]
    raise result["error"]


def unwrap_or(result: Result, default: Any) -> Any:
    """Extract value from Result or return default."""
    if result["ok"]:
        return result["value"]
    return default


def error_message(result: Result) -> Optional[str]:
    """Human-readable error text of a failed Result (None when ok)."""
    if result["ok"]:
        return None
    return f"{type(result['error']).__name__}: {result['error']}"
