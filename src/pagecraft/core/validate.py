"""Error types and boundary validation with the Result pattern."""

from collections.abc import Callable
from typing import Any, TypeVar

from returns.result import Result, Success, Failure

T = TypeVar("T")


class PagecraftError(Exception):
    """Base class for all pagecraft errors."""

    pass


class ValidationError(PagecraftError):
    """Validation failed."""

    pass


class PreconditionError(PagecraftError, ValueError):
    """A caller passed input outside an operation's contract."""

    pass


class DSLSerializationError(PreconditionError):
    """A block list cannot be expressed in the DSL."""

    pass


def validate_source_size(source: str, max_size: int, name: str = "DSL source") -> None:
    """
    Validate source length to keep parsing bounded.

    Args:
        source: Text to validate
        max_size: Maximum allowed length in characters
        name: Name for error messages

    Raises:
        ValidationError: If length exceeds limit
    """
    size = len(source)
    if size > max_size:
        raise ValidationError(f"{name} length {size} exceeds maximum {max_size} characters")


def capture(fn: Callable[..., T], *args: Any) -> Result[T, Exception]:
    """
    Call ``fn`` and wrap the outcome.

    Any exception raised by ``fn`` becomes a ``Failure`` so a single bad
    call cannot unwind the caller.
    """
    try:
        return Success(fn(*args))
    except Exception as e:  # noqa: BLE001
        return Failure(e)
