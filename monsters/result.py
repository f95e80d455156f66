"""
Result type for store operations.

Repositories return ``Ok``/``Err`` instead of raising for expected failures
(missing rows, failed writes), so callers can tell *why* an operation did
not happen without catching database exceptions.

Usage:
    from monsters.result import Ok, Err

    result = db.monsters.update(monster_id, payload)
    if result.is_ok():
        ...
    elif result.error is StoreError.NOT_FOUND:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Example:
        >>> Ok(42).unwrap()
        42
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the value; ``default`` is ignored for Ok results."""
        return self.value

    @property
    def error(self) -> None:
        """Ok has no error."""
        return None

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Example:
        >>> Err("Not found").is_err()
        True
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Attempt to get the success value.

        Raises:
            ValueError: Always, since Err has no success value.
        """
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Get the default, since there is no success value."""
        return default

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Union[Ok[T], Err[E]]
