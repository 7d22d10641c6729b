"""
Result type for explicit error handling at service boundaries.

Upstream calls, store lookups and orchestration return either a Success
or a Failure value instead of raising, so callers decide how to render
each outcome.

Example:
    >>> def parse_count(raw: str) -> Result[int, str]:
    ...     if not raw.isdigit():
    ...         return Failure(f"not a count: {raw}")
    ...     return Success(int(raw))
    ...
    >>> result = parse_count("3")
    >>> result.unwrap()
    3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Never


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    A successful outcome carrying a value.

    Attributes:
        value: The success value.
    """

    value: T

    def is_success(self) -> bool:
        """Return True."""
        return True

    def is_failure(self) -> bool:
        """Return False."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """
    A failed outcome carrying an error.

    Attributes:
        error: The error value.
    """

    error: E

    def is_success(self) -> bool:
        """Return False."""
        return False

    def is_failure(self) -> bool:
        """Return True."""
        return True

    def unwrap(self) -> Never:
        """
        Refuse to unwrap a failure.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"Cannot unwrap Failure: {self.error}")


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Wrap a value in a Success."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Wrap an error in a Failure."""
    return Failure(error)
