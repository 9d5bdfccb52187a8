"""Success/failure values returned by fallible factories.

:func:`imview.loader.load_image` returns ``Ok(handle)`` or ``Err(error)``
rather than raising, so callers can branch on the outcome without
exception-based control flow and only raise when they choose to.
"""

from __future__ import annotations

__all__ = ("Err", "Ok", "Result")

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome wrapping ``value``."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome wrapping the exception that describes it."""

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the wrapped error.

        Raises:
            E: Always; the stored exception instance.
        """
        raise self.error

    def unwrap_or(self, default: D) -> D:
        return default


Result: TypeAlias = Ok[T] | Err[E]
