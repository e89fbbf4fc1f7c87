"""Case handlers bound inside a Matcher.

A Match is what a single ``when``/``when_do`` call leaves behind: either a
value fixed at bind time (Eager) or a thunk run at resolution time (Lazy).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class Match(ABC, Generic[T]):
    """Base class for a bound case handler."""

    __slots__ = ()

    @abstractmethod
    def get(self) -> T:
        """Resolve this match and return its result."""
        ...


class Eager(Match[T]):
    """A precomputed result.  Resolving it is pure and repeatable."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def get(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Eager({self._value!r})"


class Lazy(Match[T]):
    """A thunk invoked on every resolution.  Results are never memoized.

    Raises:
        TypeError: If *thunk* is not callable.
    """

    __slots__ = ("_thunk",)

    def __init__(self, thunk: Callable[[], T], plain_alternative: str = "when") -> None:
        if not callable(thunk):
            raise TypeError(
                f"Expected a callable, {type(thunk).__name__} given. "
                f"If you want to provide a plain value, use Matcher.{plain_alternative}() instead."
            )
        self._thunk = thunk

    def get(self) -> T:
        return self._thunk()

    def __repr__(self) -> str:
        return f"Lazy({self._thunk!r})"


def nothing() -> Any:
    """The no-op used by ``or_else_do_nothing``."""
    return None
