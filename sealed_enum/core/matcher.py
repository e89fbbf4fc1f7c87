"""Matcher: fluent case analysis over a single enum value.

A Matcher is rooted at one subject and collects one handler per variant
through ``when``/``when_do``.  A terminal method (``get``, ``or_else``,
``or_else_do``, ``or_else_do_nothing``) then resolves the handler bound to
the subject's name.

Rules:
    1. Every case must be of exactly the subject's enum type.
    2. A variant may be bound once.  Both rules fail at the binding call.
    3. Lookup is by name, never by scanning the bindings.
    4. Terminal methods do not consume the Matcher.  Calling one again
       re-resolves the same bindings; Lazy handlers run again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from sealed_enum.config import settings
from sealed_enum.domain.exceptions import (
    DuplicateBinding,
    InexhaustiveMatch,
    MatchExhausted,
    TypeMismatch,
)
from sealed_enum.domain.match import Eager, Lazy, Match, nothing

if TYPE_CHECKING:
    from sealed_enum.domain.enum import Enum

E = TypeVar("E", bound="Enum")
T = TypeVar("T")


class Matcher(Generic[E, T]):
    """Builder mapping the cases of one enum type to results.

    Usage:
        label = (
            Matcher(fruit)
            .when(Fruit.BANANA, "banana")
            .when(Fruit.APPLE, "apple")
            .get()
        )

    Args:
        subject: The value being matched.
        strict: If True, ``get()`` requires every variant to be bound, not
            only the subject.  Defaults to ``settings.strict_matching``.

    Not safe to bind from one thread while resolving from another.
    """

    __slots__ = ("_subject", "_matches", "_strict")

    def __init__(self, subject: E, *, strict: bool | None = None) -> None:
        # Local import: sealed_enum.domain.enum imports this module
        from sealed_enum.domain.enum import Enum

        if not isinstance(subject, Enum):
            raise TypeError(
                f"A Matcher subject must be an Enum value, {type(subject).__name__} given."
            )
        self._subject = subject
        self._matches: dict[str, Match[T]] = {}
        self._strict = settings.strict_matching if strict is None else strict

    @property
    def subject(self) -> E:
        return self._subject

    # ── Binding ──────────────────────────────────────────────────────────

    def when(self, case: E, value: T) -> Matcher[E, T]:
        """Map *case* to *value*.

        If the subject is *case*, ``get()`` will return *value*.

        Raises:
            TypeMismatch: If *case* is not of the subject's enum type.
            DuplicateBinding: If *case* has already been mapped.
        """
        self._check(case)
        return self._bind(case, Eager(value))

    def when_do(self, case: E, thunk: Callable[[], T]) -> Matcher[E, T]:
        """Like when(), but let *thunk* provide the value.

        *thunk* is not called at bind time.  Use this to compute values
        lazily or to produce side effects when matched.

        Raises:
            TypeError: If *thunk* is not callable.
            TypeMismatch: If *case* is not of the subject's enum type.
            DuplicateBinding: If *case* has already been mapped.
        """
        self._check(case)
        return self._bind(case, Lazy(thunk, plain_alternative="when"))

    def _check(self, case: E) -> None:
        subject_type = type(self._subject)
        if type(case) is not subject_type:
            raise TypeMismatch(
                subject_type,
                case,
                f"This matcher is already mapping an instance of {subject_type.__name__}, "
                f"yet this invocation is trying to map an instance of {type(case).__name__}.",
            )

        if case.name in self._matches:
            raise DuplicateBinding(case)

    def _bind(self, case: E, match: Match[T]) -> Matcher[E, T]:
        self._matches[case.name] = match
        return self

    # ── Exhaustiveness ───────────────────────────────────────────────────

    def missing_cases(self) -> tuple[E, ...]:
        """Values of the subject's type with no binding, in declaration order."""
        return tuple(
            instance
            for instance in type(self._subject).all_instances()
            if instance.name not in self._matches
        )

    @property
    def exhaustive(self) -> bool:
        return not self.missing_cases()

    def assert_exhaustive(self) -> Matcher[E, T]:
        """Return self if every variant is bound.

        Raises:
            InexhaustiveMatch: Listing the variants that have no binding.
        """
        missing = self.missing_cases()
        if missing:
            raise InexhaustiveMatch(self._subject, missing)
        return self

    # ── Resolution ───────────────────────────────────────────────────────

    def _resolve(self, surrogate: Match[Any]) -> Any:
        return self._matches.get(self._subject.name, surrogate).get()

    def get(self) -> T:
        """The value the subject is mapped to.

        Raises:
            MatchExhausted: If the subject has not been mapped.
            InexhaustiveMatch: In strict mode, if any variant is unmapped.
        """
        if self._strict:
            self.assert_exhaustive()
        match = self._matches.get(self._subject.name)
        if match is None:
            raise MatchExhausted(self._subject)
        return match.get()

    def or_else(self, value: Any) -> Any:
        """The value the subject is mapped to, or *value* if it is unmapped."""
        return self._resolve(Eager(value))

    def or_else_do(self, thunk: Callable[[], Any]) -> Any:
        """Like or_else(), but *thunk* provides the surrogate.

        *thunk* is only called when the subject is unmapped.

        Raises:
            TypeError: If *thunk* is not callable.
        """
        return self._resolve(Lazy(thunk, plain_alternative="or_else"))

    def or_else_do_nothing(self) -> T | None:
        """``or_else_do`` with a no-op: None when the subject is unmapped."""
        return self.or_else_do(nothing)

    def __repr__(self) -> str:
        bound = ", ".join(self._matches)
        return f"Matcher({self._subject}, bound=[{bound}])"
