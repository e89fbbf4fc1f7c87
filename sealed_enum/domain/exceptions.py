"""Error taxonomy for enum declaration, resolution and matching.

Programmer errors (DeclarationError, TypeMismatch, DuplicateBinding) are
raised at the offending call.  InvalidInstance and MatchExhausted are the
recoverable ones and carry everything needed to render a useful message.
"""

from __future__ import annotations

from typing import Any, Sequence

from sealed_enum.foundation.naming import display


class SealedEnumError(Exception):
    """Base class for every error raised by sealed_enum."""


class DeclarationError(SealedEnumError, TypeError):
    """Raised when an enum type is declared incorrectly."""

    def __init__(self, type_name: str, reason: str) -> None:
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Invalid enum declaration {type_name}: {reason}")

    def __reduce__(self) -> tuple:
        return type(self), (self.type_name, self.reason)


class InvalidInstance(SealedEnumError, ValueError):
    """Raised when a name is not one of the declared variants of a type.

    Attributes:
        enum_type: The enum type that was asked for the name.
        invalid_name: The name that could not be resolved.
        valid_names: Snapshot of the declared names at the time of failure.
    """

    def __init__(self, enum_type: type, invalid_name: Any, valid_names: Sequence[str]) -> None:
        self.enum_type = enum_type
        self.invalid_name = invalid_name
        self.valid_names = tuple(valid_names)

        type_name = enum_type.__name__
        valid = ", ".join(display(enum_type, n) for n in self.valid_names)
        super().__init__(
            f"{display(enum_type, str(invalid_name))} is not a valid instance for {type_name}. "
            f"Its valid instances are: {valid}."
        )

    def __reduce__(self) -> tuple:
        return type(self), (self.enum_type, self.invalid_name, self.valid_names)

    @property
    def valid_instances(self) -> list:
        return self.enum_type.all_instances()


class TypeMismatch(SealedEnumError, TypeError):
    """Raised when values of two different enum types meet."""

    def __init__(self, expected: type, actual: Any, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        actual_name = type(actual).__name__
        super().__init__(
            message
            or f"Unexpected type {actual_name} is not of type {expected.__name__}."
        )

    def __reduce__(self) -> tuple:
        return type(self), (self.expected, self.actual, str(self))


class DuplicateBinding(SealedEnumError, ValueError):
    """Raised when a Matcher is asked to bind the same variant twice."""

    def __init__(self, case: Any) -> None:
        self.case = case
        super().__init__(f"This matcher has already mapped instance {case} to a value.")

    def __reduce__(self) -> tuple:
        return type(self), (self.case,)


class MatchExhausted(SealedEnumError, RuntimeError):
    """Raised by Matcher.get() when the subject has no binding."""

    def __init__(self, subject: Any) -> None:
        self.subject = subject
        super().__init__(f"No value was mapped to instance {subject}.")

    def __reduce__(self) -> tuple:
        return type(self), (self.subject,)


class InexhaustiveMatch(SealedEnumError, ValueError):
    """Raised when a Matcher is required to cover every variant but does not."""

    def __init__(self, subject: Any, missing: Sequence[Any]) -> None:
        self.subject = subject
        self.missing = tuple(missing)
        listed = ", ".join(str(m) for m in self.missing)
        super().__init__(
            f"Matcher on {subject} does not cover every instance. Missing: {listed}."
        )

    def __reduce__(self) -> tuple:
        return type(self), (self.subject, self.missing)
