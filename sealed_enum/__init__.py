from sealed_enum.core.matcher import Matcher
from sealed_enum.domain.enum import Enum, variant
from sealed_enum.domain.exceptions import (
    DeclarationError,
    DuplicateBinding,
    InexhaustiveMatch,
    InvalidInstance,
    MatchExhausted,
    SealedEnumError,
    TypeMismatch,
)
from sealed_enum.domain.match import Eager, Lazy, Match
from sealed_enum.store.registry import EnumRegistry, default_registry

__all__ = [
    "Enum",
    "variant",
    "Matcher",
    "Match",
    "Eager",
    "Lazy",
    "EnumRegistry",
    "default_registry",
    "SealedEnumError",
    "DeclarationError",
    "InvalidInstance",
    "TypeMismatch",
    "DuplicateBinding",
    "MatchExhausted",
    "InexhaustiveMatch",
]
