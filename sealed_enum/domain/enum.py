"""Closed, named enumerations with one singleton value per variant.

Declare a type by subclassing Enum and assigning a ``variant()`` marker for
every case:

    class Fruit(Enum):
        APPLE = variant()
        BANANA = variant()

``Fruit.APPLE`` resolves through the registry, so each value is minted on
first use and the same object is returned forever after.  Concrete enum
types are sealed: subclassing one is a declaration error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, NoReturn, TypeVar

from sealed_enum.adapters.schema import enum_core_schema, enum_json_schema
from sealed_enum.core.matcher import Matcher
from sealed_enum.domain.exceptions import DeclarationError, TypeMismatch
from sealed_enum.foundation.naming import display, is_valid_name
from sealed_enum.store.registry import EnumRegistry, default_registry

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic_core import CoreSchema

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Enum")
T = TypeVar("T")


# ── Declaration ──────────────────────────────────────────────────────────────

class Variant:
    """Class-body marker for one enum case.

    Reading it from the class returns the singleton value for its name.
    """

    __slots__ = ("name", "owners")

    def __init__(self) -> None:
        self.name: str | None = None
        self.owners: list[tuple[type, str]] = []

    def __set_name__(self, owner: type, name: str) -> None:
        # The first binding wins; any further one is reported by Enum.__init_subclass__
        self.owners.append((owner, name))
        if self.name is None:
            self.name = name

    def __get__(self, instance: Any, owner: type[E]) -> E:
        return owner.by_name(self.name)

    def __repr__(self) -> str:
        return f"variant({self.name})"


def variant() -> Any:
    """Declare one case of an Enum subclass."""
    return Variant()


def _restore(enum_type: type[E], name: str) -> E:
    return enum_type.by_name(name)


def _reject(cls: type, reason: str) -> NoReturn:
    logger.warning("Rejected enum declaration %s: %s", cls.__name__, reason)
    raise DeclarationError(cls.__name__, reason)


# ── Enum ─────────────────────────────────────────────────────────────────────

class Enum:
    """Base class for closed enumerations.

    Values are immutable and compared by identity.  Use ``equals()`` when
    comparing against a value that might belong to another enum type.
    """

    __slots__ = ("_name",)

    __variants__: tuple[str, ...] = ()
    registry: EnumRegistry = default_registry

    def __init_subclass__(cls, registry: EnumRegistry | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        for base in cls.__mro__[1:]:
            if base is not Enum and issubclass(base, Enum):
                _reject(cls, f"{base.__name__} is sealed and cannot be inherited from")

        reserved = set(dir(Enum))
        names: list[str] = []
        for attr, value in cls.__dict__.items():
            if not isinstance(value, Variant):
                continue
            if len(value.owners) > 1:
                bound = ", ".join(f"{owner.__name__}.{name}" for owner, name in value.owners)
                _reject(cls, f"variant() marker is bound more than once ({bound})")
            if not is_valid_name(attr):
                _reject(cls, f"{attr!r} is not a valid variant name")
            if attr in reserved:
                _reject(cls, f"{attr!r} would shadow Enum.{attr}")
            names.append(attr)

        if not names:
            _reject(cls, "no variants declared")

        if registry is not None:
            if not isinstance(registry, EnumRegistry):
                _reject(cls, f"registry must be an EnumRegistry, got {type(registry).__name__}")
            cls.registry = registry

        cls.__variants__ = tuple(names)

    def __new__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(
            f"{cls.__name__} values cannot be constructed directly; "
            f"use {cls.__name__}.by_name() or {cls.__name__}.<VARIANT>"
        )

    @classmethod
    def _mint(cls: type[E], name: str) -> E:
        """Create the value for *name*.  Only the registry calls this."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "_name", name)
        return instance

    # ── Resolution ───────────────────────────────────────────────────────

    @classmethod
    def try_by_name(cls: type[E], name: Any) -> E | None:
        """The value called *name*, or None if there is no such variant.

        ``Fruit.try_by_name("APPLE")`` is ``Fruit.APPLE``;
        ``Fruit.try_by_name("UNKNOWN")`` is None.
        """
        return cls.registry.try_resolve(cls, name)

    @classmethod
    def by_name(cls: type[E], name: Any) -> E:
        """The value called *name*.

        Raises:
            InvalidInstance: If *name* is not a declared variant.
        """
        return cls.registry.resolve(cls, name)

    @classmethod
    def all_names(cls) -> tuple[str, ...]:
        """All variant names in declaration order, e.g. ``("APPLE", "BANANA")``."""
        return cls.registry.all_names(cls)

    @classmethod
    def all_instances(cls: type[E]) -> list[E]:
        """All values in declaration order, e.g. ``[Fruit.APPLE, Fruit.BANANA]``."""
        return cls.registry.all_instances(cls)

    @classmethod
    def is_exhaustive(cls, instances: Iterable[Any]) -> bool:
        """Test if *instances* contains every value of this type."""
        return cls.registry.is_exhaustive(cls, instances)

    @classmethod
    def is_exhaustive_or_empty(cls, instances: Iterable[Any]) -> bool:
        """Test if *instances* contains either no values or every value of this type."""
        return cls.registry.is_exhaustive_or_empty(cls, instances)

    # ── Instance API ─────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    def equals(self, other: Any) -> bool:
        """Compare with another value of the same enum type.

        ``Fruit.APPLE.equals(Fruit.BANANA)`` is False, while
        ``Fruit.APPLE.equals(Vegetable.SPINACH)`` raises.

        Raises:
            TypeMismatch: If *other* is not of exactly this enum type.
        """
        if type(other) is not type(self):
            raise TypeMismatch(type(self), other)
        return other.name == self._name

    def serialize(self) -> str:
        """The bare name, for embedding in structured output."""
        return self._name

    def when(self: E, case: E, value: T) -> Matcher[E, T]:
        """Start a Matcher on this value and bind *case* to *value*.

        ``fruit.when(Fruit.BANANA, "banana").when(Fruit.APPLE, "apple").get()``
        """
        return Matcher(self).when(case, value)

    def when_do(self: E, case: E, thunk: Callable[[], T]) -> Matcher[E, T]:
        """Like when(), but *thunk* provides the value if *case* is matched."""
        return Matcher(self).when_do(case, thunk)

    # ── Python protocol ──────────────────────────────────────────────────

    def __setattr__(self, key: str, value: Any) -> NoReturn:
        raise AttributeError(f"{self} is immutable")

    def __delattr__(self, key: str) -> NoReturn:
        raise AttributeError(f"{self} is immutable")

    def __copy__(self: E) -> E:
        return self

    def __deepcopy__(self: E, memo: dict) -> E:
        return self

    def __reduce__(self) -> tuple:
        return _restore, (type(self), self._name)

    def __str__(self) -> str:
        return display(type(self), self._name)

    __repr__ = __str__

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return enum_core_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict[str, Any]:
        return enum_json_schema(cls)
