"""Process-wide, thread-safe store of enum singletons.

Design notes:
    - One EnumRegistry holds, per enum type, the declared name tuple
      (computed once on first query) and the values minted so far.
    - State is append-only: nothing is evicted or reset.
    - Reads go through plain dict lookups.  Minting takes a
      threading.Lock and re-checks, so racing threads all observe the same
      object for a given (type, name).
    - Enum types reach their registry through the ``registry`` class
      attribute, so tests can bind a type to a private EnumRegistry.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Iterable, TypeVar

from sealed_enum.domain.exceptions import InvalidInstance, TypeMismatch

if TYPE_CHECKING:
    from sealed_enum.domain.enum import Enum

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Enum")


class TypeStats:
    """Per-type bookkeeping for diagnostics."""

    __slots__ = ("type_name", "declared_count", "minted_count")

    def __init__(self, type_name: str, declared_count: int = 0, minted_count: int = 0) -> None:
        self.type_name = type_name
        self.declared_count = declared_count
        self.minted_count = minted_count

    def to_dict(self) -> dict:
        return {
            "type_name": self.type_name,
            "declared_count": self.declared_count,
            "minted_count": self.minted_count,
        }


class EnumRegistry:
    """Memoizing store mapping (enum type, name) to a singleton value.

    Usage:
        registry = EnumRegistry()

        class Fruit(Enum, registry=registry):
            APPLE = variant()
            BANANA = variant()

        registry.resolve(Fruit, "APPLE") is Fruit.APPLE  # True
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._names: dict[type, tuple[str, ...]] = {}
        self._instances: dict[type, dict[str, Any]] = {}

    # ── Public API ───────────────────────────────────────────────────────

    def all_names(self, enum_type: type[E]) -> tuple[str, ...]:
        """Declared variant names of *enum_type*, in declaration order."""
        names = self._names.get(enum_type)
        if names is None:
            with self._lock:
                names = self._names.get(enum_type)
                if names is None:
                    names = tuple(enum_type.__variants__)
                    self._instances.setdefault(enum_type, {})
                    self._names[enum_type] = names
                    logger.debug("Cached %d name(s) for %s", len(names), enum_type.__name__)
        return names

    def try_resolve(self, enum_type: type[E], name: Any) -> E | None:
        """Return the singleton for *name*, minting it on first use.

        Returns None if *name* is not a declared variant of *enum_type*.
        """
        names = self.all_names(enum_type)
        instances = self._instances[enum_type]

        if not isinstance(name, str):
            return None

        instance = instances.get(name)
        if instance is not None:
            return instance

        if name not in names:
            return None

        with self._lock:
            instance = instances.get(name)
            if instance is None:
                instance = enum_type._mint(name)
                instances[name] = instance
                logger.debug("Minted %s", instance)
            return instance

    def resolve(self, enum_type: type[E], name: Any) -> E:
        """Like try_resolve(), but raise instead of returning None.

        Raises:
            InvalidInstance: If *name* is not a declared variant.
        """
        instance = self.try_resolve(enum_type, name)
        if instance is None:
            raise InvalidInstance(enum_type, name, self.all_names(enum_type))
        return instance

    def all_instances(self, enum_type: type[E]) -> list[E]:
        """One value per declared name, in declaration order."""
        try:
            return [self.resolve(enum_type, name) for name in self.all_names(enum_type)]
        except InvalidInstance as exc:
            raise RuntimeError(
                f"Every declared name of {enum_type.__name__} should resolve"
            ) from exc

    def is_exhaustive(self, enum_type: type[E], instances: Iterable[Any]) -> bool:
        """True if *instances* covers every declared name of *enum_type*.

        Raises:
            TypeMismatch: If *instances* holds a value of another type.
        """
        seen: set[str] = set()
        for instance in instances:
            if type(instance) is not enum_type:
                raise TypeMismatch(enum_type, instance)
            seen.add(instance.name)
        return seen == set(self.all_names(enum_type))

    def is_exhaustive_or_empty(self, enum_type: type[E], instances: Iterable[Any]) -> bool:
        """True if *instances* is empty or covers every declared name."""
        instances = list(instances)
        return not instances or self.is_exhaustive(enum_type, instances)

    # ── Observability ────────────────────────────────────────────────────

    def stats(self) -> list[dict]:
        """Per-type name and minting counts, in first-query order."""
        with self._lock:
            return [
                TypeStats(
                    enum_type.__name__,
                    declared_count=len(names),
                    minted_count=len(self._instances.get(enum_type, {})),
                ).to_dict()
                for enum_type, names in self._names.items()
            ]


default_registry = EnumRegistry()
