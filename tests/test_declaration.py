"""Tests for enum type declaration rules."""

import logging
from unittest.mock import patch

import pytest

from sealed_enum import DeclarationError, Enum, EnumRegistry, variant
from sealed_enum.config import settings

from tests.enums import Fruit


class TestValidDeclarations:
    def test_declaration_order_kept(self) -> None:
        class Direction(Enum, registry=EnumRegistry()):
            NORTH = variant()
            EAST = variant()
            SOUTH = variant()
            WEST = variant()

        assert Direction.all_names() == ("NORTH", "EAST", "SOUTH", "WEST")

    def test_methods_and_constants_allowed(self) -> None:
        class Suit(Enum, registry=EnumRegistry()):
            HEARTS = variant()
            SPADES = variant()

            SYMBOLS = {"HEARTS": "h", "SPADES": "s"}

            def symbol(self) -> str:
                return self.SYMBOLS[self.name]

        assert Suit.all_names() == ("HEARTS", "SPADES")
        assert Suit.SPADES.symbol() == "s"

    def test_non_enum_mixin_allowed(self) -> None:
        class Labelled:
            def label(self) -> str:
                return self.name.lower()

        class Size(Labelled, Enum, registry=EnumRegistry()):
            SMALL = variant()
            LARGE = variant()

        assert Size.LARGE.label() == "large"

    def test_variant_repr(self) -> None:
        assert repr(Fruit.__dict__["APPLE"]) == "variant(APPLE)"


class TestRejectedDeclarations:
    def test_no_variants(self) -> None:
        with pytest.raises(DeclarationError, match="no variants"):
            class Empty(Enum):
                pass

    def test_subclassing_concrete_enum(self) -> None:
        with pytest.raises(DeclarationError, match="sealed"):
            class Silly(Fruit):
                GOOSE = variant()

    def test_aliased_variant(self) -> None:
        with pytest.raises(DeclarationError, match="more than once"):
            class Twice(Enum):
                ONE = variant()
                TWO = ONE

    def test_variant_reused_by_another_type(self) -> None:
        marker = Fruit.__dict__["APPLE"]
        with pytest.raises(DeclarationError, match="more than once"):
            class Thief(Enum):
                APPLE = marker
        assert Fruit.APPLE.name == "APPLE"

    def test_reserved_name(self) -> None:
        with pytest.raises(DeclarationError, match="shadow"):
            class Clash(Enum):
                when = variant()

    def test_name_pattern(self) -> None:
        with patch.object(settings, "name_pattern", r"^[A-Z][A-Z0-9_]*$"):
            with pytest.raises(DeclarationError, match="not a valid variant name"):
                class Lower(Enum):
                    apple = variant()

    def test_wrong_registry_type(self) -> None:
        with pytest.raises(DeclarationError, match="EnumRegistry"):
            class Odd(Enum, registry={}):
                A = variant()

    def test_declaration_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            class Nothing(Enum):
                pass

    def test_declaration_error_attributes(self) -> None:
        with pytest.raises(DeclarationError) as exc_info:
            class Nothing(Enum):
                pass
        assert exc_info.value.type_name == "Nothing"
        assert exc_info.value.reason == "no variants declared"


class TestDeclarationLogging:
    def test_rejection_logged_as_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="sealed_enum.domain.enum"):
            with pytest.raises(DeclarationError):
                class Hollow(Enum):
                    pass

        records = [r for r in caplog.records if r.name == "sealed_enum.domain.enum"]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].getMessage() == "Rejected enum declaration Hollow: no variants declared"
