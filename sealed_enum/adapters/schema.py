"""Pydantic integration that lets enum types appear as model fields.

Validation accepts either a value of the enum type or its name.  Values
serialize to their bare name in both Python and JSON mode.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import CoreSchema, core_schema


def enum_core_schema(enum_type: type) -> CoreSchema:
    """Build the pydantic-core schema for *enum_type*."""

    def validate(value: Any) -> Any:
        if type(value) is enum_type:
            return value
        if isinstance(value, str):
            # InvalidInstance is a ValueError, so pydantic reports it as a ValidationError
            return enum_type.by_name(value)
        raise ValueError(
            f"Expected {enum_type.__name__} or one of its names, got {type(value).__name__}"
        )

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda value: value.serialize(),
            return_schema=core_schema.str_schema(),
        ),
    )


def enum_json_schema(enum_type: type) -> dict[str, Any]:
    """JSON schema for *enum_type*: a string restricted to its names."""
    return {
        "title": enum_type.__name__,
        "type": "string",
        "enum": list(enum_type.all_names()),
    }
