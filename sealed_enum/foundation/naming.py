"""Name checks and diagnostic formatting shared by the registry and errors."""

from __future__ import annotations

import re

from sealed_enum.config import settings


def is_valid_name(name: str) -> bool:
    """Return True if *name* is acceptable as a variant name."""
    return re.fullmatch(settings.name_pattern, name) is not None


def display(enum_type: type, name: str) -> str:
    """Render a variant the way it is written in diagnostics: ``Fruit::APPLE()``."""
    return f"{enum_type.__name__}::{name}()"
