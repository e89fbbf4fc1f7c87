"""Library configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Variant names become class attributes, so they must be identifiers.
    name_pattern: str = r"^[A-Za-z][A-Za-z0-9_]*$"

    # When enabled, Matcher.get() refuses to resolve unless every case is bound
    strict_matching: bool = False

    model_config = {"env_prefix": "SEALED_ENUM_"}


settings = Settings()
