"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library-wide defaults loaded from environment variables."""

    model_config = {"env_prefix": "COOKIEWIRE_", "frozen": True}

    # Default strict mode for parsers created without an explicit ``strict``.
    # Strict mode rejects empty names in Set-Cookie parsing and Cookie
    # serialization, and drops nameless cookies when parsing Cookie headers.
    strict: bool = False


def get_settings() -> Settings:
    """Return fresh settings from the environment; patch this in tests."""
    return Settings()
