"""Shared pytest fixtures for the cookiewire test suite."""

from __future__ import annotations

import pytest

from cookiewire.config import Settings
from cookiewire.encoder.base import BaseCookieEncoder
from cookiewire.service import CookieParser
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import CookieOptions, EncoderOptions, ResolvedOptions


def epoch_clock() -> int:
    return 0


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(strict=False)


@pytest.fixture()
def encoder() -> BaseCookieEncoder:
    return BaseCookieEncoder()


@pytest.fixture()
def encoder_options() -> EncoderOptions:
    """Strict encoder options pinned to the Unix epoch."""
    return EncoderOptions(strict=True, get_time=epoch_clock)


@pytest.fixture()
def resolved_options(encoder: BaseCookieEncoder) -> ResolvedOptions:
    return ResolvedOptions(encoder=encoder, get_time=epoch_clock, strict=False)


@pytest.fixture()
def strict_options(encoder: BaseCookieEncoder) -> ResolvedOptions:
    return ResolvedOptions(encoder=encoder, get_time=epoch_clock, strict=True)


@pytest.fixture()
def parser(settings: Settings) -> CookieParser:
    """Strict parser on the real wall clock."""
    return CookieParser(CookieOptions(strict=True), settings=settings)


@pytest.fixture()
def sample_cookie() -> Cookie:
    return Cookie(name="id", value="5")
