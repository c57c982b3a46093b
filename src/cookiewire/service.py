"""CookieParser: parse and serialize cookie headers with layered options."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from cookiewire.config import Settings, get_settings
from cookiewire.encoder.base import BaseCookieEncoder
from cookiewire.encoder.interfaces import CookieEncoder
from cookiewire.helpers import merge as merge_cookies
from cookiewire.helpers import remove_expired as remove_expired_cookies
from cookiewire.parser.cookie_header import parse_cookie
from cookiewire.parser.set_cookie import parse_set_cookie
from cookiewire.serializer.cookie_header import serialize_cookie
from cookiewire.serializer.set_cookie import serialize_set_cookie
from cookiewire.shared.clock import wall_clock_ms
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import CookieOptions, ResolvedOptions, merge_options

logger = logging.getLogger(__name__)


class CookieParser:
    """Entry point for cookie header parsing and serialization.

    Defaults are resolved once at construction and never change afterwards, so
    one instance can be shared freely. Every method accepts per-call options,
    either as a :class:`CookieOptions` or as ``strict=`` / ``get_time=`` /
    ``encoder=`` keywords, merged over the instance defaults for that call.
    """

    def __init__(self, options: CookieOptions | None = None, *, settings: Settings | None = None) -> None:
        """Initialize the parser.

        Args:
            options: Construction options merged over the library defaults.
            settings: Source of the default ``strict`` flag (default: environment).

        Raises:
            InvalidEncoderError: The configured encoder is incomplete.
        """
        settings = settings or get_settings()
        defaults = ResolvedOptions(
            encoder=BaseCookieEncoder(),
            get_time=wall_clock_ms,
            strict=settings.strict,
        )
        self._options = merge_options(defaults, options)
        logger.debug("cookie parser ready (strict=%s, encoder=%r)", self._options.strict, self._options.encoder)

    @property
    def options(self) -> ResolvedOptions:
        return self._options

    def _resolve(self, options: CookieOptions | None, overrides: dict[str, Any]) -> ResolvedOptions:
        if overrides:
            options = (options or CookieOptions()).with_overrides(**overrides)
        return merge_options(self._options, options)

    def parse_set_cookie(self, raw: str, options: CookieOptions | None = None, **overrides: Any) -> Cookie:
        """Parse a ``Set-Cookie`` string. See :func:`cookiewire.parser.set_cookie.parse_set_cookie`."""
        return parse_set_cookie(raw, self._resolve(options, overrides))

    def parse_cookie(self, raw: str, options: CookieOptions | None = None, **overrides: Any) -> list[Cookie]:
        """Parse a ``Cookie`` header. See :func:`cookiewire.parser.cookie_header.parse_cookie`."""
        return parse_cookie(raw, self._resolve(options, overrides))

    def serialize_set_cookie(self, cookie: Cookie, options: CookieOptions | None = None, **overrides: Any) -> str:
        """Serialize one cookie as a ``Set-Cookie`` string."""
        return serialize_set_cookie(cookie, self._resolve(options, overrides))

    def serialize_cookie(self, cookies: Iterable[Cookie], options: CookieOptions | None = None, **overrides: Any) -> str:
        """Serialize cookies as a ``Cookie`` header value."""
        return serialize_cookie(cookies, self._resolve(options, overrides))

    def remove_expired(
        self,
        cookies: Iterable[Cookie],
        remove_session_cookies: bool = False,
        options: CookieOptions | None = None,
        **overrides: Any,
    ) -> list[Cookie]:
        """Drop expired cookies using the resolved clock.

        Cookies without ``expires`` are kept only if ``remove_session_cookies``.
        """
        resolved = self._resolve(options, overrides)
        return remove_expired_cookies(cookies, remove_session_cookies, now=resolved.get_time())

    def merge(self, existing: Iterable[Cookie], incoming: Iterable[Cookie]) -> list[Cookie]:
        """Merge cookie collections; incoming cookies replace same-named ones."""
        return merge_cookies(existing, incoming)


def create_cookie_parser(
    options: CookieOptions | None = None,
    *,
    encoder: CookieEncoder | None = None,
    get_time: Callable[[], int] | None = None,
    strict: bool | None = None,
) -> CookieParser:
    """Build a :class:`CookieParser` from options and/or keywords."""
    options = (options or CookieOptions()).with_overrides(encoder=encoder, get_time=get_time, strict=strict)
    return CookieParser(options)
