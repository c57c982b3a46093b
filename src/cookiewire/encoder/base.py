"""Default cookie encoder.

Names, domains and paths pass through unchanged. Values are percent-encoded
with the same unreserved set as ECMAScript's ``encodeURIComponent`` so cookies
written here can be read by browsers and JavaScript servers alike. Dates use
the RFC 1123 form required by RFC 6265 section 4.1.1.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from email.utils import format_datetime, parsedate_to_datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, unquote

from cookiewire.shared.models import is_safe_integer

if TYPE_CHECKING:
    from cookiewire.shared.options import EncoderOptions

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# Characters encodeURIComponent leaves alone beyond quote()'s built-in "_.-~"
_VALUE_SAFE = "!*'()"

_RADIX_PREFIXES = (
    ("0x", 16, re.compile(r"[0-9a-f]+", re.IGNORECASE)),
    ("0o", 8, re.compile(r"[0-7]+")),
    ("0b", 2, re.compile(r"[01]+")),
)


def parse_date(text: str) -> datetime | None:
    """Parse an HTTP or ISO 8601 date; naive results are taken as UTC."""
    stripped = text.strip()
    if not stripped:
        return None

    parsed: datetime | None = None
    try:
        parsed = parsedate_to_datetime(stripped)
    except (TypeError, ValueError, IndexError, OverflowError):
        try:
            parsed = datetime.fromisoformat(stripped)
        except ValueError:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_number(text: str) -> int | None:
    """Coerce attribute text to an integer the way ECMAScript's unary ``+`` would.

    Blank text is 0; decimal, exponent and ``0x``/``0o``/``0b`` forms are
    accepted. Returns None for anything that is not a whole number.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    if "_" in stripped:
        return None

    lowered = stripped.lower()
    for prefix, base, digits in _RADIX_PREFIXES:
        if lowered.startswith(prefix):
            # int() would also take a sign or blanks after the prefix
            if not digits.fullmatch(stripped[2:]):
                return None
            return int(stripped[2:], base)

    try:
        number = float(stripped)
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


class BaseCookieEncoder:
    """Default implementation of :class:`~cookiewire.encoder.interfaces.CookieEncoder`.

    Subclass and override individual operations to customize a single field.
    """

    # ── name ────────────────────────────────────────────────────

    def serialize_name(self, name: Any, options: EncoderOptions) -> str | None:
        if isinstance(name, str):
            return name
        return None

    def parse_name(self, name: Any, options: EncoderOptions) -> str | None:
        if isinstance(name, str):
            return name
        return None

    # ── value ───────────────────────────────────────────────────

    def serialize_value(self, value: Any, options: EncoderOptions) -> str | None:
        if not isinstance(value, str):
            return None
        try:
            return quote(value, safe=_VALUE_SAFE)
        except UnicodeEncodeError:
            logger.debug("cookie value is not encodable as UTF-8")
            return None

    def parse_value(self, value: Any, options: EncoderOptions) -> str | None:
        """Percent-decode a cookie value.

        Malformed escapes such as ``%zz`` are left in place. Escapes that decode
        to invalid UTF-8 make the value absent.
        """
        if not isinstance(value, str):
            return None
        try:
            return unquote(value, errors="strict")
        except UnicodeDecodeError:
            logger.debug("cookie value has percent-escapes that are not valid UTF-8")
            return None

    # ── domain / path ───────────────────────────────────────────

    def serialize_domain(self, domain: Any, options: EncoderOptions) -> str | None:
        if isinstance(domain, str):
            return domain
        return None

    def parse_domain(self, domain: Any, options: EncoderOptions) -> str | None:
        if isinstance(domain, str):
            return domain
        return None

    def serialize_path(self, path: Any, options: EncoderOptions) -> str | None:
        if isinstance(path, str):
            return path
        return None

    def parse_path(self, path: Any, options: EncoderOptions) -> str | None:
        if isinstance(path, str):
            return path
        return None

    # ── expires / max-age ───────────────────────────────────────

    def serialize_expires(self, expires: Any, options: EncoderOptions) -> str | None:
        if not is_safe_integer(expires):
            return None
        try:
            moment = _EPOCH + timedelta(milliseconds=expires)
        except OverflowError:
            logger.debug("expires %d is outside the representable date range", expires)
            return None
        return format_datetime(moment, usegmt=True)

    def parse_expires(self, expires: Any, options: EncoderOptions) -> int | None:
        if not isinstance(expires, str):
            return None
        moment = parse_date(expires)
        if moment is None:
            return None
        millis = (moment - _EPOCH) // _ONE_MS
        if is_safe_integer(millis):
            return millis
        return None

    def serialize_max_age(self, expires: Any, options: EncoderOptions) -> str | None:
        if not is_safe_integer(expires):
            return None
        remaining = max(0, expires - options.get_time())
        seconds = (Decimal(remaining) / 1000).normalize()
        return format(seconds, "f")

    def parse_max_age(self, max_age: Any, options: EncoderOptions) -> int | None:
        if not isinstance(max_age, str):
            return None
        seconds = to_number(max_age)
        if not is_safe_integer(seconds):
            return None
        return options.get_time() + seconds * 1000

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
