"""Splitting helpers shared by the ``Set-Cookie`` and ``Cookie`` parsers.

Both headers are ``;``-separated. Each part is either ``key=value`` (split on
the first ``=`` only, so values may contain ``=``) or a bare token.
"""

from __future__ import annotations

from typing import Any

from cookiewire.encoder.interfaces import CookieEncoder
from cookiewire.shared.enums import CookiePrefix
from cookiewire.shared.options import EncoderOptions


def split_parts(raw: str) -> list[str]:
    """Split a header value on ``;`` preserving order and empty parts."""
    return raw.split(";")


def split_pair(part: str) -> tuple[str, str]:
    """Split ``key=value`` on the first ``=`` and trim both sides.

    A part without ``=`` yields an empty key and the whole trimmed part as value.
    """
    key, sep, value = part.partition("=")
    if not sep:
        return "", part.strip()
    return key.strip(), value.strip()


def detect_prefix(name: str) -> tuple[str, CookiePrefix | None]:
    """Strip a ``__Host-`` or ``__Secure-`` prefix from ``name``.

    Returns:
        (name without prefix, matched prefix or None). Matching is
        case-sensitive: ``__host-id`` keeps its literal name.
    """
    if name.startswith(CookiePrefix.HOST.value):
        return name[len(CookiePrefix.HOST.value) :], CookiePrefix.HOST
    if name.startswith(CookiePrefix.SECURE.value):
        return name[len(CookiePrefix.SECURE.value) :], CookiePrefix.SECURE
    return name, None


def prefix_fields(prefix: CookiePrefix | None) -> dict[str, Any]:
    """Record fields implied by a detected prefix."""
    if prefix is CookiePrefix.HOST:
        return {"host_prefix": True, "path": "/", "secure": True}
    if prefix is CookiePrefix.SECURE:
        return {"secure_prefix": True, "secure": True}
    return {}


def decode_pair(
    name: str, value: str, encoder: CookieEncoder, encoder_options: EncoderOptions
) -> tuple[str, Any]:
    """Decode a name/value pair through the encoder; absent results become ``""``."""
    decoded_name = encoder.parse_name(name, encoder_options)
    decoded_value = encoder.parse_value(value, encoder_options)
    return (
        "" if decoded_name is None else decoded_name,
        "" if decoded_value is None else decoded_value,
    )
