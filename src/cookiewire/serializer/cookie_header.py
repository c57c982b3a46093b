"""``Cookie`` request-header serialization."""

from __future__ import annotations

from collections.abc import Iterable

from cookiewire.serializer.set_cookie import attach_prefix
from cookiewire.shared.exceptions import InvalidCookieStringError
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import ResolvedOptions


def serialize_cookie(cookies: Iterable[Cookie], options: ResolvedOptions) -> str:
    """Serialize cookies as ``name=value`` pairs joined by ``"; "``.

    Attributes other than name, value and prefix are ignored.

    Raises:
        InvalidCookieStringError: Strict mode and a cookie's encoded name is empty.
    """
    encoder = options.encoder
    encoder_options = options.encoder_options()
    items: list[str] = []

    for cookie in cookies:
        name = encoder.serialize_name(cookie.name, encoder_options)
        value = encoder.serialize_value(cookie.value, encoder_options)

        if options.strict and not name:
            detail = cookie.model_dump_json(exclude_none=True, fallback=repr)
            raise InvalidCookieStringError("Name cannot be empty!", detail)

        items.append(f"{attach_prefix(name or '', cookie)}={value or ''}")

    return "; ".join(items)
