"""``Set-Cookie`` string parsing (RFC 6265 section 5.2)."""

from __future__ import annotations

import logging
from typing import Any

from cookiewire.parser.tokenizer import decode_pair, detect_prefix, prefix_fields, split_pair, split_parts
from cookiewire.shared.enums import SameSite
from cookiewire.shared.exceptions import InvalidCookieStringError
from cookiewire.shared.models import Cookie, is_safe_integer
from cookiewire.shared.options import ResolvedOptions

logger = logging.getLogger(__name__)


def parse_set_cookie(raw: str, options: ResolvedOptions) -> Cookie:
    """Parse one ``Set-Cookie`` string into a :class:`Cookie`.

    The first ``;``-separated part is the name/value pair; the rest are
    attributes. Unknown or malformed attributes are dropped silently.
    When both ``Max-Age`` and ``Expires`` decode, ``Max-Age`` wins.

    Args:
        raw: Header value without the ``Set-Cookie:`` name.
        options: Resolved options (encoder, clock, strict flag).

    Returns:
        The parsed cookie; ``name`` and ``value`` are never absent.

    Raises:
        InvalidCookieStringError: Strict mode and the cookie name is empty.
    """
    encoder = options.encoder
    encoder_options = options.encoder_options()
    parts = split_parts(raw)

    name, value = split_pair(parts[0])
    if options.strict and not name:
        raise InvalidCookieStringError("Name cannot be empty!", raw, parts[0].strip())

    name, prefix = detect_prefix(name)
    fields: dict[str, Any] = prefix_fields(prefix)
    host_prefix = fields.get("host_prefix", False)

    fields["name"], fields["value"] = decode_pair(name, value, encoder, encoder_options)

    max_age: int | None = None
    expires: int | None = None

    for part in parts[1:]:
        key, attr_value = split_pair(part)
        upper_key = key.upper()

        if upper_key == "MAX-AGE":
            max_age = encoder.parse_max_age(attr_value, encoder_options)
        elif upper_key == "EXPIRES":
            expires = encoder.parse_expires(attr_value, encoder_options)
        elif upper_key == "PATH":
            if host_prefix:
                logger.debug("ignoring Path on __Host- cookie %r", fields["name"])
                continue
            path = encoder.parse_path(attr_value, encoder_options)
            if path:
                fields["path"] = path
        elif upper_key == "DOMAIN":
            if host_prefix:
                logger.debug("ignoring Domain on __Host- cookie %r", fields["name"])
                continue
            domain = encoder.parse_domain(attr_value, encoder_options)
            if domain:
                fields["domain"] = domain
        elif upper_key == "SAMESITE":
            fields["same_site"] = SameSite.normalize(attr_value)
        elif key:
            logger.debug("ignoring unknown attribute %r", key)
        else:
            flag = attr_value.upper()
            if flag == "SAMESITE":
                fields["same_site"] = SameSite.STRICT
            elif flag == "SECURE":
                fields["secure"] = True
            elif flag == "HTTPONLY":
                fields["http_only"] = True
            elif flag:
                logger.debug("ignoring unknown flag %r", attr_value)

    if is_safe_integer(max_age):
        fields["expires"] = max_age
    elif is_safe_integer(expires):
        fields["expires"] = expires

    return Cookie(**fields)
