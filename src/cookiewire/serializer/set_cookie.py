"""``Set-Cookie`` string serialization."""

from __future__ import annotations

import logging

from cookiewire.shared.enums import CookiePrefix, SameSite
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import ResolvedOptions

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/"


def attach_prefix(name: str, cookie: Cookie) -> str:
    """Put the literal ``__Host-`` / ``__Secure-`` prefix back in front of an encoded name."""
    if cookie.host_prefix:
        return f"{CookiePrefix.HOST.value}{name}"
    if cookie.secure_prefix:
        return f"{CookiePrefix.SECURE.value}{name}"
    return name


def serialize_set_cookie(cookie: Cookie, options: ResolvedOptions) -> str:
    """Serialize a cookie into a ``Set-Cookie`` string.

    Attribute order is fixed: ``name=value``, ``Expires``, ``Max-Age``,
    ``Domain``, ``Path``, ``SameSite``, ``HttpOnly``, ``Secure``. ``Path`` is
    always written and defaults to ``/``. Both ``Expires`` and ``Max-Age`` are
    written when the encoder yields them.

    ``host_prefix`` forces ``Secure``, ``Path=/`` and no ``Domain``;
    ``secure_prefix`` forces ``Secure``. The record itself is not modified.
    """
    encoder = options.encoder
    encoder_options = options.encoder_options()

    secure = cookie.secure
    domain = cookie.domain
    path = cookie.path
    if cookie.host_prefix:
        secure = True
        domain = None
        path = DEFAULT_PATH
    elif cookie.secure_prefix:
        secure = True

    expires = encoder.serialize_expires(cookie.expires, encoder_options)
    max_age = encoder.serialize_max_age(cookie.expires, encoder_options)
    encoded_domain = encoder.serialize_domain(domain, encoder_options)
    encoded_path = encoder.serialize_path(path, encoder_options)
    value = encoder.serialize_value(cookie.value, encoder_options) or ""
    name = encoder.serialize_name(cookie.name, encoder_options) or ""

    # TODO: raise InvalidCookieStringError for an empty name in strict mode, as serialize_cookie does.
    if options.strict and not name:
        logger.debug("serializing Set-Cookie with empty name")

    parts = [f"{attach_prefix(name, cookie)}={value}"]

    if expires is not None:
        parts.append(f"Expires={expires}")
    if max_age is not None:
        parts.append(f"Max-Age={max_age}")
    if encoded_domain is not None:
        parts.append(f"Domain={encoded_domain}")

    parts.append(f"Path={encoded_path or DEFAULT_PATH}")

    if cookie.same_site is not None:
        parts.append(f"SameSite={SameSite.normalize(cookie.same_site).value}")
    if cookie.http_only is True:
        parts.append("HttpOnly")
    if secure is True:
        parts.append("Secure")

    return "; ".join(parts)
