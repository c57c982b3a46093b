"""``Cookie`` request-header parsing (RFC 6265 section 4.2)."""

from __future__ import annotations

import logging

from cookiewire.parser.tokenizer import decode_pair, detect_prefix, prefix_fields, split_pair, split_parts
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import ResolvedOptions

logger = logging.getLogger(__name__)


def parse_cookie(raw: str, options: ResolvedOptions) -> list[Cookie]:
    """Parse a ``Cookie`` header into cookies, in header order.

    Only name/value pairs are meaningful here; prefixes are detected per
    cookie. Duplicate names are kept as separate entries.

    In strict mode cookies with an empty name are dropped. Otherwise a cookie
    is dropped only when both its name and value are empty.
    """
    encoder = options.encoder
    encoder_options = options.encoder_options()
    cookies: list[Cookie] = []

    for part in split_parts(raw):
        name, value = split_pair(part)
        name, prefix = detect_prefix(name)
        name, value = decode_pair(name, value, encoder, encoder_options)

        if options.strict:
            if not name:
                logger.debug("dropping cookie with empty name (strict)")
                continue
        elif not name and value == "":
            continue

        cookies.append(Cookie(name=name, value=value, **prefix_fields(prefix)))

    return cookies
