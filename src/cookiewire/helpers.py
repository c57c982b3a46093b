"""Collection helpers for parsed cookies."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cookiewire.shared.models import Cookie, is_safe_integer

logger = logging.getLogger(__name__)


def remove_expired(cookies: Iterable[Cookie], remove_session_cookies: bool = False, *, now: int) -> list[Cookie]:
    """Filter out cookies that have expired at ``now`` (epoch ms).

    A cookie with ``expires`` survives only while ``expires > now``. A cookie
    without ``expires`` (a session cookie) survives only when
    ``remove_session_cookies`` is True.
    """
    kept: list[Cookie] = []
    for cookie in cookies:
        if is_safe_integer(cookie.expires):
            if cookie.expires > now:
                kept.append(cookie)
        elif remove_session_cookies:
            kept.append(cookie)
    logger.debug("remove_expired kept %d cookie(s)", len(kept))
    return kept


def merge(existing: Iterable[Cookie], incoming: Iterable[Cookie]) -> list[Cookie]:
    """Combine two cookie collections; ``incoming`` replaces same-named entries.

    Result is the surviving ``existing`` cookies followed by all of ``incoming``.
    """
    incoming = list(incoming)
    replaced = {cookie.name for cookie in incoming}
    return [cookie for cookie in existing if cookie.name not in replaced] + incoming
