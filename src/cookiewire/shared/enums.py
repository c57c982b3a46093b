"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class SameSite(str, Enum):
    """Values of the ``SameSite`` cookie attribute."""

    LAX = "Lax"
    STRICT = "Strict"

    @classmethod
    def normalize(cls, raw: str | SameSite) -> SameSite:
        """Map any attribute text onto a member.

        ``lax`` in any casing is ``LAX``; everything else, including an empty
        string, is ``STRICT``.
        """
        if isinstance(raw, SameSite):
            return raw
        if raw.upper() == "LAX":
            return cls.LAX
        return cls.STRICT


@unique
class CookiePrefix(str, Enum):
    """Name prefixes from the cookie-prefixes draft, matched case-sensitively."""

    HOST = "__Host-"
    SECURE = "__Secure-"
