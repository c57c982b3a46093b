"""Hierarchical exception types for cookiewire."""

from __future__ import annotations

# U+0330 COMBINING TILDE BELOW, appended to each character of an invalid portion
_MARK = "\u0330"


class CookieError(Exception):
    """Base exception for all cookiewire errors."""


# ── Configuration ───────────────────────────────────────────────


class InvalidEncoderError(CookieError):
    """A supplied encoder lacks one of the required operations."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid cookie encoder: {detail}")


# ── Parsing / serialization ─────────────────────────────────────


class InvalidCookieStringError(CookieError):
    """A cookie string (or the record being serialized) failed strict validation.

    Args:
        reason: Short human readable reason.
        cookie_string: The offending cookie text, attached for diagnostics.
        invalid_portion: Fragment of ``cookie_string`` to highlight.
    """

    def __init__(self, reason: str, cookie_string: str | None = None, invalid_portion: str | None = None) -> None:
        self.reason = reason
        self.cookie_string = cookie_string
        self.invalid_portion = invalid_portion

        message = reason
        if cookie_string:
            rendered = cookie_string
            if invalid_portion:
                marked = "".join(f"{ch}{_MARK}" for ch in invalid_portion)
                rendered = rendered.replace(invalid_portion, marked, 1)
            message += f"\n{rendered}"
        super().__init__(f"Invalid cookie string: {message}")
