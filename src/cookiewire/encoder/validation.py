"""Encoder completeness checks and per-operation overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cookiewire.shared.exceptions import InvalidEncoderError

# Fixed order: checked in this order, so the first missing name is deterministic.
ENCODER_OPERATIONS: tuple[str, ...] = (
    "serialize_name",
    "parse_name",
    "serialize_value",
    "parse_value",
    "serialize_domain",
    "parse_domain",
    "serialize_path",
    "parse_path",
    "serialize_expires",
    "parse_expires",
    "serialize_max_age",
    "parse_max_age",
)


def validate_encoder(encoder: object) -> None:
    """Ensure ``encoder`` exposes every operation in ``ENCODER_OPERATIONS``.

    Raises:
        InvalidEncoderError: Names the first missing or non-callable operation.
    """
    for operation in ENCODER_OPERATIONS:
        if not callable(getattr(encoder, operation, None)):
            raise InvalidEncoderError(f'Missing or invalid method "{operation}"!')


class OverriddenEncoder:
    """Encoder completed from a base encoder plus individual replacements."""

    def __init__(self, base: Any, overrides: dict[str, Callable[..., Any]]) -> None:
        self.base = base
        self.serialize_name = overrides.get("serialize_name", base.serialize_name)
        self.parse_name = overrides.get("parse_name", base.parse_name)
        self.serialize_value = overrides.get("serialize_value", base.serialize_value)
        self.parse_value = overrides.get("parse_value", base.parse_value)
        self.serialize_domain = overrides.get("serialize_domain", base.serialize_domain)
        self.parse_domain = overrides.get("parse_domain", base.parse_domain)
        self.serialize_path = overrides.get("serialize_path", base.serialize_path)
        self.parse_path = overrides.get("parse_path", base.parse_path)
        self.serialize_expires = overrides.get("serialize_expires", base.serialize_expires)
        self.parse_expires = overrides.get("parse_expires", base.parse_expires)
        self.serialize_max_age = overrides.get("serialize_max_age", base.serialize_max_age)
        self.parse_max_age = overrides.get("parse_max_age", base.parse_max_age)

    def __repr__(self) -> str:
        return f"<OverriddenEncoder base={self.base!r}>"


def override_encoder(base: Any, **operations: Callable[..., Any]) -> OverriddenEncoder:
    """Build a complete encoder from ``base`` with some operations replaced.

    Each replacement takes ``(value, options)`` like the operation it replaces.

    Raises:
        InvalidEncoderError: ``base`` is incomplete, an operation name is
            unknown, or a replacement is not callable.
    """
    validate_encoder(base)
    for name, func in operations.items():
        if name not in ENCODER_OPERATIONS:
            raise InvalidEncoderError(f'Unknown method "{name}"!')
        if not callable(func):
            raise InvalidEncoderError(f'Missing or invalid method "{name}"!')
    return OverriddenEncoder(base, operations)
