"""Frozen Pydantic cookie record shared by all modules."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, field_validator

from cookiewire.shared.enums import SameSite

MAX_SAFE_INTEGER = 2**53 - 1

ValueT = TypeVar("ValueT")


def is_safe_integer(value: object) -> bool:
    """Return True for ints in the exactly-representable double range (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


class Cookie(BaseModel, Generic[ValueT]):
    """One logical cookie, as carried by a ``Set-Cookie`` or ``Cookie`` header.

    ``None`` marks an attribute as absent. ``secure_prefix`` and ``host_prefix``
    record that the wire name carried ``__Secure-`` / ``__Host-``; the stored
    ``name`` never includes the prefix.
    """

    model_config = {"frozen": True}

    name: str = ""
    value: ValueT = ""  # type: ignore[assignment]
    # milliseconds since 1970-01-01T00:00:00Z
    expires: int | None = None
    path: str | None = None
    domain: str | None = None
    http_only: bool | None = None
    secure: bool | None = None
    same_site: SameSite | None = None
    secure_prefix: bool | None = None
    host_prefix: bool | None = None

    @field_validator("expires", mode="before")
    @classmethod
    def _drop_unsafe_expires(cls, value: Any) -> int | None:
        if is_safe_integer(value):
            return value
        return None

    @field_validator("same_site", mode="before")
    @classmethod
    def _normalize_same_site(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SameSite.normalize(value)
        return value

    def to_dict(self) -> dict[str, Any]:
        """Return the record with absent attributes left out."""
        return self.model_dump(exclude_none=True)
