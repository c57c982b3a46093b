"""Interfaces for the encoder module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cookiewire.shared.options import EncoderOptions


@runtime_checkable
class CookieEncoder(Protocol):
    """Protocol for per-field conversion between wire text and record values.

    Every operation returns ``None`` to mark the field as absent, which makes
    the parser or serializer omit it. Operations must not raise on malformed
    input.
    """

    def serialize_name(self, name: Any, options: EncoderOptions) -> str | None:
        """Encode ``Cookie.name`` for the wire."""
        ...

    def parse_name(self, name: Any, options: EncoderOptions) -> str | None:
        """Decode a wire cookie name."""
        ...

    def serialize_value(self, value: Any, options: EncoderOptions) -> str | None:
        """Encode ``Cookie.value`` for the wire."""
        ...

    def parse_value(self, value: Any, options: EncoderOptions) -> Any | None:
        """Decode a wire cookie value."""
        ...

    def serialize_domain(self, domain: Any, options: EncoderOptions) -> str | None:
        """Encode ``Cookie.domain`` as a ``Domain`` attribute value."""
        ...

    def parse_domain(self, domain: Any, options: EncoderOptions) -> str | None:
        """Decode a ``Domain`` attribute value."""
        ...

    def serialize_path(self, path: Any, options: EncoderOptions) -> str | None:
        """Encode ``Cookie.path`` as a ``Path`` attribute value."""
        ...

    def parse_path(self, path: Any, options: EncoderOptions) -> str | None:
        """Decode a ``Path`` attribute value."""
        ...

    def serialize_expires(self, expires: Any, options: EncoderOptions) -> str | None:
        """Format ``Cookie.expires`` (epoch ms) as an ``Expires`` date.

        Args:
            expires: Milliseconds since the Unix epoch.
            options: Encoder options.

        Returns:
            Date text, or None when ``expires`` is not a safe integer or not
            representable as a date.
        """
        ...

    def parse_expires(self, expires: Any, options: EncoderOptions) -> int | None:
        """Convert an ``Expires`` date into epoch milliseconds."""
        ...

    def serialize_max_age(self, expires: Any, options: EncoderOptions) -> str | None:
        """Derive a ``Max-Age`` value (seconds from now) from ``Cookie.expires``.

        Args:
            expires: Milliseconds since the Unix epoch.
            options: Encoder options; ``options.get_time()`` is "now".

        Returns:
            Non-negative decimal seconds, or None when ``expires`` is not a
            safe integer.
        """
        ...

    def parse_max_age(self, max_age: Any, options: EncoderOptions) -> int | None:
        """Convert a ``Max-Age`` value into epoch milliseconds relative to now."""
        ...
