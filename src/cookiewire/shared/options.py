"""Parser/encoder options and their layered merge."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, SkipValidation

from cookiewire.encoder.interfaces import CookieEncoder
from cookiewire.encoder.validation import validate_encoder

logger = logging.getLogger(__name__)


class EncoderOptions(BaseModel):
    """Options handed to every encoder operation."""

    model_config = {"frozen": True}

    strict: bool = False
    get_time: Callable[[], int]


class CookieOptions(BaseModel):
    """Partial options for parser construction or a single call.

    ``None`` means "inherit from the layer below".
    """

    model_config = {"frozen": True, "extra": "forbid", "arbitrary_types_allowed": True}

    # Completeness is checked by merge_options, which raises InvalidEncoderError
    encoder: SkipValidation[CookieEncoder | None] = None
    get_time: Callable[[], int] | None = None
    strict: bool | None = None

    def with_overrides(self, **overrides: Any) -> CookieOptions:
        """Return a copy with the non-None keyword overrides applied."""
        if not overrides:
            return self
        merged = dict(self)
        merged.update({key: value for key, value in overrides.items() if value is not None})
        return CookieOptions.model_validate(merged)


class ResolvedOptions(BaseModel):
    """Fully resolved options; every field is set."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    encoder: SkipValidation[CookieEncoder]
    get_time: Callable[[], int]
    strict: bool = False

    def encoder_options(self) -> EncoderOptions:
        return EncoderOptions(strict=self.strict, get_time=self.get_time)


def merge_options(defaults: ResolvedOptions, options: CookieOptions | None = None) -> ResolvedOptions:
    """Shallow-merge ``options`` over ``defaults`` field by field.

    Raises:
        InvalidEncoderError: The resulting encoder is missing an operation.
    """
    if options is None:
        validate_encoder(defaults.encoder)
        return defaults

    combined = ResolvedOptions(
        encoder=options.encoder if options.encoder is not None else defaults.encoder,
        get_time=options.get_time if options.get_time is not None else defaults.get_time,
        strict=options.strict if options.strict is not None else defaults.strict,
    )
    validate_encoder(combined.encoder)
    logger.debug("merged cookie options (strict=%s)", combined.strict)
    return combined
