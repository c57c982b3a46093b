"""Tests for the CookieParser facade."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from cookiewire.config import Settings
from cookiewire.encoder.base import BaseCookieEncoder
from cookiewire.encoder.validation import override_encoder
from cookiewire.service import CookieParser, create_cookie_parser
from cookiewire.shared.exceptions import InvalidCookieStringError, InvalidEncoderError
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import CookieOptions


def epoch() -> int:
    return 0


class TestConstruction:
    def test_defaults(self, settings: Settings) -> None:
        parser = CookieParser(settings=settings)
        assert parser.options.strict is False
        assert isinstance(parser.options.encoder, BaseCookieEncoder)

    def test_settings_supply_strict_default(self) -> None:
        assert CookieParser(settings=Settings(strict=True)).options.strict is True

    def test_explicit_strict_beats_settings(self) -> None:
        parser = CookieParser(CookieOptions(strict=False), settings=Settings(strict=True))
        assert parser.options.strict is False

    def test_partial_encoder_rejected(self, settings: Settings) -> None:
        with pytest.raises(InvalidEncoderError):
            CookieParser(CookieOptions(encoder=SimpleNamespace()), settings=settings)

    def test_factory_keywords(self) -> None:
        parser = create_cookie_parser(strict=True, get_time=epoch)
        assert parser.options.strict is True
        assert parser.options.get_time() == 0


class TestPerCallOptions:
    def test_keyword_override(self, parser: CookieParser) -> None:
        cookie = parser.parse_set_cookie("id=5; Max-Age=60; Expires=Thu, 01 Jan 1970 00:00:15 GMT", get_time=epoch)
        assert cookie.to_dict() == {"name": "id", "value": "5", "expires": 60000}

    def test_options_object_override(self, parser: CookieParser) -> None:
        assert parser.parse_cookie("=5", CookieOptions(strict=False)) == [Cookie(name="", value="5")]

    def test_override_does_not_leak(self, parser: CookieParser) -> None:
        parser.parse_cookie("=5", strict=False)
        assert parser.options.strict is True
        assert parser.parse_cookie("=5") == []

    def test_keywords_layer_over_options_object(self, parser: CookieParser) -> None:
        cookies = parser.parse_cookie("=5", CookieOptions(strict=True), strict=False)
        assert len(cookies) == 1

    def test_per_call_partial_encoder_rejected(self, parser: CookieParser) -> None:
        with pytest.raises(InvalidEncoderError):
            parser.parse_set_cookie("id=5", encoder=SimpleNamespace(parse_name=lambda n, o: n))

    def test_per_call_custom_encoder(self, parser: CookieParser) -> None:
        encoder = override_encoder(BaseCookieEncoder(), serialize_value=lambda value, options: value[::-1])
        assert parser.serialize_cookie([Cookie(name="id", value="abc")], encoder=encoder) == "id=cba"


class TestOperations:
    def test_parse_set_cookie(self, parser: CookieParser) -> None:
        assert parser.parse_set_cookie("id=5").to_dict() == {"name": "id", "value": "5"}

    def test_parse_set_cookie_strict_empty_name(self, parser: CookieParser) -> None:
        with pytest.raises(InvalidCookieStringError):
            parser.parse_set_cookie("=5")

    def test_host_prefix(self, parser: CookieParser) -> None:
        assert parser.parse_set_cookie("__Host-id=5").to_dict() == {
            "name": "id",
            "value": "5",
            "host_prefix": True,
            "secure": True,
            "path": "/",
        }

    def test_serialize_set_cookie(self, parser: CookieParser) -> None:
        assert parser.serialize_set_cookie(Cookie(name="id", value="5")) == "id=5; Path=/"

    def test_serialize_cookie(self, parser: CookieParser) -> None:
        cookies = parser.parse_cookie("a=1; __Secure-b=2")
        assert parser.serialize_cookie(cookies) == "a=1; __Secure-b=2"

    def test_remove_expired_uses_clock(self, parser: CookieParser) -> None:
        cookies = [Cookie(name="old", expires=10), Cookie(name="new", expires=2000)]
        result = parser.remove_expired(cookies, False, get_time=lambda: 1000)
        assert [c.name for c in result] == ["new"]

    def test_remove_expired_idempotent(self, parser: CookieParser) -> None:
        cookies = [Cookie(name="old", expires=10), Cookie(name="s"), Cookie(name="new", expires=2000)]
        once = parser.remove_expired(cookies, True, get_time=lambda: 1000)
        assert parser.remove_expired(once, True, get_time=lambda: 1000) == once

    def test_merge(self, parser: CookieParser) -> None:
        result = parser.merge([Cookie(name="id", value="5")], [Cookie(name="id", value="10")])
        assert result == [Cookie(name="id", value="10")]
