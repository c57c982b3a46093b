"""Tests for serialize_cookie."""

from __future__ import annotations

import json

import pytest

from cookiewire.serializer.cookie_header import serialize_cookie
from cookiewire.shared.enums import SameSite
from cookiewire.shared.exceptions import InvalidCookieStringError
from cookiewire.shared.models import Cookie
from cookiewire.shared.options import ResolvedOptions


class TestSerializeCookie:
    def test_basic(self, strict_options: ResolvedOptions) -> None:
        cookies = [Cookie(name="id", value="5"), Cookie(name="name", value="john")]
        assert serialize_cookie(cookies, strict_options) == "id=5; name=john"

    def test_only_name_value_written(self, strict_options: ResolvedOptions) -> None:
        cookie = Cookie(
            name="id",
            value="5",
            domain="example.com",
            expires=15000,
            http_only=True,
            path="/",
            same_site=SameSite.STRICT,
            secure=True,
        )
        assert serialize_cookie([cookie], strict_options) == "id=5"

    def test_empty_list(self, strict_options: ResolvedOptions) -> None:
        assert serialize_cookie([], strict_options) == ""

    def test_secure_prefix(self, strict_options: ResolvedOptions) -> None:
        assert serialize_cookie([Cookie(name="id", value="5", secure_prefix=True)], strict_options) == "__Secure-id=5"

    def test_host_prefix(self, strict_options: ResolvedOptions) -> None:
        assert serialize_cookie([Cookie(name="id", value="5", host_prefix=True)], strict_options) == "__Host-id=5"

    def test_value_encoded(self, strict_options: ResolvedOptions) -> None:
        assert serialize_cookie([Cookie(name="id", value="a;b")], strict_options) == "id=a%3Bb"

    def test_accepts_generators(self, strict_options: ResolvedOptions) -> None:
        cookies = (Cookie(name=n, value="1") for n in "ab")
        assert serialize_cookie(cookies, strict_options) == "a=1; b=1"


class TestEmptyName:
    def test_lenient_writes_bare_equals(self, resolved_options: ResolvedOptions) -> None:
        assert serialize_cookie([Cookie(value="5")], resolved_options) == "=5"

    def test_strict_raises_with_cookie_context(self, strict_options: ResolvedOptions) -> None:
        with pytest.raises(InvalidCookieStringError) as exc_info:
            serialize_cookie([Cookie(name="ok", value="1"), Cookie(value="5", secure=True)], strict_options)
        assert json.loads(exc_info.value.cookie_string) == {"name": "", "value": "5", "secure": True}

    def test_strict_raises_for_value_without_json_form(self, strict_options: ResolvedOptions) -> None:
        class Token:
            def __repr__(self) -> str:
                return "<token>"

        with pytest.raises(InvalidCookieStringError) as exc_info:
            serialize_cookie([Cookie(value=Token())], strict_options)
        assert json.loads(exc_info.value.cookie_string) == {"name": "", "value": "<token>"}
