"""Tests for request and formatting helpers."""

import pytest
from django.contrib.auth.models import AnonymousUser

from fuel_calculator.utils import format_number, get_client_ip, get_username


class TestGetClientIp:
    def test_remote_addr_by_default(self, rf, settings):
        settings.FUEL_CALCULATOR = {}
        request = rf.get("/", REMOTE_ADDR="10.0.0.1", HTTP_X_FORWARDED_FOR="203.0.113.9")
        assert get_client_ip(request) == "10.0.0.1"

    def test_forwarded_for_ignored_when_disabled(self, rf, settings):
        settings.FUEL_CALCULATOR = {"TRUST_FORWARDED_FOR": False}
        request = rf.get("/", REMOTE_ADDR="10.0.0.1", HTTP_X_FORWARDED_FOR="203.0.113.9")
        assert get_client_ip(request) == "10.0.0.1"

    def test_forwarded_for_trusted_when_enabled(self, rf, settings):
        settings.FUEL_CALCULATOR = {"TRUST_FORWARDED_FOR": True}
        request = rf.get(
            "/", REMOTE_ADDR="10.0.0.1", HTTP_X_FORWARDED_FOR="203.0.113.9, 10.0.0.1"
        )
        assert get_client_ip(request) == "203.0.113.9"

    def test_enabled_without_header_falls_back(self, rf, settings):
        settings.FUEL_CALCULATOR = {"TRUST_FORWARDED_FOR": True}
        request = rf.get("/", REMOTE_ADDR="10.0.0.1")
        assert get_client_ip(request) == "10.0.0.1"


def test_anonymous_username():
    assert get_username(AnonymousUser()) == "Anonymous"
    assert get_username(None) == "Anonymous"


@pytest.mark.parametrize(
    "value, expected", [(5.0, "5"), (7.5, "7.5"), (0.0, "0"), (11.375, "11.375")]
)
def test_format_number(value, expected):
    assert format_number(value) == expected
