"""
Unit tests for request address construction.
"""

from urllib.parse import urlsplit

import pytest

from wanikani_client.api.address import (
    build_address,
    redact_address,
    render_option,
    validate_address,
)
from wanikani_client.errors import AddressError

from payloads import API_KEY


class TestRenderOption:
    """Test cases for option rendering."""

    def test_scalar_option(self):
        assert render_option(10) == "10"
        assert render_option("25") == "25"

    def test_level_list_keeps_trailing_comma(self):
        assert render_option([1, 2, 3]) == "1,2,3,"

    def test_level_list_without_trailing_comma(self):
        assert render_option([1, 2, 3], trailing_comma=False) == "1,2,3"

    def test_empty_level_list(self):
        assert render_option([]) == ""


class TestBuildAddress:
    """Test cases for build_address."""

    def test_address_without_options(self):
        address = build_address("v1.4", API_KEY, "study-queue")

        assert address == f"https://www.wanikani.com/api/v1.4/user/{API_KEY}/study-queue/"

    def test_address_with_scalar_option(self):
        address = build_address("v1.4", API_KEY, "recent-unlocks", [10])

        assert address.endswith(f"/user/{API_KEY}/recent-unlocks/10")

    def test_address_with_levels(self):
        address = build_address("v1.4", API_KEY, "kanji", [[1, 5, 12]])

        assert address.endswith("/kanji/1,5,12,")

    def test_address_with_levels_without_trailing_comma(self):
        address = build_address("v1.4", API_KEY, "kanji", [[1, 5]], trailing_comma=False)

        assert address.endswith("/kanji/1,5")

    def test_custom_base_url(self):
        address = build_address("v1.3", API_KEY, "kanji", base_url="http://localhost:8080/api/")

        assert address == f"http://localhost:8080/api/v1.3/user/{API_KEY}/kanji/"

    @pytest.mark.parametrize(
        "resource",
        [
            "user-information",
            "study-queue",
            "level-progression",
            "srs-distribution",
            "recent-unlocks",
            "critical-items",
            "radicals",
            "kanji",
            "vocabulary",
        ],
    )
    def test_address_reparses(self, resource):
        address = build_address("v1.4", API_KEY, resource, [[1, 2]])
        parts = urlsplit(address)

        assert parts.scheme == "https"
        assert parts.netloc == "www.wanikani.com"
        assert parts.path.split("/")[4:6] == [API_KEY, resource]
        assert validate_address(address) == address

    @pytest.mark.parametrize("api_key", ["bad key", "key?x=1", "key#frag", "k%zz", "キー", "tab\tkey"])
    def test_unsafe_api_key_fails(self, api_key):
        with pytest.raises(AddressError) as exc_info:
            build_address("v1.4", api_key, "study-queue")

        assert api_key in exc_info.value.address

    def test_unsafe_api_key_is_quoted_when_requested(self):
        address = build_address("v1.4", "bad key", "study-queue", quote_api_key=True)

        assert "/user/bad%20key/study-queue/" in address

    def test_invalid_base_url_fails(self):
        with pytest.raises(AddressError):
            build_address("v1.4", API_KEY, "kanji", base_url="not a url")


class TestRedactAddress:
    """Test cases for redact_address."""

    def test_api_key_is_masked(self):
        address = build_address("v1.4", API_KEY, "kanji")

        redacted = redact_address(address, API_KEY)

        assert API_KEY not in redacted
        assert "/user/***/kanji/" in redacted

    def test_empty_key_leaves_address_alone(self):
        assert redact_address("https://example.com/a", "") == "https://example.com/a"
