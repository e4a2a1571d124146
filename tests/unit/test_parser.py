"""Unit tests for valuri.parser module."""

import pytest

from valuri.components import Component
from valuri.exceptions import InvalidUriError
from valuri.parser import parse_components


class TestParseComponents:
    """Tests for parse_components()."""

    def test_full_uri(self, full_uri_text):
        """Test parsing a URI with every component."""
        assert parse_components(full_uri_text) == {
            Component.SCHEME: "http",
            Component.USER: "user",
            Component.PASS: "pass",
            Component.HOST: "example.com",
            Component.PORT: 8080,
            Component.PATH: "/path",
            Component.QUERY: "q=1",
            Component.FRAGMENT: "frag",
        }

    def test_missing_components_are_none(self):
        """Test that absent components map to None."""
        result = parse_components("http://example.com")
        assert result[Component.SCHEME] == "http"
        assert result[Component.HOST] == "example.com"
        for component in (
            Component.USER,
            Component.PASS,
            Component.PORT,
            Component.PATH,
            Component.QUERY,
            Component.FRAGMENT,
        ):
            assert result[component] is None

    def test_host_case_is_preserved(self):
        """Test that the host keeps its original case."""
        assert parse_components("http://Example.COM/")[Component.HOST] == "Example.COM"

    def test_ipv6_host_keeps_brackets(self):
        """Test that bracketed IPv6 hosts are reported with brackets."""
        result = parse_components("http://[::1]:8080/")
        assert result[Component.HOST] == "[::1]"
        assert result[Component.PORT] == 8080

    def test_user_without_password(self):
        """Test user info without a password."""
        result = parse_components("ftp://anonymous@ftp.example.org/pub")
        assert result[Component.USER] == "anonymous"
        assert result[Component.PASS] is None

    def test_path_only(self):
        """Test a relative reference with only a path."""
        result = parse_components("/just/a/path")
        assert result[Component.PATH] == "/just/a/path"
        assert result[Component.HOST] is None
        assert result[Component.SCHEME] is None

    def test_scheme_without_authority(self):
        """Test a URI with no authority section."""
        result = parse_components("mailto:someone@example.com")
        assert result[Component.SCHEME] == "mailto"
        assert result[Component.HOST] is None
        assert result[Component.PATH] == "someone@example.com"

    @pytest.mark.parametrize(
        "text,scheme",
        [
            ("HTTP://Example.com/", "HTTP"),
            ("Svn+SSH://host/repo", "Svn+SSH"),
        ],
    )
    def test_scheme_case_is_preserved(self, text, scheme):
        """Test that the scheme keeps its original case."""
        assert parse_components(text)[Component.SCHEME] == scheme

    def test_port_zero(self):
        """Test that port 0 is kept and not treated as absent."""
        assert parse_components("http://example.com:0/")[Component.PORT] == 0

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "http://example.com:port/",
            "http://example.com:99999/",
            "http://[::1/",
            "http://:8080/p",
            "http://user@/path",
        ],
    )
    def test_invalid_uris_raise(self, text):
        """Test that unparseable or empty input raises InvalidUriError."""
        with pytest.raises(InvalidUriError) as exc_info:
            parse_components(text)
        assert exc_info.value.uri == text

    def test_non_string_raises(self):
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidUriError):
            parse_components(None)

    def test_error_chains_cause(self):
        """Test that the underlying ValueError is chained."""
        with pytest.raises(InvalidUriError) as exc_info:
            parse_components("http://example.com:port/")
        assert isinstance(exc_info.value.__cause__, ValueError)
