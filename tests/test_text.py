"""Tests for free text and hostname sanitization."""

import pytest

from safe_input import (
    EmptySanitizedValueError,
    InvalidFormatError,
    clean_text,
    sanitize_hostname,
)


class TestCleanText:
    """Test cases for clean_text."""

    @pytest.mark.parametrize("text,expected", [
        ("hello world", "hello world"),
        ("hello<world>", "hello world"),
        ("hello\x00world", "helloworld"),
        ("hello   world ", "hello world"),
        ("héllo wörld", "héllo wörld"),
        ("Hello\t<World>  !", "Hello World !"),
        ("a{b}c|d\\e^f~g", "a b c d e f g"),
        ("a  b", "a b"),
        ("line\nbreak", "linebreak"),
        ("x\u0085y", "xy"),
    ])
    def test_cleans_text(self, text: str, expected: str) -> None:
        assert clean_text(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "<>{}|\\^~", "\x00\x01", "\t\n"])
    def test_empty_result_rejected(self, text: str) -> None:
        """Should raise when nothing is left after cleaning."""
        with pytest.raises(EmptySanitizedValueError, match="empty"):
            clean_text(text)

    def test_error_carries_input(self) -> None:
        with pytest.raises(EmptySanitizedValueError) as exc_info:
            clean_text("<>")
        assert exc_info.value.value == "<>"

    def test_errors_are_value_errors(self) -> None:
        """Sanitization errors should be catchable as ValueError."""
        with pytest.raises(ValueError):
            clean_text("")


class TestSanitizeHostname:
    """Test cases for sanitize_hostname."""

    @pytest.mark.parametrize("text,expected", [
        ("example.com", "example.com"),
        ("192.168.0.1", "192.168.0.1"),
        ("sub-domain.example.com", "sub-domain.example.com"),
        ("  example.com\n", "example.com"),
        ("localhost", "localhost"),
    ])
    def test_valid_hostnames(self, text: str, expected: str) -> None:
        assert sanitize_hostname(text) == expected

    @pytest.mark.parametrize("text", [
        "example!.com",
        "example com",
        "héllo.com",
        "example.com:8080",
        "user@example.com",
    ])
    def test_invalid_hostnames(self, text: str) -> None:
        with pytest.raises(InvalidFormatError, match="invalid hostname"):
            sanitize_hostname(text)

    def test_empty_hostname_propagates_text_error(self) -> None:
        with pytest.raises(EmptySanitizedValueError):
            sanitize_hostname("")
