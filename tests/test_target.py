"""Tests for the request-target classifier."""

import pytest

from request_target import __version__
from request_target.target import (
    ParseError,
    ParseErrorKind,
    RequestTarget,
    classify_target,
)


class TestClassifyTarget:
    """Tests for the four canonical forms."""

    def test_origin_form(self):
        assert classify_target("/r/rust") is RequestTarget.ORIGIN_FORM

    def test_absolute_form(self):
        assert classify_target("https://example.com") is RequestTarget.ABSOLUTE_FORM

    def test_authority_form(self):
        assert classify_target("example.com") is RequestTarget.AUTHORITY_FORM

    def test_asterisk_form(self):
        assert classify_target("*") is RequestTarget.ASTERISK_FORM

    @pytest.mark.parametrize(
        "target",
        [
            "/",
            "/path/sub/42",
            "/path/sub/42?key=value",
            "/where?q=now",
            "/path/sub boop/42",
            "//double",
            "/a:b",
        ],
    )
    def test_origin_form_variants(self, target):
        assert classify_target(target) is RequestTarget.ORIGIN_FORM

    @pytest.mark.parametrize(
        "target",
        [
            "http://zombo.com",
            "http://picard.ytmnd.com/",
            "https://rust-lang.org/a path",
            "ftp://rust-lang.org",
            "a://b",
        ],
    )
    def test_absolute_form_variants(self, target):
        assert classify_target(target) is RequestTarget.ABSOLUTE_FORM

    @pytest.mark.parametrize(
        "target",
        [
            "www.example.com:80",
            "www.example.com",
            "user@example.com",
            "user name@example.com",
            "[::1]:8080",
            "*x",
        ],
    )
    def test_authority_form_variants(self, target):
        assert classify_target(target) is RequestTarget.AUTHORITY_FORM

    def test_scheme_takes_precedence_over_host_port(self):
        assert classify_target("a://b") is RequestTarget.ABSOLUTE_FORM
        assert classify_target("a:b") is RequestTarget.AUTHORITY_FORM

    def test_asterisk_requires_exact_match(self):
        assert classify_target("*x") is not RequestTarget.ASTERISK_FORM

    def test_classification_is_repeatable(self):
        for target in ("/r/rust", "https://example.com", "example.com", "*"):
            assert classify_target(target) is classify_target(target)

    def test_parse_classmethod(self):
        assert RequestTarget.parse("/index.html") is RequestTarget.ORIGIN_FORM


class TestClassifyTargetErrors:
    """Tests for rejected targets."""

    def test_empty_target(self):
        with pytest.raises(ParseError) as excinfo:
            classify_target("")
        assert excinfo.value.kind is ParseErrorKind.EMPTY
        assert excinfo.value.position is None

    @pytest.mark.parametrize(
        "target",
        [
            "example.com/path",
            "user@example.com/",
            "http:/zombo.com",
            "file:/rust-lang.org",
            "a:/b",
            "a:b:/c",
            "://host",
            "*/x",
        ],
    )
    def test_invalid_structure(self, target):
        with pytest.raises(ParseError) as excinfo:
            classify_target(target)
        assert excinfo.value.kind is ParseErrorKind.INVALID
        assert excinfo.value.target == target

    @pytest.mark.parametrize(
        "target",
        [
            "  ",
            "\t\n\r\u2008\u00a0\u205f",
            " *",
            "* ",
            "   *  ",
            " /path/sub/42",
            "example.com\r\n",
        ],
    )
    def test_surrounding_whitespace_is_invalid(self, target):
        with pytest.raises(ParseError) as excinfo:
            classify_target(target)
        assert excinfo.value.kind is ParseErrorKind.INVALID

    def test_position_of_stray_slash(self):
        with pytest.raises(ParseError) as excinfo:
            classify_target("example.com/path")
        assert excinfo.value.position == 11

    def test_position_of_slash_after_port_colon(self):
        with pytest.raises(ParseError) as excinfo:
            classify_target("http:/zombo.com")
        assert excinfo.value.position == 5

    def test_position_of_trailing_whitespace(self):
        with pytest.raises(ParseError) as excinfo:
            classify_target("* ")
        assert excinfo.value.position == 1

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError, match="Empty request target"):
            classify_target("")

    def test_invalid_message_names_target(self):
        with pytest.raises(ValueError, match="Invalid request target"):
            classify_target("a:/b")


class TestPermits:
    """Tests for method compatibility of each form."""

    def test_asterisk_only_with_options(self):
        assert RequestTarget.ASTERISK_FORM.permits("OPTIONS")
        assert not RequestTarget.ASTERISK_FORM.permits("GET")

    def test_authority_only_with_connect(self):
        assert RequestTarget.AUTHORITY_FORM.permits("CONNECT")
        assert not RequestTarget.AUTHORITY_FORM.permits("GET")

    @pytest.mark.parametrize(
        "form", [RequestTarget.ORIGIN_FORM, RequestTarget.ABSOLUTE_FORM]
    )
    def test_origin_and_absolute_reject_connect(self, form):
        assert form.permits("GET")
        assert form.permits("OPTIONS")
        assert not form.permits("CONNECT")

    def test_methods_are_case_sensitive(self):
        assert not RequestTarget.AUTHORITY_FORM.permits("connect")


def test_version_is_exposed():
    assert __version__
