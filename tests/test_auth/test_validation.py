"""Tests for form validation rules."""

from __future__ import annotations

import pytest

from acctmgr.auth.validation import (
    is_valid_email,
    is_valid_name,
    is_valid_password,
    normalize_email,
    passwords_match,
    safe_trim,
)


class TestEmail:
    @pytest.mark.parametrize("value", ["a@b.c", ".@", "@.", "x.y@z", "name@host.tld", "@@.."])
    def test_contains_both(self, value: str) -> None:
        assert is_valid_email(value) is True

    @pytest.mark.parametrize("value", ["", "plain", "a@b", "a.b", "@", "."])
    def test_missing_one(self, value: str) -> None:
        assert is_valid_email(value) is False

    @pytest.mark.parametrize("value", [None, 42, ["a@b.c"]])
    def test_non_string(self, value: object) -> None:
        assert is_valid_email(value) is False

    def test_normalize(self) -> None:
        assert normalize_email("  JANE@X.COM ") == "jane@x.com"


class TestLengthRules:
    def test_name(self) -> None:
        assert is_valid_name("Jo") is True
        assert is_valid_name(" J ") is False
        assert is_valid_name("") is False
        assert is_valid_name(None) is False

    def test_password(self) -> None:
        assert is_valid_password("abcd") is True
        assert is_valid_password(" abc   ") is False
        assert is_valid_password("  abcd  ") is True


class TestConfirm:
    def test_trimmed_equality(self) -> None:
        assert passwords_match(" abcd", "abcd ") is True
        assert passwords_match("abcd", "abce") is False
        assert passwords_match("abcd", "ABCD") is False


class TestSafeTrim:
    def test_values(self) -> None:
        assert safe_trim(None) == ""
        assert safe_trim("  x ") == "x"
        assert safe_trim(12) == "12"

    def test_does_not_mutate(self) -> None:
        value = "  keep  "
        safe_trim(value)
        assert value == "  keep  "
