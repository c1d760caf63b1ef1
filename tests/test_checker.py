"""Tests for the required / non-blank check."""

import pytest

from requiredif import SUCCESS, Failure, check


class TestConditionNotMet:
    """Test that an unmet condition makes the field optional."""

    @pytest.mark.parametrize("value", [None, "", "   ", "John", 0, []])
    @pytest.mark.parametrize("allow_blank", [True, False])
    def test_always_success(self, value, allow_blank):
        """Test that value and allow_blank are irrelevant."""
        assert check(False, value, allow_blank, "Name") == SUCCESS


class TestConditionMet:
    """Test the checks applied once the field is required."""

    def test_missing_value(self):
        """Test that None is reported as required."""
        assert check(True, None, False, "Name") == Failure("Name is required")

    def test_missing_value_with_allow_blank(self):
        """Test that allow_blank does not excuse a missing value."""
        assert check(True, None, True, "Name") == Failure("Name is required")

    def test_whitespace_value(self):
        """Test that whitespace-only strings are rejected."""
        assert check(True, "   ", False, "Name") == Failure(
            "Name cannot be empty or whitespace"
        )

    def test_empty_value(self):
        """Test that empty strings are rejected."""
        assert check(True, "", False, "Name") == Failure(
            "Name cannot be empty or whitespace"
        )

    @pytest.mark.parametrize("value", ["\t\n", " ", "　  "])
    def test_unicode_whitespace(self, value):
        """Test that non-ASCII whitespace counts as blank."""
        assert check(True, value, False, "Name") == Failure(
            "Name cannot be empty or whitespace"
        )

    def test_blank_allowed(self):
        """Test that allow_blank accepts blank strings."""
        assert check(True, "   ", True, "Name") == SUCCESS
        assert check(True, "", True, "Name") == SUCCESS

    def test_present_value(self):
        """Test that a non-blank string passes."""
        assert check(True, " John ", False, "Name") == SUCCESS

    @pytest.mark.parametrize("value", [0, False, [], {}, b""])
    def test_non_string_values_are_never_blank(self, value):
        """Test that falsy non-strings are still present."""
        assert check(True, value, False, "Name") == SUCCESS


class TestErrorMessage:
    """Test custom failure messages."""

    def test_custom_message_for_missing(self):
        """Test that the template replaces the built-in message."""
        outcome = check(True, None, False, "Name", "Please provide {display_name}")

        assert outcome == Failure("Please provide Name")

    def test_custom_message_for_blank(self):
        """Test that the same template is used for blank values."""
        outcome = check(True, " ", False, "Name", "{display_name} needed")

        assert outcome == Failure("Name needed")

    def test_custom_message_without_placeholder(self):
        """Test a fixed message."""
        assert check(True, None, False, "Name", "Required") == Failure("Required")

    def test_custom_message_with_other_braces(self):
        """Test that unrelated braces in a template are kept as written."""
        outcome = check(True, None, False, "Name", "{display_name}: see {docs} {0}")

        assert outcome == Failure("Name: see {docs} {0}")
