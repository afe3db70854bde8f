"""
Tests for keyseq/key_names.py - key name standardization and validation.
"""

import pytest

from keyseq.key_names import (
    FUNCTION_KEY_NAMES,
    InvalidKeyNameError,
    is_valid_key_name,
    standardize_key_name,
)
from keyseq.types import ModifierContext

SHIFT = ModifierContext(shift=True)
ALT = ModifierContext(alt=True)
SHIFT_ALT = ModifierContext(shift=True, alt=True)


class TestStandardizeKeyName:
    """Tests for standardize_key_name without modifier context."""

    @pytest.mark.parametrize("key_name,expected", [
        ("ctrl", "Control"),
        ("Control", "Control"),
        ("shift", "Shift"),
        ("alt", "Alt"),
        ("option", "Alt"),
        ("cmd", "Meta"),
        ("command", "Meta"),
        ("esc", "Escape"),
        ("ESCAPE", "Escape"),
        ("return", "Enter"),
        ("del", "Delete"),
        ("up", "ArrowUp"),
        ("arrowleft", "ArrowLeft"),
        ("pageup", "PageUp"),
        ("space", " "),
        ("plus", "+"),
        ("f5", "F5"),
        ("F12", "F12"),
    ])
    def test_named_keys(self, key_name, expected):
        assert standardize_key_name(key_name) == expected

    @pytest.mark.parametrize("key_name,expected", [
        ("a", "a"),
        ("A", "a"),
        ("1", "1"),
        ("/", "/"),
        ("foobar", "foobar"),
        ("", ""),
    ])
    def test_other_keys(self, key_name, expected):
        assert standardize_key_name(key_name) == expected


class TestStandardizeWithModifiers:
    """Tests for standardize_key_name with shift/alt context."""

    @pytest.mark.parametrize("key_name,expected", [
        ("c", "C"),
        ("C", "C"),
        ("1", "!"),
        ("=", "+"),
        ("/", "?"),
        ("'", '"'),
        ("!", "!"),
        ("esc", "Escape"),
    ])
    def test_shift(self, key_name, expected):
        assert standardize_key_name(key_name, SHIFT) == expected

    @pytest.mark.parametrize("key_name,expected", [
        ("A", "a"),
        ("1", "1"),
    ])
    def test_alt(self, key_name, expected):
        assert standardize_key_name(key_name, ALT) == expected

    @pytest.mark.parametrize("key_name,expected", [
        ("a", "A"),
        ("1", "1"),
    ])
    def test_shift_alt(self, key_name, expected):
        assert standardize_key_name(key_name, SHIFT_ALT) == expected


class TestIsValidKeyName:
    """Tests for is_valid_key_name."""

    @pytest.mark.parametrize("key_name", [
        "a", "Z", "1", "+", " ", "!", "é",
        "Control", "Shift", "Alt", "Meta", "Escape", "Enter", "ArrowUp",
        "F1", "F24",
    ])
    def test_valid(self, key_name):
        assert is_valid_key_name(key_name) is True

    @pytest.mark.parametrize("key_name", ["", "foobar", "ctrl", "escape", "F25"])
    def test_invalid(self, key_name):
        assert is_valid_key_name(key_name) is False

    def test_custom_key_names(self):
        assert is_valid_key_name("Hyper2") is False
        assert is_valid_key_name("Hyper2", {"Hyper2"}) is True

    def test_function_key_names(self):
        assert len(FUNCTION_KEY_NAMES) == 24


class TestInvalidKeyNameError:
    """Tests for InvalidKeyNameError."""

    def test_carries_key_name(self):
        error = InvalidKeyNameError("foobar")
        assert error.key_name == "foobar"
        assert "foobar" in str(error)

    def test_is_value_error(self):
        assert issubclass(InvalidKeyNameError, ValueError)
