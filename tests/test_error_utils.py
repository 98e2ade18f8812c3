"""Tests for error_utils.py — message extraction for arbitrary failures."""

from chunkwise.error_utils import get_error_message


class _MessageError(Exception):
    def __init__(self, message):
        super().__init__()
        self.message = message


class _Unprintable:
    def __str__(self):
        raise RuntimeError("no")


class TestGetErrorMessage:
    def test_exception_message(self):
        assert get_error_message(ValueError("boom")) == "boom"

    def test_message_attribute_fallback(self):
        assert get_error_message(_MessageError("from attr")) == "from attr"

    def test_empty_exception_uses_class_name(self):
        assert get_error_message(RuntimeError()) == "RuntimeError"

    def test_plain_string(self):
        assert get_error_message("just text") == "just text"

    def test_non_exception_value(self):
        assert get_error_message(42) == "42"
        assert get_error_message(None) == "None"

    def test_unprintable_value_never_raises(self):
        assert get_error_message(_Unprintable()) == "<unprintable _Unprintable>"
