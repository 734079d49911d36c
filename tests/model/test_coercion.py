"""Tests for raw value coercion per field kind."""

import pytest

from explicit.model.coercion import coerce, is_blank, to_raw_value
from explicit.model.errors import CoercionError, ErrorReason
from explicit.schemas import BuilderSettings, FieldKind

pytestmark = pytest.mark.unit


class TestStringKind:

    @pytest.mark.parametrize("raw, expected", [("ruby", "ruby"), (" ruby ", "ruby"), (42, "42"), (1.5, "1.5")])
    def test_accepted(self, raw, expected):
        assert coerce(raw, FieldKind.STRING) == expected

    @pytest.mark.parametrize("raw", [True, ["a"], {"a": 1}])
    def test_rejected(self, raw):
        with pytest.raises(CoercionError) as exc_info:
            coerce(raw, FieldKind.STRING)
        assert exc_info.value.reason is ErrorReason.WRONG_TYPE


class TestIntegerKind:

    @pytest.mark.parametrize("raw, expected", [("42", 42), ("-7", -7), (" +3 ", 3), (5, 5), (2.0, 2)])
    def test_accepted(self, raw, expected):
        assert coerce(raw, FieldKind.INTEGER) == expected

    @pytest.mark.parametrize("raw", ["4.2", "four", "", True, 2.5, None])
    def test_rejected(self, raw):
        with pytest.raises(CoercionError) as exc_info:
            coerce(raw, FieldKind.INTEGER)
        assert exc_info.value.reason is ErrorReason.WRONG_TYPE

    def test_oversized_digit_string_is_wrong_type(self):
        """Digit strings past the interpreter's conversion limit are rejected, not raised."""
        with pytest.raises(CoercionError) as exc_info:
            coerce("9" * 5000, FieldKind.INTEGER)
        assert exc_info.value.reason is ErrorReason.WRONG_TYPE

    def test_message_names_the_input(self):
        with pytest.raises(CoercionError, match="valid integer.*got 'x'"):
            coerce("x", FieldKind.INTEGER)


class TestBooleanKind:

    @pytest.mark.parametrize("raw", [True, 1, "true", "TRUE", "yes", "on", "1"])
    def test_truthy(self, raw):
        assert coerce(raw, FieldKind.BOOLEAN) is True

    @pytest.mark.parametrize("raw", [False, 0, "false", "No", "off", "0"])
    def test_falsy(self, raw):
        assert coerce(raw, FieldKind.BOOLEAN) is False

    @pytest.mark.parametrize("raw", ["maybe", 2, "", 0.5])
    def test_rejected(self, raw):
        with pytest.raises(CoercionError) as exc_info:
            coerce(raw, FieldKind.BOOLEAN)
        assert exc_info.value.reason is ErrorReason.WRONG_TYPE

    def test_custom_words(self):
        settings = BuilderSettings(true_words=("oui",), false_words=("non",))

        assert coerce("Oui", FieldKind.BOOLEAN, settings=settings) is True
        with pytest.raises(CoercionError):
            coerce("yes", FieldKind.BOOLEAN, settings=settings)


class TestEnumKind:

    VALUES = ("paper", "hard", "ebook")

    def test_declared_value_accepted(self):
        assert coerce("ebook", FieldKind.ENUM, self.VALUES) == "ebook"

    def test_undeclared_value_is_not_in_enum(self):
        with pytest.raises(CoercionError) as exc_info:
            coerce("pdf", FieldKind.ENUM, self.VALUES)
        assert exc_info.value.reason is ErrorReason.NOT_IN_ENUM

    def test_matching_is_case_sensitive(self):
        with pytest.raises(CoercionError) as exc_info:
            coerce("Paper", FieldKind.ENUM, self.VALUES)
        assert exc_info.value.reason is ErrorReason.NOT_IN_ENUM

    def test_numbers_compared_as_text(self):
        assert coerce(2, FieldKind.ENUM, ("1", "2")) == "2"

    def test_enum_bool_is_wrong_type(self):
        with pytest.raises(CoercionError) as exc_info:
            coerce(True, FieldKind.ENUM, ("True", "False"))
        assert exc_info.value.reason is ErrorReason.WRONG_TYPE

    def test_whitespace_kept_without_stripping(self):
        with pytest.raises(CoercionError) as exc_info:
            coerce(" ebook", FieldKind.ENUM, self.VALUES, BuilderSettings(strip_whitespace=False))
        assert exc_info.value.reason is ErrorReason.NOT_IN_ENUM

    def test_non_scalar_is_wrong_type(self):
        with pytest.raises(CoercionError) as exc_info:
            coerce(["paper"], FieldKind.ENUM, self.VALUES)
        assert exc_info.value.reason is ErrorReason.WRONG_TYPE


class TestHelpers:

    @pytest.mark.parametrize("raw, blank", [("", True), ("  ", True), ("x", False), (0, False), (None, False)])
    def test_is_blank(self, raw, blank):
        assert is_blank(raw) is blank

    def test_whitespace_not_blank_without_stripping(self):
        assert is_blank("  ", BuilderSettings(strip_whitespace=False)) is False

    @pytest.mark.parametrize("value, raw", [(True, True), (False, False), (3, "3"), ("x", "x")])
    def test_to_raw_value(self, value, raw):
        assert to_raw_value(value) == raw
