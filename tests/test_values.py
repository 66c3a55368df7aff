"""test_values.py - Unit tests for LogValue, render_number and decode.

Covers:
    - Rendering rules for every ValueType
    - Construction-time validation of payloads
    - LogValue.infer() tag selection (bool before int, str -> TEXT)
    - Immutability and equality
    - decode(): descriptor mapping, unknown tags, argument alignment, errors
"""

import fractions
import sys

import pytest

from linewriter.values import LogValue, ValueType, decode, render_number


# ---------------------------------------------------------------------------
# render_number()
# ---------------------------------------------------------------------------


class TestRenderNumber:
    def test_render_number_drops_trailing_zeros(self):
        """Whole floats render without a decimal point."""
        assert render_number(1.0) == "1"
        assert render_number(2) == "2"

    def test_render_number_keeps_short_fractions(self):
        """Short fractions are rendered as written."""
        assert render_number(3.41) == "3.41"
        assert render_number(-0.5) == "-0.5"

    def test_render_number_uses_six_significant_digits(self):
        """Long fractions are rounded to six significant digits."""
        assert render_number(3.14159265) == "3.14159"

    def test_render_number_switches_to_exponent_for_large_values(self):
        """Large magnitudes use exponent notation."""
        assert render_number(1234567.0) == "1.23457e+06"

    def test_render_number_accepts_other_real_types(self):
        """Fractions are rendered through float()."""
        assert render_number(fractions.Fraction(1, 4)) == "0.25"

    def test_render_number_rejects_non_numbers(self):
        """Strings and None raise TypeError."""
        with pytest.raises(TypeError):
            render_number("1")
        with pytest.raises(TypeError):
            render_number(None)

    def test_render_number_rejects_booleans(self):
        """Booleans are not treated as numbers."""
        with pytest.raises(TypeError):
            render_number(True)


# ---------------------------------------------------------------------------
# LogValue.render()
# ---------------------------------------------------------------------------


class TestLogValueRender:
    def test_bool_renders_as_literal(self):
        """BOOL renders as 'true' / 'false'."""
        assert LogValue.boolean(True).render() == "true"
        assert LogValue.boolean(False).render() == "false"

    def test_bool_factory_uses_truthiness(self):
        """LogValue.boolean() normalises any truthy payload."""
        assert LogValue.boolean(0).render() == "false"
        assert LogValue.boolean(7).render() == "true"

    def test_int_renders_as_decimal(self):
        """INT renders in base ten, including negatives."""
        assert LogValue.integer(42).render() == "42"
        assert LogValue.integer(-7).render() == "-7"

    def test_float_renders_with_default_numeric_format(self):
        """FLOAT renders with render_number()."""
        assert LogValue.real(3.41).render() == "3.41"
        assert LogValue.real(10.0).render() == "10"

    def test_char_renders_as_itself(self):
        """CHAR renders as its single character."""
        assert LogValue.char("c").render() == "c"

    def test_text_renders_raw(self):
        """TEXT renders without quoting or escaping."""
        assert LogValue.text("a 'quoted' word").render() == "a 'quoted' word"

    def test_none_text_renders_empty(self):
        """A None TEXT payload renders as the empty string."""
        assert LogValue.text(None).render() == ""


# ---------------------------------------------------------------------------
# LogValue construction
# ---------------------------------------------------------------------------


class TestLogValueConstruction:
    def test_constructor_requires_value_type(self):
        """A non-ValueType tag raises TypeError."""
        with pytest.raises(TypeError):
            LogValue("int", 1)  # type: ignore[arg-type]

    def test_int_rejects_float_payload(self):
        """INT payloads must be integers."""
        with pytest.raises(TypeError):
            LogValue.integer(1.5)  # type: ignore[arg-type]

    def test_float_rejects_string_payload(self):
        """FLOAT payloads must be real numbers."""
        with pytest.raises(TypeError):
            LogValue.real("1.5")  # type: ignore[arg-type]

    def test_float_rejects_bool_payload(self):
        """FLOAT payloads may not be booleans."""
        with pytest.raises(TypeError):
            LogValue.real(True)

    def test_float_rejects_value_out_of_float_range(self):
        """Reals too large for a float are rejected when the value is built."""
        with pytest.raises(ValueError):
            LogValue.real(10 ** 400)
        with pytest.raises(ValueError):
            LogValue.real(fractions.Fraction(10 ** 400, 3))

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"),
        reason="interpreter has no integer string conversion limit",
    )
    def test_int_rejects_value_beyond_string_conversion_limit(self):
        """Integers that cannot be converted to text are rejected up front."""
        limit = sys.get_int_max_str_digits()
        if limit == 0:
            pytest.skip("integer string conversion limit is disabled")
        with pytest.raises(ValueError):
            LogValue.integer(10 ** (limit + 1))

    def test_char_rejects_multi_character_string(self):
        """CHAR payloads must be exactly one character."""
        with pytest.raises(ValueError):
            LogValue.char("ab")
        with pytest.raises(ValueError):
            LogValue.char("")

    def test_text_rejects_non_string(self):
        """TEXT payloads must be str or None."""
        with pytest.raises(TypeError):
            LogValue.text(12)  # type: ignore[arg-type]

    def test_log_value_is_immutable(self):
        """Attributes cannot be reassigned or added."""
        value = LogValue.integer(1)
        with pytest.raises(AttributeError):
            value.value = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            value.extra = "nope"  # type: ignore[attr-defined]

    def test_log_values_compare_by_tag_and_payload(self):
        """Equal tag and payload means equal values; tags must match."""
        assert LogValue.integer(1) == LogValue.integer(1)
        assert LogValue.integer(1) != LogValue.real(1)
        assert len({LogValue.text("a"), LogValue.text("a")}) == 1


# ---------------------------------------------------------------------------
# LogValue.infer()
# ---------------------------------------------------------------------------


class TestLogValueInfer:
    def test_infer_bool_before_int(self):
        """True is tagged BOOL, not INT."""
        assert LogValue.infer(True).type is ValueType.BOOL

    def test_infer_int(self):
        assert LogValue.infer(5).type is ValueType.INT

    def test_infer_float(self):
        assert LogValue.infer(5.5).type is ValueType.FLOAT

    def test_infer_single_character_string_is_text(self):
        """One-character strings are TEXT unless built with LogValue.char()."""
        assert LogValue.infer("x").type is ValueType.TEXT

    def test_infer_none_is_text(self):
        assert LogValue.infer(None) == LogValue.text(None)

    def test_infer_returns_log_value_unchanged(self):
        """A LogValue passed to infer() is returned as-is."""
        value = LogValue.char("z")
        assert LogValue.infer(value) is value

    def test_infer_rejects_unsupported_objects(self):
        """Lists, dicts and arbitrary objects raise TypeError."""
        with pytest.raises(TypeError):
            LogValue.infer([1, 2])


# ---------------------------------------------------------------------------
# decode()
# ---------------------------------------------------------------------------


class TestDecode:
    def test_decode_maps_every_descriptor_character(self):
        """b, i, f, d, c and s map to their ValueTypes in order."""
        values = decode("bifdcs", True, 1, 2.5, 3.5, "c", "str")
        assert [v.type for v in values] == [
            ValueType.BOOL,
            ValueType.INT,
            ValueType.FLOAT,
            ValueType.FLOAT,
            ValueType.CHAR,
            ValueType.TEXT,
        ]

    def test_decode_renders_mixed_arguments(self):
        """Decoded values render with their own rules."""
        values = decode("fcsib", 3.41, "c", "string 1", 42, True)
        assert [v.render() for v in values] == ["3.41", "c", "string 1", "42", "true"]

    def test_decode_empty_descriptor_returns_empty_list(self):
        assert decode("") == []

    def test_decode_unknown_tag_consumes_its_argument(self):
        """An unknown character drops its argument without shifting the rest."""
        values = decode("sxi", "a", "ignored", 7)
        assert values == [LogValue.text("a"), LogValue.integer(7)]

    def test_decode_only_unknown_tags_returns_empty_list(self):
        assert decode("zz", 1, 2) == []

    def test_decode_bool_uses_truthiness(self):
        """Integer arguments for 'b' become booleans."""
        assert decode("bb", 0, 3) == [LogValue.boolean(False), LogValue.boolean(True)]

    def test_decode_char_accepts_code_point(self):
        """An integer argument for 'c' is converted with chr()."""
        assert decode("c", 65) == [LogValue.char("A")]

    def test_decode_none_string_is_allowed(self):
        """A None argument for 's' renders as empty."""
        assert decode("s", None)[0].render() == ""

    def test_decode_ignores_surplus_arguments(self):
        assert decode("i", 1, 2, 3) == [LogValue.integer(1)]

    def test_decode_rejects_missing_arguments(self):
        """A descriptor longer than the argument list raises ValueError."""
        with pytest.raises(ValueError):
            decode("ii", 1)

    def test_decode_rejects_mismatched_argument_type(self):
        """An argument that does not fit its tag raises TypeError."""
        with pytest.raises(TypeError):
            decode("i", "not a number")
