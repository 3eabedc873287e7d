import pytest
from hypothesis import given
from hypothesis import strategies as st

from kzkit.printf import FormatError, snprintf, sprintf

SIGNED_SPECS = ["%d", "%i", "%5d", "%-6d", "%05d", "%+d", "% d", "%8.3d"]
UNSIGNED_SPECS = ["%u", "%x", "%X", "%o", "%#x", "%#X", "%10x", "%-10X"]


@given(st.sampled_from(SIGNED_SPECS), st.integers(-(2**31), 2**31 - 1))
def test_signed_matches_python_formatting(spec, value):
    assert sprintf(spec, value) == spec.replace("i", "d") % value


@given(st.sampled_from(UNSIGNED_SPECS), st.integers(1, 2**31 - 1))
def test_unsigned_matches_python_formatting(spec, value):
    assert sprintf(spec, value) == spec.replace("u", "d") % value


@given(st.integers(-(2**31), 2**31 - 1))
def test_int_wraps_to_32_bits(value):
    assert sprintf("%d", value + 2**32) == sprintf("%d", value)


def test_unsigned_of_negative_wraps():
    assert sprintf("%u", -1) == str(2**32 - 1)


def test_char_length_modifier_truncates():
    assert sprintf("%hhd", 255) == sprintf("%d", -1)
    assert sprintf("%hhu", 0x1FF) == sprintf("%u", 0xFF)


def test_short_length_modifier_truncates():
    assert sprintf("%hd", 0x18000) == sprintf("%d", -0x8000)


def test_long_long_keeps_64_bits():
    assert sprintf("%lld", 2**40) == str(2**40)
    assert sprintf("%llu", 2**64 - 1) == str(2**64 - 1)


def test_binary_conversion():
    assert sprintf("%b", 5) == format(5, "b")
    assert sprintf("%#b", 5) == format(5, "#b")


def test_star_width_negative_means_left():
    assert sprintf("%*d", -4, 7) == sprintf("%-4d", 7)
    assert sprintf("%*d", 4, 7) == "7".rjust(4)


def test_star_precision():
    assert sprintf("%.*s", 2, "abcdef") == "ab"


def test_string_precision_and_width():
    assert sprintf("%.3s", "abcdef") == "abc"
    assert sprintf("%6s", "ab") == "ab".rjust(6)
    assert sprintf("%-6s|", "ab") == "ab".ljust(6) + "|"


def test_char_conversion():
    assert sprintf("%c", ord("A")) == "A"
    assert sprintf("%3c", ord("A")) == "A".rjust(3)
    assert sprintf("%-3c|", "z") == "z".ljust(3) + "|"


def test_percent_and_unknown():
    assert sprintf("100%%") == "100%"
    assert sprintf("%k") == "k"


def test_pointer():
    assert sprintf("%p", 0x80001234) == "80001234"
    text = sprintf("%p", 0x1F)
    assert len(text) == 8
    assert int(text, 16) == 0x1F


@pytest.mark.parametrize("spec", ["%f", "%.2f", "%.0f", "%10.3f", "%-10.1f|"])
@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 3.0, 100.125])
def test_fixed_matches_python(spec, value):
    assert sprintf(spec, value) == spec % value


def test_exponential_matches_python():
    assert sprintf("%e", 12345.0) == "%e" % 12345.0
    assert sprintf("%E", 12345.0) == "%E" % 12345.0


def test_special_floats():
    assert sprintf("%f", float("nan")) == "nan"
    assert sprintf("%f", float("inf")) == "inf"
    assert sprintf("%f", float("-inf")) == "-inf"
    assert sprintf("%+f", float("inf")) == "+inf"


def test_literal_text_preserved():
    assert sprintf("plain text") == "plain text"
    assert sprintf("a%sb", "-") == "a-b"


def test_missing_argument():
    with pytest.raises(FormatError):
        sprintf("%d")


def test_trailing_percent():
    with pytest.raises(FormatError):
        sprintf("abc%")


def test_wrong_argument_types():
    with pytest.raises(FormatError):
        sprintf("%d", "x")
    with pytest.raises(FormatError):
        sprintf("%s", 5)
    with pytest.raises(FormatError):
        sprintf("%f", "1.0")


def test_snprintf_truncates_and_reports_length():
    assert snprintf(4, "%s", "abcdef") == ("abc", 6)
    assert snprintf(0, "%s", "abcdef") == ("", 6)


@given(st.integers(0, 12), st.text(alphabet="abcxyz", max_size=10))
def test_snprintf_is_prefix_of_sprintf(count, value):
    text, length = snprintf(count, "%s!", value)
    full = sprintf("%s!", value)
    assert length == len(full)
    assert text == full[: max(count - 1, 0)]


def test_snprintf_negative_count():
    with pytest.raises(ValueError):
        snprintf(-1, "x")