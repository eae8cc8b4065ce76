import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xinulibc.fmt import doprnt, fprintf, printf, sprintf

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
WIDTH = st.integers(min_value=1, max_value=80)
PLAIN_TEXT = st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126))


def test_literal_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_double_percent_prints_one():
    assert sprintf("100%% sure") == "100% sure"


def test_nul_ends_format():
    assert sprintf("ab\0cd") == "ab"


@given(INT32)
def test_decimal_matches_value(n):
    assert sprintf("%d", n) == str(n)


@given(INT32, WIDTH, st.sampled_from(["", "-", "0"]))
def test_decimal_width_and_flags(n, width, flag):
    spec = f"%{flag}{width}d"
    assert sprintf(spec, n) == spec % n


@given(st.integers(min_value=0, max_value=2**32 - 1), WIDTH, st.sampled_from(["", "-", "0"]))
def test_hex_width_and_flags(n, width, flag):
    spec = f"%{flag}{width}x"
    assert sprintf(spec, n) == spec % n


def test_left_justify_keeps_zero_fill():
    assert sprintf("%-05d", 42) == "42000"


def test_unsigned_of_negative_wraps():
    assert sprintf("%u", -1) == str(2**32 - 1)
    assert sprintf("%u", -(2**31)) == str(2**31)


def test_radix_conversions_of_negative_are_32_bit():
    assert sprintf("%x", -1) == "f" * 8
    assert sprintf("%X", -1) == "F" * 8
    assert sprintf("%o", -1) == format(2**32 - 1, "o")
    assert sprintf("%b", -1) == "1" * 32


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_radix_conversions_round_trip(n):
    assert int(sprintf("%x", n), 16) == n
    assert int(sprintf("%X", n), 16) == n
    assert int(sprintf("%o", n), 8) == n
    assert int(sprintf("%b", n), 2) == n
    assert int(sprintf("%u", n)) == n


def test_zero_prints_single_digit():
    assert sprintf("%x%o%b%d%u", 0, 0, 0, 0, 0) == "0" * 5


def test_precision_truncates_decimal_digits():
    assert sprintf("%.2d", 12345) == "12"


def test_precision_ignored_for_hex():
    assert sprintf("%.2x", 0xABCDEF) == format(0xABCDEF, "x")


def test_width_over_limit_is_ignored():
    assert sprintf("%81d", 7) == "7"
    assert sprintf("%80d", 7) == "%80d" % 7


def test_star_width_takes_argument():
    assert sprintf("%*d", 6, 42) == "%6d" % 42
    assert sprintf("%.*s", 3, "abcdef") == "abc"


def test_negative_star_width_is_ignored():
    assert sprintf("%*d", -6, 42) == "42"


@given(PLAIN_TEXT, WIDTH, WIDTH, st.sampled_from(["", "-"]))
def test_string_width_and_precision(text, width, prec, flag):
    spec = f"%{flag}{width}.{prec}s"
    assert sprintf(spec, text) == spec % text


def test_string_zero_flag_pads_with_spaces():
    assert sprintf("%05s", "ab") == "%5s" % "ab"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_stops_at_nul():
    assert sprintf("[%s]", "ab\0cd") == "[ab]"


def test_char_from_code_and_string():
    assert sprintf("%c%c", 65, "z") == "Az"
    assert sprintf("%5c", "x") == "%5c" % "x"


def test_char_zero_prints_nothing():
    assert sprintf("[%c]", 0) == "[]"


def test_trailing_percent_is_printed():
    assert sprintf("abc%") == "abc%"
    assert sprintf("abc%5") == "abc%"
    assert sprintf("abc%-") == "abc%"


def test_wide_hex_joins_full_first_value():
    assert sprintf("%H", 0x12345678, 0xABCDEF01) == (
        format(0x12345678, "X") + format(0xABCDEF01, "X")
    )
    assert sprintf("%h", 0x12345678, 0xABCDEF01) == (
        format(0x12345678, "x") + format(0xABCDEF01, "x")
    )


def test_wide_hex_short_first_value_hides_second():
    assert sprintf("%H", 0x1234, 0xFF) == format(0x1234, "X")


def test_doprnt_hands_single_characters():
    calls = []
    doprnt("x=%5d|%s", [-17, "ok"], calls.append)
    assert all(len(ch) == 1 for ch in calls)
    assert "".join(calls) == sprintf("x=%5d|%s", -17, "ok")


def test_fprintf_writes_to_stream():
    stream = io.StringIO()
    fprintf(stream, "%s=%d\n", "n", 3)
    assert stream.getvalue() == sprintf("%s=%d\n", "n", 3)


def test_printf_writes_to_stdout(capsys):
    printf("%-4s|%04d", "ab", -5)
    assert capsys.readouterr().out == sprintf("%-4s|%04d", "ab", -5)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")
    with pytest.raises(TypeError):
        sprintf("%s", 5)
    with pytest.raises(TypeError):
        sprintf("%c", "ab")