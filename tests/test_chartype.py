import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xinulibc.chartype import (
    CharClass,
    classify,
    isalnum,
    isalpha,
    iscntrl,
    isdigit,
    islower,
    ispunct,
    isspace,
    isupper,
    isxdigit,
)

BASE = (
    CharClass.UPPER
    | CharClass.LOWER
    | CharClass.DIGIT
    | CharClass.SPACE
    | CharClass.PUNCT
    | CharClass.CONTROL
)


@pytest.mark.parametrize("ch", list(string.ascii_uppercase))
def test_uppercase_letters(ch):
    assert isupper(ch)
    assert isalpha(ch)
    assert isalnum(ch)
    assert not islower(ch)


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_lowercase_letters(ch):
    assert islower(ch)
    assert isalpha(ch)
    assert not isupper(ch)


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert isdigit(ch)
    assert isxdigit(ch)
    assert isalnum(ch)
    assert not isalpha(ch)


@given(st.integers(min_value=0, max_value=127))
def test_matches_python_ascii_sets(code):
    ch = chr(code)
    assert isdigit(code) == (ch in string.digits)
    assert isxdigit(code) == (ch in string.hexdigits)
    assert isalpha(code) == (ch in string.ascii_letters)
    assert ispunct(code) == (ch in string.punctuation)
    assert isspace(code) == (ch in " \t\n\r\x0b\x0c")


@given(st.integers(min_value=0, max_value=127))
def test_every_ascii_code_has_exactly_one_base_class(code):
    flags = classify(code) & BASE
    assert bin(int(flags)).count("1") == 1


@given(st.integers(min_value=0, max_value=127))
def test_str_and_int_agree(code):
    assert classify(chr(code)) == classify(code)


def test_control_characters():
    controls = [c for c in range(32) if chr(c) not in "\t\n\r\x0b\x0c"] + [127]
    assert all(iscntrl(c) for c in controls)
    assert not iscntrl(" ")


def test_delete_is_control_only():
    assert classify(127) == CharClass.CONTROL


def test_hex_letters_stop_at_f():
    assert isxdigit("F")
    assert not isxdigit("G")
    assert not isxdigit("g")


@pytest.mark.parametrize("code", [-1, 128, 255, 1000])
def test_out_of_range_has_no_class(code):
    assert classify(code) == CharClass(0)
    assert not isalnum(code)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        classify("ab")
    with pytest.raises(ValueError):
        classify("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        classify(1.5)