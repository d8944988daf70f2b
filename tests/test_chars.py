import string

import pytest

from minitalk.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("code", CODES)
def test_isalpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert isalpha(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_isdigit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert isdigit(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_isalnum_is_letter_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", CODES)
def test_isascii_range(code):
    assert isascii(code) == (0 <= code <= 127)


@pytest.mark.parametrize("code", CODES)
def test_isprint_matches_printable_without_controls(code):
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    expected = 0 <= code < 128 and chr(code) in printable
    assert isprint(code) == expected


def test_accepts_single_characters():
    assert isalpha("q")
    assert isdigit("7")
    assert not isdigit("x")
    assert isprint(" ")
    assert not isprint("\x7f")


def test_non_ascii_letters_are_not_alpha():
    assert not isalpha("é")
    assert not isalnum("é")


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_tolower_upper_letters(letter):
    assert tolower(letter) == letter.lower()
    assert tolower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_toupper_lower_letters(letter):
    assert toupper(letter) == letter.upper()
    assert toupper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("letter", string.ascii_letters)
def test_case_round_trip(letter):
    assert toupper(tolower(letter)) == letter.upper()
    assert tolower(toupper(letter)) == letter.lower()


@pytest.mark.parametrize("c", ["1", "@", "[", "`", "{", "é", "É", " "])
def test_case_conversion_leaves_others_alone(c):
    assert tolower(c) == c
    assert toupper(c) == c


def test_wrong_length_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)
    with pytest.raises(TypeError):
        toupper(None)