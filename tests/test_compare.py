"""Tests for synonym-aware comparison of base32 strings."""

import pytest

from crock32.compare import compare, equal, less_than, normalize, normalize_char, sort_key
from crock32.errors import InvalidCharacter


def test_normalize_char():
    for ch in "=Oo":
        assert normalize_char(ch) == "0"
    for ch in "LIli":
        assert normalize_char(ch) == "1"
    assert normalize_char("Q") == "q"
    assert normalize_char("q") == "q"
    assert normalize_char("7") == "7"


def test_normalize_char_rejects_strings():
    for s in ["", "oo", "abc"]:
        with pytest.raises(ValueError, match="single character"):
            normalize_char(s)


def test_normalize_keeps_length():
    for s in ["", "0oO", "Hello, World!", "ABCdef=="]:
        assert len(normalize(s)) == len(s)
    assert normalize("Hello, World!") == "he110, w0r1d!"


def test_normalize_idempotent():
    for s in ["0oO", "1iIlL", "ABCDE", "d1jprv3f41vpywkccg", "Z=z=", "Hello, World!"]:
        assert normalize(normalize(s)) == normalize(s)


def test_synonym_equivalence():
    assert equal("0oO", "000")
    assert equal("1iIlL", "11111")


def test_case_insensitive_equality():
    assert equal("abcde", "ABCDE")
    assert not equal("abcde", "abcdf")
    assert not equal("abc", "abcd")


def test_less_than():
    assert less_than("0", "1")
    assert less_than("9", "a")
    assert less_than("O", "I")
    assert less_than("abc", "abcd")
    assert less_than("10", "z")
    assert not less_than("z", "10")
    assert not less_than("A", "a")
    assert not less_than("a", "A")


def test_compare():
    assert compare("abc", "ABC") == 0
    assert compare("0", "1") == -1
    assert compare("z", "y") == 1


def test_sort_key():
    assert sorted(["b", "A", "0", "O1"], key=sort_key) == ["0", "O1", "A", "b"]


def test_invalid_character_is_an_error():
    with pytest.raises(InvalidCharacter, match="position 0"):
        equal("u", "v")
    with pytest.raises(InvalidCharacter, match="position 3"):
        less_than("abc", "abc ")
    with pytest.raises(InvalidCharacter):
        compare("a-b", "ab")
    with pytest.raises(InvalidCharacter):
        sort_key("!")
