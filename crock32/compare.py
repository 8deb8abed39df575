"""Comparison of base32 strings modulo synonyms and case.

Two strings are equal when they decode the same way symbol for symbol,
so "0oO" == "000" and "1iIlL" == "11111". Ordering is lexicographic over
the normalized form, which matches the order of the encoded values for
strings of the same length.

The normalization table here is kept apart from the decode table in
crock32.alphabet: that one defines what the wire format accepts, this one
only folds characters for display and comparison.
"""

import string

from crock32.alphabet import is_symbol
from crock32.errors import InvalidCharacter

_NORMALIZE = {ord(c): c.lower() for c in string.ascii_uppercase}
_NORMALIZE.update({ord(c): "0" for c in "=Oo"})
_NORMALIZE.update({ord(c): "1" for c in "LIli"})


def normalize_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c.translate(_NORMALIZE)


def normalize(s: str) -> str:
    """Fold synonyms and case. The result has the same length as `s`."""
    return s.translate(_NORMALIZE)


def _validated(s: str) -> str:
    for i, ch in enumerate(s):
        if not is_symbol(ch):
            raise InvalidCharacter(ch, i)
    return normalize(s)


def equal(a: str, b: str) -> bool:
    return _validated(a) == _validated(b)


def less_than(a: str, b: str) -> bool:
    return _validated(a) < _validated(b)


def compare(a: str, b: str) -> int:
    """-1, 0 or 1 as `a` sorts before, equal to, or after `b`."""
    na, nb = _validated(a), _validated(b)
    return (na > nb) - (na < nb)


def sort_key(s: str) -> str:
    """Key for sorted() and friends: sorted(codes, key=sort_key)."""
    return _validated(s)
