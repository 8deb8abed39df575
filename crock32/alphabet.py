"""Crockford base32 alphabet.

Values 0..31 map to the 32 symbols "0123456789abcdefghjkmnpqrstvwxyz".
The letters i, l, o and u are left out so that a human copying an
encoded string cannot confuse them with 1, 1, 0 and v.

Encoding always emits the lowercase symbols above. Decoding is more
forgiving:

  - case is ignored                       ("A" == "a")
  - O and o decode as 0
  - I, i, L and l decode as 1
  - the pad character '=' decodes as 0    (fills a short final chunk)

Everything else, including U/u, whitespace and hyphens, is invalid.

See: https://www.crockford.com/base32.html
"""

from crock32.errors import InvalidCharacter

SYMBOLS = "0123456789abcdefghjkmnpqrstvwxyz"
PAD = "="

_SYNONYMS = {"o": 0, "i": 1, "l": 1}


def _build_decode_table() -> tuple[int | None, ...]:
    table: list[int | None] = [None] * 128
    for value, ch in enumerate(SYMBOLS):
        table[ord(ch)] = value
        table[ord(ch.upper())] = value
    for ch, value in _SYNONYMS.items():
        table[ord(ch)] = value
        table[ord(ch.upper())] = value
    table[ord(PAD)] = 0
    return tuple(table)


# Indexed by character code; None marks an invalid character.
DECODE_TABLE = _build_decode_table()


def encode_symbol(value: int) -> str:
    if not 0 <= value < 32:
        raise ValueError(f"not a 5-bit value: {value}")
    return SYMBOLS[value]


def _lookup(ch: str | int) -> int | None:
    code = ch if isinstance(ch, int) else ord(ch)
    if 0 <= code < len(DECODE_TABLE):
        return DECODE_TABLE[code]
    return None


def decode_symbol(ch: str | int, position: int | None = None) -> int:
    """Decode one symbol (a character or a character code) to its 5-bit value.

    Raises InvalidCharacter if `ch` is not in the decode table.
    """
    value = _lookup(ch)
    if value is None:
        if isinstance(ch, int) and ch < 128:
            ch = chr(ch)
        raise InvalidCharacter(ch, position)
    return value


def is_symbol(ch: str | int) -> bool:
    return _lookup(ch) is not None
