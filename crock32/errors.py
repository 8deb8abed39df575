"""Errors raised by the Crockford base32 codec.

Only two things can go wrong with encoded input:

  InvalidCharacter: a character that is neither a base32 symbol, a
                    synonym of one, nor the pad character '='.
  MalformedChunk:   a trailing chunk of exactly one symbol. One symbol
                    carries 5 bits, which is not enough for a whole byte,
                    so no encoder ever produces it.

Both derive from ValueError so callers that already guard decoding with
``except ValueError`` keep working.
"""


class Base32Error(ValueError):
    pass


class InvalidCharacter(Base32Error):
    """`char` is the offending character, or the raw byte value (an int)
    for a non-ASCII byte of binary input.
    """

    def __init__(self, char: str | int, position: int | None = None):
        self.char = char
        self.position = position
        if isinstance(char, int):
            what = f"byte {char:#04x}"
        else:
            what = f"character {char!r}"
        if position is None:
            msg = f"invalid base32 {what}"
        else:
            msg = f"invalid base32 {what} at position {position}"
        super().__init__(msg)


class MalformedChunk(Base32Error):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"trailing chunk of {length} symbol(s) does not encode a whole byte")
