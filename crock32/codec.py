"""Whole-buffer Crockford base32 encoding and decoding.

These run the same window-by-window conversion as the streams in
crock32.stream, just over an in-memory buffer:

    encode_bytes(b"hello world") == "d1jprv3f41vpywkccg"
    decode_bytes("D1JPRV3F41VPYWKCCG") == b"hello world"

Output length is ceil(n*8/5) symbols for n bytes. There is no padding on
output and no check symbol.
"""

import io

from crock32.alphabet import is_symbol
from crock32.stream import iter_decode, iter_encode


def encode_bytes(data: bytes) -> str:
    if isinstance(data, str):
        raise TypeError("cannot base32-encode str; use encode_text() or encode it to bytes first")
    return "".join(iter_encode(io.BytesIO(data)))


def decode_bytes(text: str | bytes) -> bytes:
    """Decode base32 text to bytes.

    Raises InvalidCharacter or MalformedChunk; nothing is returned on error.
    """
    if isinstance(text, str):
        reader = io.StringIO(text, newline="")
    else:
        reader = io.BytesIO(text)
    return b"".join(iter_decode(reader))


def is_valid_base32(text: str | bytes) -> bool:
    """True if every character decodes (symbols, synonyms and '=' in any case)."""
    return all(is_symbol(ch) for ch in text)


def encode_text(text: str, encoding: str = "utf-8") -> str:
    return encode_bytes(text.encode(encoding))


def decode_text(text: str | bytes, encoding: str = "utf-8") -> str:
    return decode_bytes(text).decode(encoding)
