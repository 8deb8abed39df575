"""Chunk encoder and decoder.

Base32 packs 5 bytes (40 bits) into 8 symbols of 5 bits each, so the codec
works on fixed groups:

    bytes    aaaaaaaa bbbbbbbb cccccccc dddddddd eeeeeeee
    symbols  aaaaa aaabb bbbbb bcccc ccccd ddddd ddeee eeeee

The last group of a message may be short. A short byte chunk is padded with
zero bytes before packing and only the symbols that carry input bits are
kept:

    bytes    1  2  3  4  5
    symbols  2  4  5  7  8     ceil(8n/5)

Decoding runs the other way: a short symbol chunk is padded with '=' (value
0) up to 8 symbols, and only whole bytes are kept, floor(5m/8). Leftover
bits are dropped. A single symbol holds 5 bits, less than a byte, so a
final chunk of length 1 can never come out of an encoder and is rejected.
"""

from crock32.alphabet import decode_symbol, encode_symbol
from crock32.errors import MalformedChunk

BYTES_PER_CHUNK = 5
SYMBOLS_PER_CHUNK = 8


def encoded_length(n: int) -> int:
    """Symbols produced for n input bytes: ceil(8n/5)."""
    return (n * 8 + 4) // 5


def decoded_length(m: int) -> int:
    """Bytes produced for m input symbols: floor(5m/8)."""
    return m * 5 // 8


def encode_chunk(chunk: bytes) -> str:
    """Encode 1 to 5 bytes into 2 to 8 symbols."""
    n = len(chunk)
    if not 1 <= n <= BYTES_PER_CHUNK:
        raise ValueError(f"byte chunk must hold 1 to {BYTES_PER_CHUNK} bytes, got {n}")
    value = int.from_bytes(bytes(chunk) + b"\0" * (BYTES_PER_CHUNK - n), "big")
    symbols = [encode_symbol((value >> shift) & 0x1F) for shift in range(35, -1, -5)]
    return "".join(symbols[:encoded_length(n)])


def decode_chunk(chunk: str | bytes, offset: int = 0) -> bytes:
    """Decode 2 to 8 symbols into 1 to 5 bytes.

    `offset` is the position of the chunk's first symbol in the whole input;
    it only shows up in InvalidCharacter errors.
    """
    m = len(chunk)
    if m == 1:
        raise MalformedChunk(m)
    if not 1 <= m <= SYMBOLS_PER_CHUNK:
        raise ValueError(f"symbol chunk must hold 2 to {SYMBOLS_PER_CHUNK} symbols, got {m}")
    value = 0
    for i, ch in enumerate(chunk):
        value = (value << 5) | decode_symbol(ch, offset + i)
    # Pad symbols decode to 0, which is just a shift.
    value <<= 5 * (SYMBOLS_PER_CHUNK - m)
    return value.to_bytes(BYTES_PER_CHUNK, "big")[:decoded_length(m)]
