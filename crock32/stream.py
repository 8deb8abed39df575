"""Streaming base32 encode/decode.

The chunk codec is a pure function over one group (5 bytes or 8 symbols).
This module drives it against a source that hands out input a piece at a
time, producing output one group per pull:

    source.read() ──▶ window (5 bytes / 8 symbols) ──▶ chunk codec ──▶ caller

A window is filled by asking the source for exactly what is still missing,
so the stream never reads past the group it is about to convert. Pieces
may arrive in any sizes; the output is the same as converting the whole
input at once. Only the last window may be short.

Two flavours share the windowing:

  EncodeStream / DecodeStream  : async, over a ByteSource. Waiting for the
                                 source is the only suspension point.
  iter_encode / iter_decode    : plain generators over a blocking reader
                                 (file objects, io.BytesIO, io.StringIO).
"""

import inspect
import logging
from typing import AsyncIterable, Iterable, Protocol

from crock32.chunk import BYTES_PER_CHUNK, SYMBOLS_PER_CHUNK, decode_chunk, encode_chunk

log = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Pull-based input for the async streams.

    read(n) returns between 1 and n bytes, waiting while nothing is ready,
    and b"" once the input is exhausted. asyncio.StreamReader fits.

    Sources may also have a close() method (plain or async). The streams
    call it at end of stream when created with close_on_end=True.
    """

    async def read(self, n: int) -> bytes: ...


class BytesSource:
    """ByteSource over an in-memory buffer.

    `read_size` caps each read, which is handy for feeding the streams odd
    piece sizes. A str buffer yields str pieces (symbol input for decoding).
    """

    def __init__(self, data: bytes | str, read_size: int | None = None):
        self.data = data
        self.read_size = read_size
        self.pos = 0
        self.closed = False

    async def read(self, n: int) -> bytes:
        if self.read_size is not None:
            n = min(n, self.read_size)
        piece = self.data[self.pos:self.pos + n]
        self.pos += len(piece)
        return bytes(piece) if isinstance(piece, memoryview) else piece

    def close(self) -> None:
        self.closed = True


class IterSource:
    """ByteSource over an iterable (or async iterable) of chunks."""

    def __init__(self, chunks: Iterable[bytes] | AsyncIterable[bytes]):
        if hasattr(chunks, "__aiter__"):
            self._it = chunks.__aiter__()
        else:
            self._it = iter(chunks)
        self._pending = b""
        self.closed = False

    async def _next_chunk(self):
        if hasattr(self._it, "__anext__"):
            try:
                return await self._it.__anext__()
            except StopAsyncIteration:
                return None
        return next(self._it, None)

    async def read(self, n: int) -> bytes:
        while not self._pending:
            chunk = await self._next_chunk()
            if chunk is None:
                return b""
            self._pending = chunk
        piece, self._pending = self._pending[:n], self._pending[n:]
        return piece

    async def close(self) -> None:
        self.closed = True
        if hasattr(self._it, "aclose"):
            await self._it.aclose()
        elif hasattr(self._it, "close"):
            self._it.close()


def _join(parts: list) -> bytes | str:
    if not parts:
        return b""
    return parts[0][:0].join(parts)


def _check_piece(piece, want: int) -> None:
    if piece is None:
        raise BlockingIOError("reader has no data ready; use the async streams for non-blocking input")
    if len(piece) > want:
        raise ValueError(f"source returned {len(piece)} items, asked for at most {want}")


def _windows(reader, size: int):
    """Yield successive windows of `size` items from a blocking reader."""
    while True:
        parts = []
        want = size
        while want > 0:
            piece = reader.read(want)
            _check_piece(piece, want)
            if not piece:
                break
            parts.append(piece)
            want -= len(piece)
        window = _join(parts)
        if not window:
            return
        yield window
        if want > 0:
            return


def iter_encode(reader):
    """Encode a blocking reader window by window, yielding symbol strings."""
    for window in _windows(reader, BYTES_PER_CHUNK):
        yield encode_chunk(window)


def iter_decode(reader):
    """Decode a blocking reader of symbols window by window, yielding bytes.

    The reader may be binary (ASCII symbols) or text.
    """
    offset = 0
    for window in _windows(reader, SYMBOLS_PER_CHUNK):
        yield decode_chunk(window, offset)
        offset += len(window)


class _Stream:
    """Pull-based output stream converting one window per read()."""

    window_size: int

    def __init__(self, source: ByteSource, close_on_end: bool = True):
        self.source = source
        self.close_on_end = close_on_end
        self.position = 0  # input items consumed
        self._eof = False
        self._done = False
        self._reading = False
        self._source_closed = False
        log.debug("%s opened on %r (close_on_end=%s)", type(self).__name__, source, close_on_end)

    @property
    def done(self) -> bool:
        return self._done

    def _convert(self, window) -> bytes:
        raise NotImplementedError

    async def _fill(self):
        parts = []
        want = self.window_size
        while want > 0:
            piece = await self.source.read(want)
            if self._done:
                break
            _check_piece(piece, want)
            if not piece:
                self._eof = True
                break
            parts.append(piece)
            want -= len(piece)
        return _join(parts)

    async def read(self) -> bytes:
        """Return the output for the next window, or b"" at end of stream."""
        if self._done:
            return b""
        if self._reading:
            raise RuntimeError("read() called while another coroutine is already reading this stream")
        self._reading = True
        try:
            window = b"" if self._eof else await self._fill()
            if self._done:
                # closed while waiting on the source
                return b""
            if not window:
                await self._finish("end of input")
                return b""
            out = self._convert(window)
            self.position += len(window)
            return out
        except Exception:
            await self._finish("error")
            raise
        except BaseException:
            # Cancelled mid-window: the partial window is gone, so the
            # stream cannot continue. Closing is left to close().
            self._done = True
            raise
        finally:
            self._reading = False

    async def read_all(self) -> bytes:
        parts = []
        async for out in self:
            parts.append(out)
        return b"".join(parts)

    async def _finish(self, reason: str) -> None:
        if not self._done:
            self._done = True
            log.debug("%s finished after %d items: %s", type(self).__name__, self.position, reason)
        if self.close_on_end:
            await self._close_source()

    async def _close_source(self) -> None:
        if self._source_closed:
            return
        self._source_closed = True
        close = getattr(self.source, "close", None)
        if close is None:
            return
        log.debug("closing source %r", self.source)
        result = close()
        if inspect.isawaitable(result):
            await result

    async def close(self) -> None:
        """Stop the stream early. The source is closed only with close_on_end."""
        await self._finish("closed")

    aclose = close

    def __aiter__(self):
        return self

    async def __anext__(self) -> bytes:
        out = await self.read()
        if not out:
            raise StopAsyncIteration
        return out

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()


class EncodeStream(_Stream):
    """Reads raw bytes, produces base32 symbols as ASCII bytes."""

    window_size = BYTES_PER_CHUNK

    def _convert(self, window) -> bytes:
        return encode_chunk(window).encode("ascii")


class DecodeStream(_Stream):
    """Reads base32 symbols (bytes or str pieces), produces raw bytes.

    A final window of one symbol raises MalformedChunk; a bad symbol raises
    InvalidCharacter with its position in the whole input. Either error
    ends the stream, but output already returned stays valid.
    """

    window_size = SYMBOLS_PER_CHUNK

    def _convert(self, window) -> bytes:
        return decode_chunk(window, self.position)


def _as_source(source, allow_str: bool):
    if isinstance(source, str) and not allow_str:
        raise TypeError("cannot base32-encode str; encode it to bytes first")
    if isinstance(source, (bytes, bytearray, memoryview, str)):
        return BytesSource(source)
    return source


def encode_stream(source: ByteSource | bytes, close_on_end: bool = True) -> EncodeStream:
    return EncodeStream(_as_source(source, allow_str=False), close_on_end)


def decode_stream(source: ByteSource | bytes | str, close_on_end: bool = True) -> DecodeStream:
    return DecodeStream(_as_source(source, allow_str=True), close_on_end)
