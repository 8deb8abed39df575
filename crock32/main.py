#!/usr/bin/env python3
"""crock32: Crockford base32 on the command line."""

import argparse
import io
import logging
import os
import sys

from crock32 import codec, compare
from crock32.errors import Base32Error
from crock32.stream import iter_decode, iter_encode

DEFAULT_LOG_LEVEL = "WARNING"


def _open_input(path: str):
    if path == "-":
        return sys.stdin.buffer
    return open(path, "rb")


def cmd_encode(args):
    reader = _open_input(args.path)
    try:
        for symbols in iter_encode(reader):
            sys.stdout.write(symbols)
    finally:
        if reader is not sys.stdin.buffer:
            reader.close()
    sys.stdout.write("\n")


class _DropTrailingNewlines:
    """Blocking reader that hides newlines at the very end of its input.

    Newline bytes are held back until a later byte shows they are not
    trailing; at end of input the held bytes are dropped.
    """

    def __init__(self, reader, chunk_size: int = io.DEFAULT_BUFFER_SIZE):
        self.reader = reader
        self.chunk_size = chunk_size
        self.buf = b""
        self.eof = False

    def read(self, n: int) -> bytes:
        while True:
            ready = len(self.buf) if self.eof else len(self.buf.rstrip(b"\r\n"))
            if ready or self.eof:
                k = min(n, ready)
                piece, self.buf = self.buf[:k], self.buf[k:]
                return piece
            data = self.reader.read(self.chunk_size)
            if data:
                self.buf += data
            else:
                self.eof = True
                self.buf = self.buf.rstrip(b"\r\n")


def cmd_decode(args):
    reader = _open_input(args.path)
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        for chunk in iter_decode(_DropTrailingNewlines(reader)):
            out.write(chunk)
    finally:
        out.flush()
        if reader is not sys.stdin.buffer:
            reader.close()


def cmd_valid(args):
    valid = codec.is_valid_base32(args.text)
    print("valid" if valid else "invalid")
    sys.exit(0 if valid else 1)


def cmd_compare(args):
    print("<=>"[compare.compare(args.a, args.b) + 1])


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="crock32", description="Crockford base32 encoder/decoder")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("CROCK32_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="logging level (default: $CROCK32_LOG_LEVEL or %(default)s)",
    )
    sub = parser.add_subparsers(dest="command")

    # encode
    p = sub.add_parser("encode", help="Encode a file (or stdin) to base32")
    p.add_argument("path", nargs="?", default="-")
    p.set_defaults(func=cmd_encode)

    # decode
    p = sub.add_parser("decode", help="Decode base32 from a file (or stdin)")
    p.add_argument("path", nargs="?", default="-")
    p.set_defaults(func=cmd_decode)

    # valid
    p = sub.add_parser("valid", help="Check whether text is valid base32")
    p.add_argument("text")
    p.set_defaults(func=cmd_valid)

    # compare
    p = sub.add_parser("compare", help="Compare two base32 strings, ignoring case and synonyms")
    p.add_argument("a")
    p.add_argument("b")
    p.set_defaults(func=cmd_compare)

    args = parser.parse_args(argv)
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level!r}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s",
    )
    if not args.command:
        parser.print_help()
        sys.exit(1)
    try:
        args.func(args)
    except Base32Error as e:
        print(f"crock32: error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
