#!/usr/bin/env python3
"""Encode or decode base64 from the command line.

Usage:
    python scripts/b64.py encode photo.jpg
    python scripts/b64.py encode --string "Man"
    python scripts/b64.py decode encoded.txt > photo.jpg
    echo VGVzdA== | python scripts/b64.py decode --text

INPUT defaults to stdin. Surrounding whitespace is stripped from encoded input
before decoding. With --text the data goes through the UTF-8 layer: encode
reads the input as UTF-8 text, decode fails unless the result is UTF-8.
"""
import argparse
import sys
from typing import List, Optional

from libbase64 import decode, decode_text, encode, encode_text


def read_input(path: str) -> bytes:
    """Read raw bytes from a file path, or stdin for '-'."""
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def run_encode(args: argparse.Namespace) -> int:
    if args.string is not None:
        data = args.string.encode('utf-8')
    else:
        data = read_input(args.input)

    if args.text:
        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError as e:
            print(f"Error: input is not UTF-8 text: {e}", file=sys.stderr)
            return 1
        print(encode_text(text))
    else:
        print(encode(data))
    return 0


def run_decode(args: argparse.Namespace) -> int:
    if args.string is not None:
        encoded = args.string
    else:
        try:
            encoded = read_input(args.input).decode('ascii')
        except UnicodeDecodeError:
            print("Error: encoded input must be ASCII", file=sys.stderr)
            return 1
    encoded = encoded.strip()

    result = decode_text(encoded) if args.text else decode(encoded)
    if result.is_err:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    if args.text:
        print(result.unwrapped)
    else:
        sys.stdout.buffer.write(result.unwrapped)
        sys.stdout.buffer.flush()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argparser = argparse.ArgumentParser(description="Standard base64 encoder/decoder")
    subparsers = argparser.add_subparsers(dest="command", required=True)

    for name, help_text in (("encode", "Encode data to base64"),
                            ("decode", "Decode base64 to data")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", nargs='?', default='-',
                         help="Input file (default: stdin)")
        sub.add_argument("-s", "--string", default=None,
                         help="Use this string as input instead of reading a file")
        sub.add_argument("--text", action="store_true",
                         help="Treat the decoded data as UTF-8 text")

    args = argparser.parse_args(argv)

    if args.command == "encode":
        return run_encode(args)
    return run_decode(args)


if __name__ == "__main__":
    sys.exit(main())
