#!/usr/bin/env python3
"""Encode or decode Modified UTF-8 and show the bytes.

Usage:
    python scripts/mutf8_dump.py encode "TEXT"
    python scripts/mutf8_dump.py encode "TEXT" --terminator
    python scripts/mutf8_dump.py decode "C0 80 ED A0 BD ED B8 80"

TEXT may contain Python escapes such as \\x00 or \\U0001F600.
"""
import argparse
import logging
import sys

from modutf8 import (
    MalformedEncodingError,
    classify,
    decode,
    decode_units,
    encode,
    encoded_length,
    to_code_units,
)


def format_hex(data: bytes) -> str:
    return ' '.join(f'{b:02X}' for b in data)


def cmd_encode(text: str, terminator: bool) -> int:
    text = text.encode('latin-1', 'backslashreplace').decode('unicode_escape')
    units = to_code_units(text)
    data = encode(text, append_terminator=terminator)

    print(f"Code units:     {len(units)}")
    print(f"Encoded length: {encoded_length(text)}"
          + (" (+1 terminator)" if terminator else ""))
    for unit in units:
        width = classify(unit)
        print(f"  U+{unit:04X}  {width.name:<10}")
    print(format_hex(data))
    return 0


def cmd_decode(hex_text: str) -> int:
    try:
        data = bytes.fromhex(hex_text)
    except ValueError as e:
        print(f"Invalid hex: {e}", file=sys.stderr)
        return 1

    try:
        units = decode_units(data)
    except MalformedEncodingError as e:
        print(f"Malformed input at byte {e.position}: {e.reason}", file=sys.stderr)
        return 1

    print(' '.join(f'{u:04X}' for u in units))
    print(ascii(decode(data)))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode', help='Encode text to hex')
    encode_parser.add_argument('text', help='Text to encode')
    encode_parser.add_argument('--terminator', action='store_true',
                               help='Append a zero terminator byte')

    decode_parser = subparsers.add_parser('decode', help='Decode hex to text')
    decode_parser.add_argument('hex', help='Hex bytes, whitespace allowed')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command == 'encode':
        return cmd_encode(args.text, args.terminator)
    return cmd_decode(args.hex)


if __name__ == '__main__':
    sys.exit(main())
