#!/usr/bin/env python3
"""
bingen CLI — hex text <-> byte buffer, random buffers

Quick start
1) Decode hex text (case-insensitive, trailing odd digit dropped):
   python -m bingen.cli decode 0FFF            -> [15, 255]
2) Encode bytes to canonical hex:
   python -m bingen.cli encode 15 0xff         -> 0FFF
3) Generate a random buffer (1-255 bytes):
   python -m bingen.cli generate --length 16
4) Export the raw bytes of hex text to stdout:
   python -m bingen.cli export 48656C6C6F > hello.txt

Notes
- Any non-hex character (spaces, "0x" prefixes) invalidates the whole text.
"""
import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .hexutil import INVALID_INPUT_MESSAGE, InvalidInput, encode, format_buffer, parse_hex, text_or_file
from .randbuf import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH, GenerationFailure, clamp_length, generate

logger = logging.getLogger(__name__)


def _parse_byte(value: str) -> int:
    try:
        n = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f'not an integer: {value!r}') from exc
    if n < 0 or n > 0xFF:
        raise argparse.ArgumentTypeError(f'byte out of range 0-255: {value!r}')
    return n


def _read_text_or_exit(args: argparse.Namespace) -> str:
    try:
        return text_or_file('text', args.text, args.text_file)
    except (ValueError, OSError) as e:
        print(f'ERROR: {e}', file=sys.stderr)
        sys.exit(1)


def _decode_or_exit(text: str) -> bytes:
    try:
        return parse_hex('text', text)
    except InvalidInput:
        print(INVALID_INPUT_MESSAGE, file=sys.stderr)
        sys.exit(1)


def cmd_decode(args: argparse.Namespace) -> None:
    text = _read_text_or_exit(args)
    data = _decode_or_exit(text)
    if args.json:
        print(json.dumps({
            'ok': True,
            'bytes': list(data),
            'hex': encode(data),
            'length': len(data),
        }))
    else:
        print(format_buffer(data))
        print('hex    =', encode(data))
        print('length =', len(data))


def cmd_encode(args: argparse.Namespace) -> None:
    print(encode(bytes(args.bytes)))


def cmd_generate(args: argparse.Namespace) -> None:
    length = clamp_length(args.length)
    if length != args.length:
        logger.info('length %s clamped to %d', args.length, length)
    try:
        buf = generate(length)
    except GenerationFailure as e:
        print(f'ERROR: {e}', file=sys.stderr)
        sys.exit(1)
    if args.json:
        print(json.dumps({'hex': encode(buf), 'bytes': list(buf), 'length': len(buf)}))
    else:
        print(encode(buf))


def cmd_export(args: argparse.Namespace) -> None:
    text = _read_text_or_exit(args)
    data = _decode_or_exit(text)
    out = getattr(sys.stdout, 'buffer', None)
    if out is None:
        print('ERROR: export needs a binary stdout', file=sys.stderr)
        sys.exit(1)
    out.write(data)
    out.flush()


def main(argv: Optional[Sequence[str]] = None) -> None:
    epilog = (
        "Examples:\n"
        "  bingen decode 0fff\n"
        "  bingen encode 15 255\n"
        "  bingen generate --length 32 --json\n"
        "Notes: hex text has no separators or prefixes; an odd trailing digit is ignored."
    )
    ap = argparse.ArgumentParser(description="bingen (hex text <-> bytes, random buffers)", epilog=epilog,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    sub = ap.add_subparsers(dest='cmd', required=True)

    ap_d = sub.add_parser('decode', help='decode hex text and print the byte list')
    ap_d.add_argument('text', nargs='?', help='hex text (0-9, a-f, A-F)')
    ap_d.add_argument('--text-file', help='read hex text from file')
    ap_d.add_argument('--json', action='store_true', help='print JSON output')
    ap_d.set_defaults(func=cmd_decode)

    ap_e = sub.add_parser('encode', help='encode byte values as uppercase hex')
    ap_e.add_argument('bytes', nargs='*', type=_parse_byte, help='byte values 0-255 (decimal or 0x..)')
    ap_e.set_defaults(func=cmd_encode)

    ap_g = sub.add_parser('generate', help='generate a random buffer and print it as hex')
    ap_g.add_argument('--length', type=int, default=DEFAULT_LENGTH,
                      help=f'number of bytes, clamped to {MIN_LENGTH}-{MAX_LENGTH} (default: {DEFAULT_LENGTH})')
    ap_g.add_argument('--json', action='store_true', help='print JSON output')
    ap_g.set_defaults(func=cmd_generate)

    ap_x = sub.add_parser('export', help='write the raw bytes of hex text to stdout')
    ap_x.add_argument('text', nargs='?', help='hex text (0-9, a-f, A-F)')
    ap_x.add_argument('--text-file', help='read hex text from file')
    ap_x.set_defaults(func=cmd_export)

    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    args.func(args)


if __name__ == '__main__':
    main()
