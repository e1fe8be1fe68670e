"""Command line front end.

Usage:
    python -m u8codec encode 'hello'
    python -m u8codec encode --units d834 dd1e
    python -m u8codec decode 'c3 a9'
    python -m u8codec decode --lenient --units 'c1 bf'
"""

import argparse
from collections.abc import Sequence
import logging
import sys

from u8codec.config import CONFIG
from u8codec.decoder import decode
from u8codec.encoder import encode
from u8codec.errors import CodecError
from u8codec.sequences import CodeUnits

LOGGER = logging.getLogger(__name__)


def _parse_units(values: Sequence[str]) -> list[int]:
    units: list[int] = []
    for value in values:
        for token in value.replace(',', ' ').split():
            units.append(int(token.removeprefix('U+').removeprefix('u+'), 16))
    return units


def _printable(text: str) -> str:
    # Lenient decoding can yield lone surrogates, which stdout cannot encode
    return text.encode('utf-8', 'backslashreplace').decode('utf-8')


def run_encode(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.units is not None:
        if args.text is not None:
            parser.error('encode takes either TEXT or --units, not both')
        try:
            source: CodeUnits | list[int] = _parse_units(args.units)
        except ValueError as e:
            parser.error(f'invalid code unit: {e}')
    elif args.text is not None:
        source = CodeUnits.from_str(args.text)
    else:
        parser.error('encode needs TEXT or --units')

    data = encode(source)
    LOGGER.info('Encoded %d code units into %d bytes', len(source), len(data))
    print(data.hex(args.sep) if args.sep else data.hex())
    return 0


def run_decode(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        data = bytes.fromhex(''.join(''.join(args.hex).split()))
    except ValueError as e:
        parser.error(f'invalid hex input: {e}')

    strict = CONFIG.strict if args.strict is None else args.strict
    units = decode(data, strict=strict)
    LOGGER.info('Decoded %d bytes into %d code units (strict=%s)', len(data), len(units), strict)
    if args.units:
        print(' '.join(f'{unit:04x}' for unit in units))
    else:
        print(_printable(units.to_str()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='u8codec', description='Convert between UTF-16 code units and UTF-8 bytes.'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode', help='Encode text or code units as UTF-8.')
    encode_parser.add_argument('text', nargs='?', help='Text to encode.')
    encode_parser.add_argument(
        '--units', nargs='+', metavar='HEX', help='Encode explicit UTF-16 code units instead.'
    )
    encode_parser.add_argument(
        '--sep', default=CONFIG.hex_separator, help='Separator between output bytes.'
    )
    encode_parser.set_defaults(handler=run_encode)

    decode_parser = subparsers.add_parser('decode', help='Decode hex UTF-8 bytes.')
    decode_parser.add_argument('hex', nargs='+', help='UTF-8 bytes as hex, whitespace ignored.')
    decode_parser.add_argument(
        '--units', action='store_true', help='Print UTF-16 code units instead of text.'
    )
    mode = decode_parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--strict', dest='strict', action='store_true', default=None, help='Reject overlong forms.'
    )
    mode.add_argument(
        '--lenient',
        dest='strict',
        action='store_false',
        default=None,
        help='Accept overlong forms and encoded surrogates.',
    )
    decode_parser.set_defaults(handler=run_decode)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, CONFIG.logging_level), stream=sys.stderr)

    parser = build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    try:
        return int(args.handler(args, parser))
    except CodecError as e:
        LOGGER.debug('Conversion failed', exc_info=e)
        print(f'error: {e.kind.value}: {e.message} at {e.position}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
