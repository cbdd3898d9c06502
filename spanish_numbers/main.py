#!/usr/bin/env python3
"""CLI for writing numbers out in Spanish"""
import argparse
import logging
import sys
from typing import Optional

# Load environment variables (SPANISH_NUMBERS_SCALE, SPANISH_NUMBERS_SEPARATOR, LOG_LEVEL)
from dotenv import load_dotenv
load_dotenv()

from spanish_numbers import batch
from spanish_numbers.batch import InvalidNumeralError, parse_numeral
from spanish_numbers.config import LOG_FORMAT, get_log_level, get_scale_name, get_separator
from spanish_numbers.scales import Convention
from spanish_numbers.translator import NumberTranslator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='spanish-numbers',
        description='Write a non-negative integer out in Spanish words'
    )
    parser.add_argument(
        'number',
        nargs='?',
        metavar='NUMBER',
        help='Non-negative decimal numeral to convert'
    )
    scale = parser.add_mutually_exclusive_group()
    scale.add_argument(
        '-s', '--short',
        action='store_true',
        help='Use the short scale (un billón = 10^9)'
    )
    scale.add_argument(
        '-l', '--long',
        action='store_true',
        help='Use the long scale (un billón = 10^12, default)'
    )
    parser.add_argument(
        '-n', '--newline',
        action='store_true',
        help='Put each scale clause on its own line'
    )
    parser.add_argument(
        '--file',
        help='Convert every numeral in a text file (one per line)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging on stderr'
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format=LOG_FORMAT
    )

    # Validate: exactly one of NUMBER or --file
    if args.number is None and not args.file:
        parser.error("NUMBER or --file is required")
    if args.number is not None and args.file:
        parser.error("Cannot use both NUMBER and --file (mutually exclusive)")

    if args.short:
        convention = Convention.SHORT
    elif args.long:
        convention = Convention.LONG
    else:
        convention = Convention.from_name(get_scale_name())
    separator = '\n' if args.newline else get_separator()

    translator = NumberTranslator(convention)

    # Batch mode
    if args.file:
        try:
            numerals = batch.load_numerals(args.file)
        except FileNotFoundError as e:
            parser.error(str(e))
        logger.info(f"Found {len(numerals)} numerals in {args.file}")

        results = batch.run_batch(numerals, translator, separator)
        for numeral, text in results['results']:
            print(f"{numeral}: {text}")
        for numeral, error in results['failed_numerals']:
            print(f"{numeral}: {error}", file=sys.stderr)
        return 0 if results['failed'] == 0 else 1

    # Single-number mode
    try:
        number = parse_numeral(args.number)
    except InvalidNumeralError as e:
        parser.error(str(e))

    try:
        print(translator.convert(number, separator))
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
