"""Batch conversion of numerals read from a text file"""
import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional

from spanish_numbers.translator import NumberTranslator

logger = logging.getLogger(__name__)

_NUMERAL_RE = re.compile(r'\+?[0-9]+')


class InvalidNumeralError(ValueError):
    """Raised when text is not a plain non-negative decimal numeral."""


def parse_numeral(text: str) -> int:
    """
    Parse a decimal numeral into a non-negative int.

    Accepts: ASCII digits with an optional leading '+', surrounding whitespace
    Rejects: empty text, negatives, separators, signs in the middle, non-ASCII digits
    Raises: InvalidNumeralError
    """
    candidate = text.strip()
    if not _NUMERAL_RE.fullmatch(candidate):
        raise InvalidNumeralError(f"Not a non-negative decimal numeral: {text!r}")
    try:
        return int(candidate)
    except ValueError as exc:
        # Digit-count limit on str -> int conversion
        raise InvalidNumeralError(f"Numeral too long to convert: {len(candidate)} digits") from exc


def load_numerals(path: str) -> list[str]:
    """
    Load numerals from a text file, one per line.

    Skips blank lines and lines starting with '#'.
    Returns: Stripped numeral strings in file order (not validated)
    Raises: FileNotFoundError if the file does not exist
    """
    path_obj = Path(path)
    if not path_obj.exists():
        raise FileNotFoundError(f"Numeral file not found: {path}")

    numerals = []
    with open(path_obj, 'r', encoding='utf-8') as fh:
        for line in fh:
            stripped = line.strip()
            if not stripped or stripped.startswith('#'):
                continue
            numerals.append(stripped)
    return numerals


def run_batch(
    numerals: Iterable[str],
    translator: NumberTranslator,
    separator: str = ' ',
    log_file: Optional[str] = None,
) -> dict[str, Any]:
    """
    Convert many numerals, counting failures instead of stopping on them.

    Args:
        numerals: Numeral strings to convert
        translator: Translator bound to the desired scale convention
        separator: Clause separator passed to convert()
        log_file: Optional log file path

    Returns:
        {
            'success': int,
            'failed': int,
            'results': [(numeral, text)],
            'failed_numerals': [(numeral, error)]
        }
    """
    handler = None
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(handler)

    results: list[tuple[str, str]] = []
    failed_numerals: list[tuple[str, str]] = []

    try:
        numerals = list(numerals)
        total = len(numerals)
        logger.info(f"Starting batch conversion: {total} numerals ({translator.convention.value} scale)")

        for position, numeral in enumerate(numerals, 1):
            try:
                number = parse_numeral(numeral)
            except InvalidNumeralError as exc:
                failed_numerals.append((numeral, str(exc)))
                logger.warning(f"[{position}/{total}] Skipped: {exc}")
                continue

            results.append((numeral, translator.convert(number, separator)))
            logger.debug(f"[{position}/{total}] Converted: {numeral}")

        logger.info("Batch conversion complete: %d converted, %d failed", len(results), len(failed_numerals))
    finally:
        if handler is not None:
            logger.removeHandler(handler)
            handler.close()

    return {
        'success': len(results),
        'failed': len(failed_numerals),
        'results': results,
        'failed_numerals': failed_numerals,
    }
