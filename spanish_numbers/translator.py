"""Conversion of non-negative integers into written Spanish.

The number is consumed top-down through a scale table: the coarsest
applicable scale is peeled off, its count (1..999,999) is worded and
followed by the scale word, and the remainder is handled the same way.
Each step yields one clause; clauses are joined with a caller-supplied
separator.

The ``is_not_end`` flag threaded through the wording helpers controls
apocope: "uno" becomes "un" whenever more words follow in the same
phrase, e.g. "un millón", "treinta y un mil".
"""
from __future__ import annotations

import logging
from typing import Optional

from spanish_numbers.config import (
    HUNDRED_WORD,
    HUNDREDS_WORDS,
    ONE_APOCOPE,
    TENS_WORDS,
    THOUSAND_WORD,
    WORDS_1_TO_30,
    ZERO_WORD,
    get_scale_name,
    get_separator,
)
from spanish_numbers.scales import Convention, ScaleEntry, find_scale, get_scale_table

logger = logging.getLogger(__name__)

_MAX_COUNT = 999_999


class WordingInvariantError(AssertionError):
    """Raised when a wording routine receives a value outside its range.

    Never reachable through well-formed decomposition; signals a defect.
    """


def _check_range(number: int, low: int, high: int, routine: str) -> None:
    if not low <= number <= high:
        raise WordingInvariantError(f"{routine}: {number} outside {low}..{high}")


def word_below_hundred(number: int, is_not_end: bool) -> str:
    """Word 1..99. Numbers up to 30 are single words; above that "X y Y"."""
    _check_range(number, 1, 99, 'word_below_hundred')
    if number <= 30:
        if is_not_end and number == 1:
            return ONE_APOCOPE
        return WORDS_1_TO_30[number]

    tens, units = divmod(number, 10)
    words = TENS_WORDS[tens]
    if units > 0:
        words += ' y ' + word_below_hundred(units, is_not_end)
    return words


def word_below_thousand(number: int, is_not_end: bool) -> str:
    """Word 1..999. Exactly 100 is "cien"; 101..199 start with "ciento"."""
    _check_range(number, 1, 999, 'word_below_thousand')
    if number < 100:
        return word_below_hundred(number, is_not_end)
    if number == 100:
        return HUNDRED_WORD

    hundreds, rest = divmod(number, 100)
    words = HUNDREDS_WORDS[hundreds]
    if rest > 0:
        words += ' ' + word_below_hundred(rest, is_not_end)
    return words


def word_below_million(number: int, is_not_end: bool) -> str:
    """Word 1..999,999, using "mil" (never "un mil") for the thousands."""
    _check_range(number, 1, _MAX_COUNT, 'word_below_million')
    if number < 1000:
        return word_below_thousand(number, is_not_end)

    thousands, rest = divmod(number, 1000)
    if thousands > 1:
        words = word_below_thousand(thousands, is_not_end or rest > 0) + ' ' + THOUSAND_WORD
    else:
        words = THOUSAND_WORD
    if rest > 0:
        words += ' ' + word_below_thousand(rest, is_not_end)
    return words


class NumberTranslator:
    """Stateless Spanish number writer bound to one scale convention.

    Instances hold only the immutable scale table, so a single translator
    can be shared freely between threads.

    Example:
        >>> NumberTranslator(Convention.SHORT).convert(1_000_000_000)
        'un billón'
    """

    def __init__(self, convention: Convention = Convention.LONG):
        self._convention = convention
        self._scale = get_scale_table(convention)

    @property
    def convention(self) -> Convention:
        return self._convention

    @property
    def scale(self) -> tuple[ScaleEntry, ...]:
        return self._scale

    def __repr__(self) -> str:
        return f"NumberTranslator({self._convention})"

    def convert(self, number: int, separator: str = ' ') -> str:
        """Return the Spanish words for number.

        Args:
            number: Non-negative integer of any size
            separator: Text placed between scale clauses

        Returns:
            The written form, e.g. "mil cuatrocientos cincuenta y seis"

        Raises:
            TypeError: if number is not an int (bool is rejected too)
            ValueError: if number is negative
        """
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Expected a non-negative int, got {type(number).__name__}")
        if number < 0:
            raise ValueError(f"Negative numbers are not supported: {number}")
        if number == 0:
            return ZERO_WORD
        return separator.join(self.decompose(number))

    def decompose(self, number: int) -> list[str]:
        """Split a positive number into worded clauses, largest scale first."""
        return self._clauses(number, followed=False)

    def _clauses(self, number: int, followed: bool) -> list[str]:
        clauses = []
        remaining = number
        while remaining > 0:
            entry = find_scale(self._scale, remaining)
            count, remaining = divmod(remaining, entry.magnitude)
            is_not_end = remaining > 0 or not entry.is_units or followed
            words = self._word_count(count, is_not_end)
            name = entry.name_for(count)
            clause = f"{words} {name}" if name else words
            logger.debug("%d x %d -> %r", count, entry.magnitude, clause)
            clauses.append(clause)
        return clauses

    def _word_count(self, count: int, is_not_end: bool) -> str:
        if count <= _MAX_COUNT:
            return word_below_million(count, is_not_end)
        # Only reachable above the top scale: the top word repeats as a multiplier
        return ' '.join(self._clauses(count, followed=is_not_end))


_translators: dict[Convention, NumberTranslator] = {}


def get_translator(convention: Convention) -> NumberTranslator:
    """Return the shared translator for a convention."""
    translator = _translators.get(convention)
    if translator is None:
        translator = _translators.setdefault(convention, NumberTranslator(convention))
    return translator


def number_to_spanish(
    number: int,
    convention: Optional[Convention] = None,
    separator: Optional[str] = None,
) -> str:
    """Convert a number using the shared translator.

    Unset arguments fall back to SPANISH_NUMBERS_SCALE and
    SPANISH_NUMBERS_SEPARATOR.
    """
    if convention is None:
        convention = Convention.from_name(get_scale_name())
    if separator is None:
        separator = get_separator()
    return get_translator(convention).convert(number, separator)
