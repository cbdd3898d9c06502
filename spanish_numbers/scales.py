"""Scale tables for the short (American) and long (European) conventions.

Each table is a tuple of ScaleEntry, strictly descending by magnitude and
terminated by the units sentinel (magnitude 1, empty names). Tables are
built once at import time and shared by every translator.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spanish_numbers.config import (
    FIRST_SCALE_MAGNITUDE,
    LONG_SCALE_NAMES,
    LONG_SCALE_STEP,
    SHORT_SCALE_NAMES,
    SHORT_SCALE_STEP,
)


class Convention(Enum):
    """Naming system for large magnitudes."""

    SHORT = 'short'
    LONG = 'long'

    @classmethod
    def from_name(cls, name: str) -> Convention:
        """Parse a case-insensitive convention name ("short" or "long").

        Raises:
            ValueError: if the name is not a known convention
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown scale convention: {name!r}") from None


@dataclass(frozen=True)
class ScaleEntry:
    """A named magnitude with its singular and plural scale words."""

    magnitude: int
    singular: str
    plural: str

    @property
    def is_units(self) -> bool:
        return self.magnitude == 1

    def name_for(self, count: int) -> str:
        """Scale word agreeing in number with count (empty for the sentinel)."""
        return self.singular if count == 1 else self.plural


UNITS = ScaleEntry(1, '', '')


def _build_table(names: tuple[tuple[str, str], ...], step: int) -> tuple[ScaleEntry, ...]:
    entries = []
    magnitude = FIRST_SCALE_MAGNITUDE
    for singular, plural in names:
        entries.append(ScaleEntry(magnitude, singular, plural))
        magnitude *= step
    entries.reverse()
    entries.append(UNITS)
    return tuple(entries)


_TABLES = {
    Convention.SHORT: _build_table(SHORT_SCALE_NAMES, SHORT_SCALE_STEP),
    Convention.LONG: _build_table(LONG_SCALE_NAMES, LONG_SCALE_STEP),
}


def get_scale_table(convention: Convention) -> tuple[ScaleEntry, ...]:
    """Return the descending scale table for a convention."""
    return _TABLES[convention]


def find_scale(table: tuple[ScaleEntry, ...], number: int) -> ScaleEntry:
    """Return the coarsest entry whose magnitude does not exceed number.

    The table is scanned from the largest magnitude down, so the first
    match wins. ``number`` must be positive; the sentinel always matches.
    """
    for entry in table:
        if entry.magnitude <= number:
            return entry
    raise AssertionError(f"no scale entry for {number}")
