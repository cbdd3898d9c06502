"""Write non-negative integers out in Spanish.

Supports the short (American) and long (European) scales:

    >>> from spanish_numbers import Convention, NumberTranslator
    >>> NumberTranslator(Convention.LONG).convert(1_000_000_000)
    'mil millones'
"""

from spanish_numbers.scales import Convention, ScaleEntry, get_scale_table
from spanish_numbers.translator import (
    NumberTranslator,
    WordingInvariantError,
    number_to_spanish,
)

__version__ = '0.1.0'

__all__ = [
    'Convention',
    'ScaleEntry',
    'get_scale_table',
    'NumberTranslator',
    'WordingInvariantError',
    'number_to_spanish',
]
