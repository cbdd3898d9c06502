"""Centralized configuration for the number-to-words converter.

Package structure:
- settings.py: Environment-based configuration (default scale, separator, log format)
- constants.py: Static word tables and scale names
- defaults.py: Default selection logic (get_scale_name, get_separator, get_log_level)

All exports are re-exported here.
"""

# Re-export environment settings
from spanish_numbers.config.settings import (
    LOG_FORMAT,
)

# Re-export static constants
from spanish_numbers.config.constants import (
    ZERO_WORD,
    THOUSAND_WORD,
    HUNDRED_WORD,
    ONE_APOCOPE,
    WORDS_1_TO_30,
    TENS_WORDS,
    HUNDREDS_WORDS,
    SHORT_SCALE_NAMES,
    LONG_SCALE_NAMES,
    SHORT_SCALE_STEP,
    LONG_SCALE_STEP,
    FIRST_SCALE_MAGNITUDE,
)

# Re-export default selection functions
from spanish_numbers.config.defaults import (
    SCALE_NAMES,
    get_scale_name,
    get_separator,
    get_log_level,
)

__all__ = [
    # Settings
    'LOG_FORMAT',
    # Constants
    'ZERO_WORD',
    'THOUSAND_WORD',
    'HUNDRED_WORD',
    'ONE_APOCOPE',
    'WORDS_1_TO_30',
    'TENS_WORDS',
    'HUNDREDS_WORDS',
    'SHORT_SCALE_NAMES',
    'LONG_SCALE_NAMES',
    'SHORT_SCALE_STEP',
    'LONG_SCALE_STEP',
    'FIRST_SCALE_MAGNITUDE',
    # Default selection
    'SCALE_NAMES',
    'get_scale_name',
    'get_separator',
    'get_log_level',
]
