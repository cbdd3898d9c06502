"""Default scale and separator selection.

Resolves the environment-driven defaults used by the CLI and by
``number_to_spanish`` when no explicit choice is given.
"""
import logging
import os

from spanish_numbers.config.settings import _DEFAULT_LOG_LEVEL, _DEFAULT_SCALE, _DEFAULT_SEPARATOR

logger = logging.getLogger(__name__)

SCALE_NAMES = ('long', 'short')


def get_scale_name() -> str:
    """Return the configured scale convention ("long" or "short").

    Reads SPANISH_NUMBERS_SCALE env var, validates, defaults to 'long'.
    """
    scale = os.getenv('SPANISH_NUMBERS_SCALE', _DEFAULT_SCALE).strip().lower()
    if scale not in SCALE_NAMES:
        logger.warning("Unknown SPANISH_NUMBERS_SCALE %r, using 'long'", scale)
        return 'long'
    return scale


def get_separator() -> str:
    """Return the configured clause separator.

    The literal two-character sequence ``\\n`` is accepted as a newline so
    the value can be written on a single line of a .env file.
    """
    separator = os.getenv('SPANISH_NUMBERS_SEPARATOR', _DEFAULT_SEPARATOR)
    return separator.replace('\\n', '\n')


def get_log_level() -> str:
    """Return the configured log level name (e.g. "WARNING").

    Reads LOG_LEVEL env var at call time so values loaded from a .env file
    are honoured. Unknown names fall back to WARNING.
    """
    level = os.getenv('LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown LOG_LEVEL %r, using %r", level, _DEFAULT_LOG_LEVEL)
        return _DEFAULT_LOG_LEVEL
    return level
