"""Environment-based settings and runtime configuration.

All settings that depend on environment variables or runtime state.
"""
import os

# Scale convention used when the caller does not pick one (runtime configurable)
_DEFAULT_SCALE = os.getenv('SPANISH_NUMBERS_SCALE', 'long').strip().lower() or 'long'

# Text placed between scale clauses ("un billón" + SEP + "doscientos mil ...")
_DEFAULT_SEPARATOR = os.getenv('SPANISH_NUMBERS_SEPARATOR', ' ')

# Logging
_DEFAULT_LOG_LEVEL = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
