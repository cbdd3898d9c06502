"""Static constants and lookup tables.

Word tables that don't change at runtime.
"""

ZERO_WORD = 'cero'
THOUSAND_WORD = 'mil'
HUNDRED_WORD = 'cien'

# Shortened form of "uno" used when more words follow
ONE_APOCOPE = 'un'

# 1..30 as single words (index 0 unused)
WORDS_1_TO_30 = (
    '',
    'uno', 'dos', 'tres', 'cuatro', 'cinco',
    'seis', 'siete', 'ocho', 'nueve', 'diez',
    'once', 'doce', 'trece', 'catorce', 'quince',
    'dieciséis', 'diecisiete', 'dieciocho', 'diecinueve', 'veinte',
    'veintiuno', 'veintidós', 'veintitrés', 'veinticuatro', 'veinticinco',
    'veintiséis', 'veintisiete', 'veintiocho', 'veintinueve', 'treinta',
)

# Tens digit → word
TENS_WORDS = {
    1: 'diez',
    2: 'veinte',
    3: 'treinta',
    4: 'cuarenta',
    5: 'cincuenta',
    6: 'sesenta',
    7: 'setenta',
    8: 'ochenta',
    9: 'noventa',
}

# Hundreds digit → word (100 on its own is HUNDRED_WORD)
HUNDREDS_WORDS = {
    1: 'ciento',
    2: 'doscientos',
    3: 'trescientos',
    4: 'cuatrocientos',
    5: 'quinientos',
    6: 'seiscientos',
    7: 'setecientos',
    8: 'ochocientos',
    9: 'novecientos',
}

# Scale names (singular, plural), ascending from 10^6
SHORT_SCALE_NAMES = (
    ('millón', 'millones'),
    ('billón', 'billones'),
    ('trillón', 'trillones'),
    ('cuatrillón', 'cuatrillones'),
    ('quintillón', 'quintillones'),
    ('sextillón', 'sextillones'),
    ('septillón', 'septillones'),
    ('octillón', 'octillones'),
    ('nonillón', 'nonillones'),
    ('decillón', 'decillones'),
    ('undecillón', 'undecillones'),
)

LONG_SCALE_NAMES = (
    ('millón', 'millones'),
    ('billón', 'billones'),
    ('trillón', 'trillones'),
    ('cuatrillón', 'cuatrillones'),
    ('quintillón', 'quintillones'),
    ('sextillón', 'sextillones'),
)

SHORT_SCALE_STEP = 10 ** 3
LONG_SCALE_STEP = 10 ** 6
FIRST_SCALE_MAGNITUDE = 10 ** 6
