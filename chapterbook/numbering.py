"""Roman numeral labels for sections and chapters."""
from chapterbook.errors import NumberingError

ROMAN_NUMERALS = (
    "i", "ii", "iii", "iv", "v",
    "vi", "vii", "viii", "ix", "x",
    "xi", "xii", "xiii", "xiv", "xv",
    "xvi", "xvii", "xviii", "xix", "xx",
)
ROMAN_NUMERALS_CAPITAL = tuple(numeral.upper() for numeral in ROMAN_NUMERALS)

MAX_ORDINAL = len(ROMAN_NUMERALS)


def roman_numeral(n: int, capitalized: bool = False) -> str:
    """Return the roman numeral for a 1-based ordinal.

    Only ordinals 1..20 are supported; anything else raises NumberingError
    so an undefined label never reaches a section or chapter.
    """
    if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= MAX_ORDINAL:
        raise NumberingError(
            f"Cannot number ordinal {n!r}: supported range is 1..{MAX_ORDINAL}"
        )
    table = ROMAN_NUMERALS_CAPITAL if capitalized else ROMAN_NUMERALS
    return table[n - 1]
