import pytest

from chapterbook.errors import NumberingError
from chapterbook.numbering import MAX_ORDINAL, roman_numeral


@pytest.mark.parametrize("n,lower,upper", [
    (1, "i", "I"),
    (4, "iv", "IV"),
    (9, "ix", "IX"),
    (14, "xiv", "XIV"),
    (20, "xx", "XX"),
])
def test_table_values(n, lower, upper):
    assert roman_numeral(n) == lower
    assert roman_numeral(n, capitalized=True) == upper


def test_table_covers_one_to_twenty():
    assert MAX_ORDINAL == 20
    numerals = [roman_numeral(n) for n in range(1, MAX_ORDINAL + 1)]
    assert len(set(numerals)) == 20


@pytest.mark.parametrize("n", [0, -1, 21, 100])
def test_out_of_range_is_rejected(n):
    with pytest.raises(NumberingError, match="1..20"):
        roman_numeral(n, True)


def test_numbering_error_is_a_value_error():
    with pytest.raises(ValueError):
        roman_numeral(21, True)


@pytest.mark.parametrize("n", [None, "3", 2.0, True])
def test_non_integers_are_rejected(n):
    with pytest.raises(NumberingError):
        roman_numeral(n)
