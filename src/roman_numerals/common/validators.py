"""Validation utilities for the Roman numeral converter.

This module holds the grammar check that decides whether a piece of text is a
canonical Roman numeral, the range check for integers, and the file check used
by the CSV batch converter.
"""
import re
from numbers import Integral
from pathlib import Path

# Thousands, then hundreds, tens and units groups. Each group is either a
# subtractive pair or an optional five-symbol followed by up to three ones.
NUMERAL_PATTERN = re.compile(
    r'M{0,3}'
    r'(CM|CD|D?C{0,3})'
    r'(XC|XL|L?X{0,3})'
    r'(IX|IV|V?I{0,3})',
    re.IGNORECASE | re.ASCII,
)

MIN_VALUE = 0
MAX_VALUE = 3999


def validate_text(text: str) -> bool:
    """Check whether a string is a canonical Roman numeral.

    The whole string must match the numeral grammar; partial matches are
    rejected. Matching is case-insensitive and the empty string is accepted
    as the numeral for zero.

    Args:
        text: Candidate numeral (e.g., "XIV", "mcm", "")

    Returns:
        True if the text is a valid numeral, False otherwise (including for
        non-string input)

    Example:
        >>> validate_text("MCMXCIV")
        True
        >>> validate_text("IIII")
        False
    """
    if not isinstance(text, str):
        return False
    return NUMERAL_PATTERN.fullmatch(text) is not None


def validate_value(value: int) -> bool:
    """Check whether an integer can be written as a Roman numeral.

    Args:
        value: Candidate integer. Any integral type is accepted (numpy integers
               read by pandas included), booleans are not.

    Returns:
        True if ``0 <= value <= 3999``, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        return False
    # numpy integers compare to numpy.bool_
    return bool(MIN_VALUE <= value <= MAX_VALUE)


def validate_csv_file(path: Path, name: str = "CSV file") -> None:
    """Validate that a path exists, is a file, and has .csv extension.

    Args:
        path: Path object to validate
        name: Descriptive name for the CSV file, used in error messages
              (e.g., "Input CSV file")

    Raises:
        ValueError: If path does not exist, is not a file, or doesn't
                   have a .csv extension
    """
    if not path.is_file() or path.suffix != ".csv":
        raise ValueError(f"Error: {name} is not a valid CSV: {path}")
