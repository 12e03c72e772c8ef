"""Roman numeral value object and text decoding.

A Numeral is an immutable sequence of symbols that always spells a canonical
Roman numeral. Numerals are normally built with ``parse_numeral`` (from text)
or ``encoder.numeral_from_value`` (from an integer).
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from .common.errors import InvalidFormatError
from .common.symbols import Symbol, symbol_for_letter
from .common.validators import validate_text


class Numeral(BaseModel):
    """Immutable Roman numeral.

    Equality and hashing are structural: two numerals are equal when their
    symbol sequences are equal element-wise. The empty sequence is zero.

    Attributes:
        symbols: The numeral's symbols, most significant first

    Example:
        >>> numeral = parse_numeral("xiv")
        >>> numeral.text()
        'XIV'
        >>> numeral.value()
        14
    """

    symbols: Tuple[Symbol, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_canonical(self) -> "Numeral":
        """Reject symbol sequences that do not form a canonical numeral."""
        if not validate_text(self.text()):
            raise ValueError(f"{self.text()!r} is not a valid Roman numeral")
        return self

    def text(self) -> str:
        """Return the numeral as uppercase text ("" for zero)."""
        return "".join(symbol.name for symbol in self.symbols)

    def value(self) -> int:
        """Return the integer value of the numeral.

        Symbols are read right to left. A symbol at least as large as every
        symbol already read is added, a smaller one is subtracted (the I in
        IV, the C in CM).

        Returns:
            Integer between 0 and 3999
        """
        total = 0
        largest = 0
        for symbol in reversed(self.symbols):
            if symbol.value >= largest:
                total += symbol.value
                largest = symbol.value
            else:
                total -= symbol.value
        return total

    def __str__(self) -> str:
        """Return the numeral text, so f-strings and print() show e.g. "XIV"."""
        return self.text()

    def __int__(self) -> int:
        """Return the integer value, so ``int(numeral)`` works like ``value()``."""
        return self.value()


def decode_symbols(text: str) -> Tuple[Symbol, ...]:
    """Map each character of already validated text to its symbol."""
    return tuple(symbol_for_letter(letter) for letter in text)


def parse_numeral(text: str) -> Numeral:
    """Parse text into a Numeral.

    The text is checked against the numeral grammar first, so grouping is
    guaranteed to be canonical before any character is decoded. Input is
    case-insensitive.

    Args:
        text: Roman numeral text (e.g., "MCMXCIV", "iv", "" for zero)

    Returns:
        The parsed Numeral

    Raises:
        InvalidFormatError: If the text is not a canonical Roman numeral

    Example:
        >>> parse_numeral("MC").value()
        1100
        >>> parse_numeral("IIII")
        Traceback (most recent call last):
        ...
        InvalidFormatError: 'IIII' is not a valid Roman numeral
    """
    if not validate_text(text):
        raise InvalidFormatError(text)
    return Numeral(symbols=decode_symbols(text))
