"""Symbol table for Roman numerals.

Defines the seven numeral symbols and the two lookup relations the encoder
and decoder rely on. The tables are built once at import time and are
read-only afterwards.
"""
from bisect import bisect_left, bisect_right
from enum import Enum
from typing import Dict, List


class Symbol(Enum):
    """A single Roman numeral character and its decimal value.

    Members are declared in descending order of value, which is the order
    numerals are written in.
    """
    M = 1000
    D = 500
    C = 100
    L = 50
    X = 10
    V = 5
    I = 1


# value -> symbol and symbol -> value
SYMBOLS_BY_VALUE: Dict[int, Symbol] = {symbol.value: symbol for symbol in Symbol}
VALUES_BY_SYMBOL: Dict[Symbol, int] = {symbol: symbol.value for symbol in Symbol}

# Ascending, for bisect
_SORTED_VALUES: List[int] = sorted(SYMBOLS_BY_VALUE)


def floor_symbol(value: int) -> Symbol:
    """Return the symbol with the greatest value less than or equal to ``value``.

    Args:
        value: Positive integer to look up

    Returns:
        The nearest symbol at or below ``value``

    Raises:
        KeyError: If ``value`` is smaller than the smallest symbol (I)

    Example:
        >>> floor_symbol(592)
        <Symbol.D: 500>
        >>> floor_symbol(10)
        <Symbol.X: 10>
    """
    index = bisect_right(_SORTED_VALUES, value)
    if index == 0:
        raise KeyError(f"No symbol at or below {value}")
    return SYMBOLS_BY_VALUE[_SORTED_VALUES[index - 1]]


def ceiling_symbol(value: int) -> Symbol:
    """Return the symbol with the smallest value strictly greater than ``value``.

    Args:
        value: Integer to look up

    Returns:
        The next symbol above ``value``

    Raises:
        KeyError: If no symbol is larger than ``value`` (``value`` >= 1000)

    Example:
        >>> ceiling_symbol(1)
        <Symbol.V: 5>
        >>> ceiling_symbol(5)
        <Symbol.X: 10>
    """
    index = bisect_left(_SORTED_VALUES, value + 1)
    if index == len(_SORTED_VALUES):
        raise KeyError(f"No symbol above {value}")
    return SYMBOLS_BY_VALUE[_SORTED_VALUES[index]]


def symbol_for_letter(letter: str) -> Symbol:
    """Look up a symbol by its letter, ignoring case."""
    return Symbol[letter.upper()]
