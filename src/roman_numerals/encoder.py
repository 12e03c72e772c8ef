"""Integer to Roman numeral encoding.

Numbers are composed greedily from the largest symbol that fits, one run of
repeated symbols at a time. Two rewrites turn the naive runs into canonical
subtractive notation without a hard-coded table of pairs:

- a run of four (IIII, XXXX, CCCC) becomes the symbol followed by the next
  symbol up (IV, XL, CD);
- a lone five-symbol followed by such a pair (V + IV, L + XL, D + CD) becomes
  the pair with its upper symbol moved one step further up (IX, XC, CM).
"""
from typing import List

from .common.errors import OutOfRangeError
from .common.symbols import ceiling_symbol, floor_symbol, symbol_for_letter
from .common.validators import validate_value
from .numeral import Numeral, parse_numeral


def compose_runs(value: int) -> List[str]:
    """Split a positive integer into numeral runs, most significant first.

    Args:
        value: Integer between 1 and 3999

    Returns:
        List of runs whose concatenation is the canonical numeral

    Example:
        >>> compose_runs(592)
        ['D', 'XC', 'II']
        >>> compose_runs(1900)
        ['M', 'CM']
    """
    runs: List[str] = []
    remainder = value

    while remainder > 0:
        symbol = floor_symbol(remainder)
        key = symbol.value
        times = remainder // key
        remainder = remainder % (key * times)

        run = symbol.name * times
        if len(run) > 3:
            # IIII -> IV
            run = symbol.name + ceiling_symbol(key).name
        runs.append(run)

        if len(runs) > 1:
            previous, last = runs[-2], runs[-1]
            if len(previous) == 1 and last.endswith(previous):
                # V + IV -> IX
                del runs[-2:]
                upper = ceiling_symbol(symbol_for_letter(previous).value)
                runs.append(last.replace(previous, upper.name))

    return runs


def numeral_from_value(value: int) -> Numeral:
    """Convert an integer to a Numeral.

    The composed text is parsed back through the numeral grammar, so the
    result is always a canonical numeral.

    Args:
        value: Integer between 0 and 3999 (0 gives the empty numeral)

    Returns:
        The Numeral for ``value``

    Raises:
        OutOfRangeError: If ``value`` is outside 0-3999 or not an integer

    Example:
        >>> numeral_from_value(3732).text()
        'MMMDCCXXXII'
        >>> numeral_from_value(0).text()
        ''
    """
    if not validate_value(value):
        raise OutOfRangeError(value)

    value = int(value)
    if value == 0:
        return Numeral(symbols=())

    return parse_numeral("".join(compose_runs(value)))
