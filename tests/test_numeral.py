"""Tests for the Numeral value object and text decoding."""

import pytest
from pydantic import ValidationError

from roman_numerals.common.errors import InvalidFormatError, NumeralError
from roman_numerals.common.symbols import Symbol
from roman_numerals.numeral import Numeral, decode_symbols, parse_numeral


class TestParseNumeral:
    """Text -> Numeral"""

    @pytest.mark.parametrize(
        "text,expected",
        [("I", 1), ("IV", 4), ("VI", 6), ("IX", 9), ("XL", 40), ("LX", 60), ("XC", 90),
         ("CD", 400), ("CM", 900), ("MC", 1100), ("MM", 2000), ("MCMXCIV", 1994),
         ("DXCII", 592), ("MMMDCCXXXII", 3732), ("MMMCMXCIX", 3999)],
    )
    def test_known_values(self, text: str, expected: int) -> None:
        assert parse_numeral(text).value() == expected

    def test_empty_text_is_zero(self) -> None:
        numeral = parse_numeral("")
        assert numeral.value() == 0
        assert numeral.symbols == ()
        assert numeral.text() == ""

    def test_lowercase_input_normalized(self) -> None:
        """Input case is ignored, text is always uppercase"""
        numeral = parse_numeral("mcmxciv")
        assert numeral.text() == "MCMXCIV"
        assert numeral == parse_numeral("MCMXCIV")

    def test_symbols_mapped_character_by_character(self) -> None:
        assert parse_numeral("XIV").symbols == (Symbol.X, Symbol.I, Symbol.V)
        assert decode_symbols("cm") == (Symbol.C, Symbol.M)

    @pytest.mark.parametrize("text", ["IIIII", "MDD", "IIII", "ABC", "X V", "MMMM"])
    def test_invalid_text_raises(self, text: str) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_numeral(text)
        assert exc_info.value.text == text
        assert "not a valid Roman numeral" in str(exc_info.value)

    def test_invalid_format_is_value_error(self) -> None:
        """Callers catching ValueError still see the failure"""
        with pytest.raises(ValueError):
            parse_numeral("IIIII")
        assert issubclass(InvalidFormatError, NumeralError)


class TestNumeralValueObject:
    """Equality, hashing and immutability"""

    def test_equal_in_both_directions(self) -> None:
        first = parse_numeral("I")
        second = parse_numeral("I")
        assert first == second
        assert second == first

    def test_unequal_in_both_directions(self) -> None:
        first = parse_numeral("I")
        second = parse_numeral("V")
        assert first != second
        assert second != first

    def test_hash_follows_equality(self) -> None:
        assert hash(parse_numeral("xiv")) == hash(parse_numeral("XIV"))
        assert len({parse_numeral("X"), parse_numeral("x"), parse_numeral("V")}) == 2

    def test_not_equal_to_plain_text(self) -> None:
        assert parse_numeral("X") != "X"

    def test_str_and_int(self) -> None:
        numeral = parse_numeral("xlii")
        assert str(numeral) == "XLII"
        assert int(numeral) == 42

    def test_frozen(self) -> None:
        numeral = parse_numeral("X")
        with pytest.raises(ValidationError):
            numeral.symbols = (Symbol.V,)

    def test_direct_construction_checks_grammar(self) -> None:
        assert Numeral(symbols=(Symbol.C, Symbol.M)).value() == 900
        with pytest.raises(ValidationError):
            Numeral(symbols=(Symbol.I,) * 4)
        with pytest.raises(ValidationError):
            Numeral(symbols=(Symbol.I, Symbol.M))


class TestToInteger:
    """Right-to-left scan with subtractive notation"""

    def test_subtractive_pairs(self) -> None:
        for text, expected in [("IV", 4), ("IX", 9), ("XL", 40), ("XC", 90), ("CD", 400), ("CM", 900)]:
            assert parse_numeral(text).value() == expected

    def test_smaller_symbol_after_larger_adds(self) -> None:
        assert parse_numeral("VI").value() == 6
        assert parse_numeral("MDCLXVI").value() == 1666

    def test_several_subtractions(self) -> None:
        assert parse_numeral("CDXLIV").value() == 444
        assert parse_numeral("CMXCIX").value() == 999
