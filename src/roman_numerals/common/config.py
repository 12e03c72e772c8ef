"""Configuration for the Roman numeral converter front ends.

This module contains the default output case and the settings model that
can be loaded from a JSON file:
- output case (uppercase or lowercase numerals)
- CSV batch conversion (input/output files, column and direction)

Environment Variables:
    ROMAN_NUMERALS_LOWERCASE: Set to "1" to print numerals in lowercase by default
"""
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, TypeAdapter

from ..numeral import Numeral

# Numerals are stored uppercase; lowercase is purely a display choice
ROMAN_NUMERALS_LOWERCASE = os.getenv("ROMAN_NUMERALS_LOWERCASE", "0") == "1"

DEFAULT_UPPERCASE = not ROMAN_NUMERALS_LOWERCASE


class Direction(str, Enum):
    """Which way a CSV column is converted."""

    TO_INTEGER = "to_integer"
    TO_NUMERAL = "to_numeral"


class CsvSettings(BaseModel):
    """Settings for converting one column of a CSV file."""

    input_csv: Path = Field(..., description="CSV file to read")
    output_csv: Path = Field(..., description="CSV file to write")
    column: str = Field(..., min_length=1, description="Column holding the values to convert")
    direction: Direction = Field(..., description="Conversion direction")
    output_column: Optional[str] = Field(
        None, min_length=1, description="Name of the new column (derived from column if omitted)"
    )


class ConverterSettings(BaseModel):
    """Top-level settings file.

    Example settings.json:
        {
            "uppercase": false,
            "csv": {
                "input_csv": "chapters.csv",
                "output_csv": "chapters_converted.csv",
                "column": "chapter",
                "direction": "to_integer"
            }
        }
    """

    uppercase: bool = DEFAULT_UPPERCASE
    csv: Optional[CsvSettings] = None


def load_settings(settings_path: str) -> ConverterSettings:
    """Load converter settings from a JSON file.

    Args:
        settings_path: Path to the settings JSON file

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the file isn't valid JSON or doesn't match
                                  the settings model
    """
    settings_path = Path(settings_path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    ta = TypeAdapter(ConverterSettings)
    return ta.validate_json(settings_path.read_bytes())


def display_text(numeral: Numeral, uppercase: bool = DEFAULT_UPPERCASE) -> str:
    """Render a numeral's text in the requested case.

    Numerals are stored uppercase; lowercase output is only applied here, when
    a front end shows the numeral to the user.

    Args:
        numeral: Numeral to render
        uppercase: True for "XIV", False for "xiv"

    Returns:
        The numeral text in the requested case ("" for zero)

    Example:
        >>> display_text(parse_numeral("XIV"), uppercase=False)
        'xiv'
    """
    text = numeral.text()
    return text if uppercase else text.lower()
