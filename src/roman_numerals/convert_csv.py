"""Convert a column of a CSV file between Roman numerals and integers.

This module reads a CSV file, converts every cell of one column in the chosen
direction and writes the result to a new column placed right after the
original one. Typical inputs are chapter or section listings where numbering
is written as Roman numerals (i, ii, iii or I, II, III).

Blank cells stay blank. Cells that cannot be converted are reported with a
warning and left blank so a single bad row doesn't stop the batch.
"""
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from .common.config import DEFAULT_UPPERCASE, Direction, display_text
from .common.progress import ProgressPrinter
from .common.validators import validate_csv_file
from .encoder import numeral_from_value
from .numeral import parse_numeral


def default_output_column(column: str, direction: Direction) -> str:
    """Name of the converted column when none is given (e.g., "chapter_integer")."""
    suffix = "integer" if direction == Direction.TO_INTEGER else "numeral"
    return f"{column}_{suffix}"


def convert_cell(cell: str, direction: Direction, uppercase: bool = DEFAULT_UPPERCASE) -> Union[int, str]:
    """Convert a single CSV cell.

    Args:
        cell: Raw cell text (e.g., "xiv" or "14")
        direction: Conversion direction
        uppercase: Output case for numerals

    Returns:
        The integer value (TO_INTEGER) or numeral text (TO_NUMERAL). Blank
        cells return an empty string.

    Raises:
        ValueError: If the cell is not a valid numeral or integer in range
    """
    cell = cell.strip()
    if not cell:
        return ""

    if direction == Direction.TO_INTEGER:
        return parse_numeral(cell).value()

    try:
        value = int(cell)
    except ValueError:
        raise ValueError(f"{cell!r} is not an integer")
    return display_text(numeral_from_value(value), uppercase)


def convert_csv_column(input_csv: str, output_csv: str, column: str, direction: Direction,
                       output_column: Optional[str] = None, uppercase: bool = DEFAULT_UPPERCASE) -> str:
    """Convert one column of a CSV file and write the result to a new CSV.

    Args:
        input_csv: Path to the CSV file to read
        output_csv: Path for the output CSV file (parent folders are created)
        column: Name of the column to convert
        direction: Direction.TO_INTEGER or Direction.TO_NUMERAL
        output_column: Name of the new column; defaults to "<column>_integer"
                       or "<column>_numeral"
        uppercase: Output case for numerals (TO_NUMERAL only)

    Returns:
        str: Path to the written CSV file

    Raises:
        ValueError: If the input is not a CSV file or the column is missing

    Example:
        Input chapters.csv:
            title,chapter
            Intro,i
            Methods,iv

        convert_csv_column("chapters.csv", "out.csv", "chapter", Direction.TO_INTEGER)
        writes:
            title,chapter,chapter_integer
            Intro,i,1
            Methods,iv,4
    """
    input_path = Path(input_csv)
    output_path = Path(output_csv)
    direction = Direction(direction)

    validate_csv_file(input_path, "Input CSV file")

    # Read everything as text so numerals and integers both arrive untouched
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)

    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {input_path}")

    if output_column is None:
        output_column = default_output_column(column, direction)

    converted: List[Union[int, str]] = []
    failed = 0
    progress = ProgressPrinter("Converting rows", len(df))

    for i, cell in enumerate(df[column]):
        progress.update(i + 1)
        try:
            converted.append(convert_cell(cell, direction, uppercase))
        except ValueError as e:
            print(f"Warning: Row {i + 1}: {e}")
            converted.append("")
            failed += 1

    progress.done()

    if output_column in df.columns:
        df[output_column] = converted
    else:
        df.insert(df.columns.get_loc(column) + 1, output_column, converted)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    print(f"Created {output_path} with {len(df)} rows ({failed} could not be converted)")
    return str(output_path)
