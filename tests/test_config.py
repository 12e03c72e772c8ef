"""Tests for settings loading and output case."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from roman_numerals.common.config import ConverterSettings, Direction, display_text, load_settings
from roman_numerals.numeral import parse_numeral


class TestLoadSettings:
    """JSON settings file"""

    def test_full_settings(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "uppercase": False,
            "csv": {
                "input_csv": "chapters.csv",
                "output_csv": "out/chapters.csv",
                "column": "chapter",
                "direction": "to_integer",
            },
        }))

        settings = load_settings(str(path))

        assert settings.uppercase is False
        assert settings.csv.input_csv == Path("chapters.csv")
        assert settings.csv.direction == Direction.TO_INTEGER
        assert settings.csv.output_column is None

    def test_empty_object_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{}")
        settings = load_settings(str(path))
        assert settings.csv is None
        assert settings.uppercase == ConverterSettings().uppercase

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(str(tmp_path / "missing.json"))

    def test_invalid_direction(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "csv": {"input_csv": "a.csv", "output_csv": "b.csv", "column": "n", "direction": "up"},
        }))
        with pytest.raises(ValidationError):
            load_settings(str(path))

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError):
            load_settings(str(path))


class TestDisplayText:
    """Case is applied only when rendering"""

    def test_uppercase(self) -> None:
        assert display_text(parse_numeral("xiv"), uppercase=True) == "XIV"

    def test_lowercase(self) -> None:
        numeral = parse_numeral("XIV")
        assert display_text(numeral, uppercase=False) == "xiv"
        assert numeral.text() == "XIV"

    def test_zero(self) -> None:
        assert display_text(parse_numeral(""), uppercase=False) == ""
