"""Main entry point for the Roman numeral converter."""
import sys
import argparse

from .common.config import ConverterSettings, display_text, load_settings
from .convert_csv import convert_csv_column
from .encoder import numeral_from_value
from .numeral import parse_numeral


def print_menu(settings: ConverterSettings):
    """Print the main menu."""
    case = "uppercase" if settings.uppercase else "lowercase"
    print("\n=== Roman Numeral Converter ===\n")
    print("1. Convert Roman numeral to integer")
    print("2. Convert integer to Roman numeral")
    print("3. Convert CSV column")
    print(f"4. Toggle output case (currently {case})")
    print("0. Exit")


def run_numeral_to_integer(settings: ConverterSettings):
    """Read a numeral and print its integer value."""
    print("\n--- Roman numeral to integer ---")

    try:
        text = input("Roman numeral: ").strip()
        numeral = parse_numeral(text)
        print(f"{display_text(numeral, settings.uppercase)} = {numeral.value()}")
    except ValueError as e:
        print(f"Error: {e}")
    except (KeyboardInterrupt, EOFError):
        sys.exit(0)


def run_integer_to_numeral(settings: ConverterSettings):
    """Read an integer and print its numeral."""
    print("\n--- Integer to Roman numeral ---")

    try:
        text = input("Integer (0-3999): ").strip()
        value = int(text)
        numeral = numeral_from_value(value)
        print(f"{value} = {display_text(numeral, settings.uppercase)}")
    except ValueError as e:
        print(f"Error: {e}")
    except (KeyboardInterrupt, EOFError):
        sys.exit(0)


def run_convert_csv(settings: ConverterSettings):
    """Run the CSV column conversion configured in the settings file."""
    print("\n--- Convert CSV column ---")

    if settings.csv is None:
        print("Error: no 'csv' section in the settings file")
        return

    try:
        csv_settings = settings.csv
        output_file = convert_csv_column(
            str(csv_settings.input_csv),
            str(csv_settings.output_csv),
            csv_settings.column,
            csv_settings.direction,
            output_column=csv_settings.output_column,
            uppercase=settings.uppercase,
        )
        print(f"Success! Created: {output_file}")
    except (ValueError, OSError) as e:
        print(f"Error: {e}")


def toggle_case(settings: ConverterSettings) -> ConverterSettings:
    """Return settings with the output case flipped."""
    settings = settings.model_copy(update={"uppercase": not settings.uppercase})
    print(f"Numerals will be shown in {'uppercase' if settings.uppercase else 'lowercase'}")
    return settings


def main():
    """Main menu for the converter."""
    parser = argparse.ArgumentParser(description='Roman Numeral Converter')
    parser.add_argument('--config', help='Path to settings JSON file')
    args = parser.parse_args()

    settings = ConverterSettings()
    if args.config:
        try:
            settings = load_settings(args.config)
            print(f"Loaded settings from: {args.config}")
        except (ValueError, OSError) as e:
            print(f"Error loading settings: {e}")
            sys.exit(1)

    while True:
        print_menu(settings)
        try:
            choice = input("\nEnter your choice (0-4): ").strip()
        except (KeyboardInterrupt, EOFError):
            sys.exit(0)

        if choice == "0":
            sys.exit(0)
        elif choice == "1":
            run_numeral_to_integer(settings)
        elif choice == "2":
            run_integer_to_numeral(settings)
        elif choice == "3":
            run_convert_csv(settings)
        elif choice == "4":
            settings = toggle_case(settings)
        else:
            print("Invalid choice. Please try again.")


if __name__ == "__main__":
    main()
