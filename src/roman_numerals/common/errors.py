"""Exception types raised by the Roman numeral converter.

Both errors derive from ValueError so callers that already guard conversions
with ``except ValueError`` keep working.
"""


class NumeralError(ValueError):
    """Base class for all numeral conversion errors."""


class InvalidFormatError(NumeralError):
    """Raised when text is not a canonical Roman numeral.

    Attributes:
        text: The rejected input
    """

    def __init__(self, text):
        self.text = text
        super().__init__(f"{text!r} is not a valid Roman numeral")


class OutOfRangeError(NumeralError):
    """Raised when an integer cannot be written as a Roman numeral.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Only integers between 0 and 3999 are valid Roman numeral values, got {value!r}")
