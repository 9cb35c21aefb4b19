"""
csv2table exceptions

The parser never raises; these are raised by the conversion service and
turned into HTTP errors by the API routes.
"""


class Csv2TableError(Exception):
    """Base exception for csv2table"""
    pass


class ConversionError(Csv2TableError):
    """A conversion could not produce output; the message is shown to the user"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(ConversionError):
    """No CSV text was submitted"""

    def __init__(self, message: str = "Please enter CSV data"):
        super().__init__(message)


class NoDataError(ConversionError):
    """The input parsed to an empty table"""

    def __init__(self, message: str = "No valid data to display"):
        super().__init__(message)
