class AmlichError(Exception):
    """Base error."""

class YearNotSupportedError(AmlichError, LookupError):
    """Raised when the year-code table has no entry for a lunar year."""

    def __init__(self, year: int):
        super().__init__(f"Year {year} is not supported")
        self.year = year
