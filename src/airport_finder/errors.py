"""Exception types shared across the package."""


class AirportFinderError(Exception):
    """Base class for airport finder errors."""


class SourceError(AirportFinderError):
    """Raised when a data source cannot be read.

    Attributes:
        source: Path or name of the failing source.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class InvalidCategoryError(AirportFinderError, ValueError):
    """Raised for an empty or unknown airport category mask."""
