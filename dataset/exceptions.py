"""
Exceptions raised while loading the flight dataset
"""


class DatasetError(Exception):
    """Raised when the dataset cannot be turned into a usable flight network."""

    pass


class DatasetNotFoundError(DatasetError):
    """Raised when the configured dataset file does not exist."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Flights dataset not found at: {location}")


class MissingSectionError(DatasetError):
    """Raised when the dataset lacks a required top-level array."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Dataset missing '{section}' array")
