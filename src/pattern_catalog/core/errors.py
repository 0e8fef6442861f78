"""Base exception class for all pattern-catalog errors."""


class PatternCatalogError(Exception):
    """Base class for all pattern-catalog errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
