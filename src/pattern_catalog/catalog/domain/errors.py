"""Error types raised by the pattern catalog."""

from pattern_catalog.core.errors import PatternCatalogError


class UnknownPatternError(PatternCatalogError):
    """Raised when a pattern identifier is not in the catalog."""

    def __init__(self, pattern_id: str) -> None:
        self.pattern_id = pattern_id
        super().__init__(
            f"Failed to run demonstration: unknown pattern '{pattern_id}'"
        )


class InvalidPayloadError(PatternCatalogError):
    """Raised when a payload does not have the shape a demonstration accepts."""

    def __init__(self, pattern_id: str, reason: str) -> None:
        self.pattern_id = pattern_id
        super().__init__(
            f"Failed to run demonstration '{pattern_id}': invalid input: {reason}"
        )
