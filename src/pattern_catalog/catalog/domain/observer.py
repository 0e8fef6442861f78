"""Observer port for the catalog domain — defines events in domain language."""

from typing import Protocol


class CatalogObserver(Protocol):
    """Observer port emitting structured events while running demonstrations.

    Implementations may log to structlog or record for tests.
    """

    def demonstration_started(self, pattern_id: str, category: str) -> None: ...

    def demonstration_completed(
        self, pattern_id: str, num_lines: int, duration_ms: float
    ) -> None: ...

    def unknown_pattern_requested(self, pattern_id: str) -> None: ...

    def payload_rejected(self, pattern_id: str, reason: str) -> None: ...
