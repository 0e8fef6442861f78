"""Structlog implementation of the CatalogObserver port."""

import logging
import sys
from typing import Any

import structlog


class StructlogCatalogObserver:
    """Delegates catalog domain events to structlog.

    Satisfies the CatalogObserver protocol structurally.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._log = logger if logger is not None else structlog.get_logger()

    def demonstration_started(self, pattern_id: str, category: str) -> None:
        self._log.info(
            "catalog.demonstration_started",
            pattern_id=pattern_id,
            category=category,
        )

    def demonstration_completed(
        self, pattern_id: str, num_lines: int, duration_ms: float
    ) -> None:
        self._log.info(
            "catalog.demonstration_completed",
            pattern_id=pattern_id,
            num_lines=num_lines,
            duration_ms=round(duration_ms, 3),
        )

    def unknown_pattern_requested(self, pattern_id: str) -> None:
        self._log.warning("catalog.unknown_pattern_requested", pattern_id=pattern_id)

    def payload_rejected(self, pattern_id: str, reason: str) -> None:
        self._log.warning(
            "catalog.payload_rejected", pattern_id=pattern_id, reason=reason
        )


def stderr_catalog_observer() -> StructlogCatalogObserver:
    """Observer for library callers that never configured structlog.

    Logs warnings and above to stderr; stdout is left to the caller.
    """
    return StructlogCatalogObserver(
        logger=structlog.wrap_logger(
            structlog.PrintLogger(file=sys.stderr),
            wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        )
    )
