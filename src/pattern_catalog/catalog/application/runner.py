"""DemonstrationRunner — resolves a pattern, validates its input, and collects the trace."""

import time
from typing import Any

from pydantic import ValidationError

from pattern_catalog.catalog.domain.catalog import PatternCatalog
from pattern_catalog.catalog.domain.demonstration import Demonstration
from pattern_catalog.catalog.domain.errors import (
    InvalidPayloadError,
    UnknownPatternError,
)
from pattern_catalog.catalog.domain.observer import CatalogObserver
from pattern_catalog.catalog.domain.trace import DemonstrationTrace
from pattern_catalog.catalog.infrastructure.observer import stderr_catalog_observer
from pattern_catalog.catalog.infrastructure.registry import create_catalog
from pattern_catalog.config.domain.config import CatalogConfig


class DemonstrationRunner:
    """Runs demonstrations from a catalog and reports each run to an observer.

    Nothing is produced for a request that fails: an unknown identifier or a
    rejected payload raises before any trace exists.
    """

    def __init__(self, catalog: PatternCatalog, observer: CatalogObserver) -> None:
        self._catalog = catalog
        self._observer = observer

    def run(self, pattern_id: str, payload: Any = None) -> DemonstrationTrace:
        """Run *pattern_id* with *payload*, or with its sample input when payload is None.

        Raises:
            UnknownPatternError: if *pattern_id* is not in the catalog.
            InvalidPayloadError: if the demonstration rejects *payload*.
        """
        demonstration = self._resolve(pattern_id=pattern_id)
        if payload is None:
            payload = demonstration.sample_payload()
        return self._demonstrate(demonstration=demonstration, payload=payload)

    def run_arguments(self, pattern_id: str, arguments: list[str]) -> DemonstrationTrace:
        """Run *pattern_id* with a payload parsed from command-line words.

        An empty argument list means the sample input.
        """
        demonstration = self._resolve(pattern_id=pattern_id)
        if not arguments:
            payload = demonstration.sample_payload()
        else:
            try:
                payload = demonstration.parse_arguments(arguments)
            except ValueError as exc:
                raise self._reject(pattern_id=pattern_id, exc=exc) from exc
        return self._demonstrate(demonstration=demonstration, payload=payload)

    def run_all(self) -> list[DemonstrationTrace]:
        """Run every demonstration with its sample input, in catalog order."""
        return [self.run(pattern_id=info.pattern_id) for info in self._catalog.infos()]

    def _resolve(self, pattern_id: str) -> Demonstration:
        try:
            return self._catalog.get(pattern_id)
        except UnknownPatternError:
            self._observer.unknown_pattern_requested(pattern_id=pattern_id)
            raise

    def _demonstrate(
        self, demonstration: Demonstration, payload: Any
    ) -> DemonstrationTrace:
        info = demonstration.info
        self._observer.demonstration_started(
            pattern_id=info.pattern_id, category=info.category
        )
        started_at = time.perf_counter()
        try:
            lines = demonstration.demonstrate(payload)
        except ValueError as exc:
            # pydantic.ValidationError is a ValueError too.
            raise self._reject(pattern_id=info.pattern_id, exc=exc) from exc
        duration_ms = (time.perf_counter() - started_at) * 1000

        self._observer.demonstration_completed(
            pattern_id=info.pattern_id,
            num_lines=len(lines),
            duration_ms=duration_ms,
        )
        return DemonstrationTrace(pattern_id=info.pattern_id, lines=lines)

    def _reject(self, pattern_id: str, exc: ValueError) -> InvalidPayloadError:
        reason = _describe(exc)
        self._observer.payload_rejected(pattern_id=pattern_id, reason=reason)
        return InvalidPayloadError(pattern_id=pattern_id, reason=reason)


def _describe(exc: ValueError) -> str:
    """Collapse a (possibly multi-error) ValidationError into one line."""
    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'input'}: {error['msg']}"
            for error in exc.errors()
        )
    return str(exc)


def run(
    pattern_id: str,
    payload: Any = None,
    config: CatalogConfig | None = None,
    observer: CatalogObserver | None = None,
) -> list[str]:
    """Return the demonstration trace lines for *pattern_id*.

    Uses the built-in configuration unless given another. Without an observer,
    warnings are logged to stderr and nothing is written to stdout.

    Raises:
        UnknownPatternError: if *pattern_id* is not a known pattern.
        InvalidPayloadError: if *payload* has the wrong shape.
    """
    runner = DemonstrationRunner(
        catalog=create_catalog(config=config or CatalogConfig()),
        observer=observer or stderr_catalog_observer(),
    )
    return runner.run(pattern_id=pattern_id, payload=payload).lines
