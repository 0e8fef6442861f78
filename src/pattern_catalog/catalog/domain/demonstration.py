"""Demonstration Protocol — structural interface for every pattern demonstration."""

from typing import Any, Protocol

from pattern_catalog.catalog.domain.pattern import PatternInfo


class Demonstration(Protocol):
    """A runnable, side-effect free illustration of one design pattern.

    ``parse_arguments`` and ``demonstrate`` raise ``ValueError`` (including
    ``pydantic.ValidationError``) when the input has the wrong shape.
    """

    @property
    def info(self) -> PatternInfo: ...

    def sample_payload(self) -> Any:
        """Return the documented sample input."""
        ...

    def parse_arguments(self, arguments: list[str]) -> Any:
        """Turn command-line words into a payload for ``demonstrate``."""
        ...

    def demonstrate(self, payload: Any) -> list[str]: ...
