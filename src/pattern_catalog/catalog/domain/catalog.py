"""PatternCatalog — lookup table from pattern identifier to demonstration."""

from pattern_catalog.catalog.domain.demonstration import Demonstration
from pattern_catalog.catalog.domain.errors import UnknownPatternError
from pattern_catalog.catalog.domain.pattern import (
    CATEGORIES,
    PatternCategory,
    PatternInfo,
)


class PatternCatalog:
    """Holds one demonstration per pattern identifier."""

    def __init__(self, demonstrations: list[Demonstration]) -> None:
        self._demonstrations: dict[str, Demonstration] = {}
        for demonstration in demonstrations:
            pattern_id = demonstration.info.pattern_id
            if pattern_id in self._demonstrations:
                raise ValueError(f"duplicate demonstration for '{pattern_id}'")
            self._demonstrations[pattern_id] = demonstration

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._demonstrations

    def __len__(self) -> int:
        return len(self._demonstrations)

    def get(self, pattern_id: str) -> Demonstration:
        """Return the demonstration registered under *pattern_id*.

        Raises:
            UnknownPatternError: if no demonstration has that identifier.
        """
        try:
            return self._demonstrations[pattern_id]
        except KeyError:
            raise UnknownPatternError(pattern_id=pattern_id) from None

    def infos(self, category: PatternCategory | None = None) -> list[PatternInfo]:
        """Return pattern metadata ordered by category, then identifier."""
        infos = [d.info for d in self._demonstrations.values()]
        if category is not None:
            infos = [i for i in infos if i.category == category]
        return sorted(
            infos, key=lambda i: (CATEGORIES.index(i.category), i.pattern_id)
        )
