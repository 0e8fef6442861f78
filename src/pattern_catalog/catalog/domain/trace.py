"""DemonstrationTrace — the ordered lines a demonstration prints."""

from pydantic import BaseModel

from pattern_catalog.catalog.domain.pattern import PatternId


class DemonstrationTrace(BaseModel, frozen=True):
    """Output of running one demonstration with one payload."""

    pattern_id: PatternId
    lines: list[str]
