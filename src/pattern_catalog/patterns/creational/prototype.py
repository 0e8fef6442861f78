"""Prototype — new objects are deep copies of an existing one."""

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_COLOR = TypeAdapter(str)


class ShapePrototype(BaseModel):
    name: str
    color: str
    tags: list[str] = Field(default_factory=list)

    def clone(self) -> "ShapePrototype":
        """Return a copy that shares no mutable state with this prototype."""
        return self.model_copy(deep=True)

    def describe(self) -> str:
        return f"{self.name}(color={self.color}, tags=[{', '.join(self.tags)}])"


class PrototypeDemonstration:
    info = PatternInfo(
        pattern_id="prototype",
        title="Prototype",
        category="creational",
        summary="Clone a shape and recolour the copy while the original stays intact.",
    )

    def sample_payload(self) -> str:
        return "blue"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        color = _COLOR.validate_python(payload)
        original = ShapePrototype(name="Circle", color="red", tags=["round"])
        before = original.describe()

        copy = original.clone()
        copy.color = color
        copy.tags.append("cloned")

        return [
            f"Original: {before}",
            f"Clone: {copy.describe()}",
            f"Original unchanged: {original.describe() == before}",
        ]
