"""Flyweight — trees share one immutable TreeType per species."""

from typing import Any

from pydantic import BaseModel, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_SPECIES = TypeAdapter(list[str])


class TreeType(BaseModel, frozen=True):
    """Intrinsic state shared by every tree of a species."""

    species: str
    texture: str


class TreeTypeFactory:
    def __init__(self) -> None:
        self._types: dict[str, TreeType] = {}

    def __len__(self) -> int:
        return len(self._types)

    def get(self, species: str) -> tuple[TreeType, bool]:
        """Return the shared type for *species* and whether it was just created."""
        existing = self._types.get(species)
        if existing is not None:
            return existing, False
        tree_type = TreeType(species=species, texture=f"{species.lower()}-bark.png")
        self._types[species] = tree_type
        return tree_type, True


class Tree(BaseModel, frozen=True):
    """Extrinsic state — position only, plus a reference to the shared type."""

    x: int
    y: int
    tree_type: TreeType


class Forest:
    def __init__(self) -> None:
        self.trees: list[Tree] = []
        self.factory = TreeTypeFactory()

    def plant(self, species: str) -> str:
        tree_type, created = self.factory.get(species)
        number = len(self.trees) + 1
        self.trees.append(Tree(x=number, y=number, tree_type=tree_type))
        kind = "new type" if created else "shared type"
        return f"Planted {species} #{number} ({kind})."


class FlyweightDemonstration:
    info = PatternInfo(
        pattern_id="flyweight",
        title="Flyweight",
        category="structural",
        summary="Plant many trees while sharing one tree type per species.",
    )

    def sample_payload(self) -> list[str]:
        return ["Oak", "Pine", "Oak"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        forest = Forest()
        lines = [forest.plant(species) for species in _SPECIES.validate_python(payload)]
        lines.append(f"Trees: {len(forest.trees)}, tree types: {len(forest.factory)}")
        return lines
