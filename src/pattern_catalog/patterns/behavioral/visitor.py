"""Visitor — operations over a closed set of shapes, dispatched by one match."""

import math
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo


class Circle(BaseModel, frozen=True):
    kind: Literal["circle"] = "circle"
    radius: float = Field(gt=0)


class Rectangle(BaseModel, frozen=True):
    kind: Literal["rectangle"] = "rectangle"
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class Square(BaseModel, frozen=True):
    kind: Literal["square"] = "square"
    side: float = Field(gt=0)


Shape = Annotated[Circle | Rectangle | Square, Field(discriminator="kind")]

_SHAPES = TypeAdapter(list[Shape])


def area(shape: Circle | Rectangle | Square) -> float:
    match shape:
        case Circle(radius=radius):
            return math.pi * radius**2
        case Rectangle(width=width, height=height):
            return width * height
        case Square(side=side):
            return side**2


def parse_shape(word: str) -> dict[str, str]:
    """Parse ``circle:R``, ``rectangle:WxH`` or ``square:S``.

    Raises:
        ValueError: for an unknown shape kind.
    """
    kind, _, dimensions = word.partition(":")
    match kind:
        case "circle":
            return {"kind": kind, "radius": dimensions}
        case "square":
            return {"kind": kind, "side": dimensions}
        case "rectangle":
            width, _, height = dimensions.partition("x")
            return {"kind": kind, "width": width, "height": height}
        case _:
            raise ValueError(f"unknown shape '{kind}'")


class VisitorDemonstration:
    info = PatternInfo(
        pattern_id="visitor",
        title="Visitor",
        category="behavioral",
        summary="Compute areas over circles, rectangles and squares without touching them.",
    )

    def sample_payload(self) -> list[dict[str, Any]]:
        return [
            {"kind": "circle", "radius": 1.0},
            {"kind": "rectangle", "width": 2.0, "height": 3.0},
            {"kind": "square", "side": 2.0},
        ]

    def parse_arguments(self, arguments: list[str]) -> list[dict[str, str]]:
        return [parse_shape(word) for word in arguments]

    def demonstrate(self, payload: Any) -> list[str]:
        shapes = _SHAPES.validate_python(payload)
        lines = [f"{shape.kind.title()} area: {area(shape):.2f}" for shape in shapes]
        lines.append(f"Total area: {sum(area(shape) for shape in shapes):.2f}")
        return lines
