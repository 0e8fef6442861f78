"""Pattern identifiers, categories, and the metadata describing each demonstration."""

from typing import Literal, get_args

from pydantic import BaseModel, Field

PatternCategory = Literal["behavioral", "creational", "structural"]

PatternId = Literal[
    # behavioral
    "chain_of_responsibility",
    "command",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "state",
    "strategy",
    "template_method",
    "visitor",
    # creational
    "abstract_factory",
    "builder",
    "factory_method",
    "prototype",
    "singleton",
    # structural
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "facade",
    "flyweight",
    "proxy",
]

PATTERN_IDS: tuple[str, ...] = get_args(PatternId)
CATEGORIES: tuple[str, ...] = get_args(PatternCategory)


class PatternInfo(BaseModel, frozen=True):
    """Catalog entry describing one pattern demonstration."""

    pattern_id: PatternId
    title: str = Field(min_length=1)
    category: PatternCategory
    summary: str = Field(min_length=1)
