"""Template method — a fixed recipe with steps filled in by subclasses."""

from typing import Any, Literal

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type BeverageKind = Literal["tea", "coffee"]

_KIND = TypeAdapter(BeverageKind)


class Beverage:
    """Defines the preparation skeleton; subclasses supply brew and condiments."""

    def prepare(self) -> list[str]:
        return [
            "Boiling water.",
            self.brew(),
            "Pouring into cup.",
            self.add_condiments(),
        ]

    def brew(self) -> str:
        raise NotImplementedError

    def add_condiments(self) -> str:
        raise NotImplementedError


class Tea(Beverage):
    def brew(self) -> str:
        return "Steeping the tea."

    def add_condiments(self) -> str:
        return "Adding lemon."


class Coffee(Beverage):
    def brew(self) -> str:
        return "Dripping coffee through filter."

    def add_condiments(self) -> str:
        return "Adding sugar and milk."


def make_beverage(kind: BeverageKind) -> Beverage:
    match kind:
        case "tea":
            return Tea()
        case "coffee":
            return Coffee()


class TemplateMethodDemonstration:
    info = PatternInfo(
        pattern_id="template_method",
        title="Template Method",
        category="behavioral",
        summary="Prepare tea or coffee with one shared recipe and two specialised steps.",
    )

    def sample_payload(self) -> str:
        return "tea"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        return make_beverage(_KIND.validate_python(payload)).prepare()
