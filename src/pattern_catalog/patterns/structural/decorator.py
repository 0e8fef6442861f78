"""Decorator — add-ons wrap a coffee, each adding to its description and cost."""

from typing import Any, Literal, Protocol

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type AddOnKind = Literal["milk", "sugar", "whipped_cream"]

_ADD_ONS = TypeAdapter(list[AddOnKind])

# label, price
_MENU: dict[AddOnKind, tuple[str, float]] = {
    "milk": ("milk", 0.50),
    "sugar": ("sugar", 0.20),
    "whipped_cream": ("whipped cream", 0.70),
}


class Coffee(Protocol):
    def description(self) -> str: ...

    def cost(self) -> float: ...


class SimpleCoffee:
    def description(self) -> str:
        return "Simple coffee"

    def cost(self) -> float:
        return 2.00


class AddOn:
    """Wraps another coffee and extends what it reports."""

    def __init__(self, coffee: Coffee, label: str, price: float) -> None:
        self._coffee = coffee
        self._label = label
        self._price = price

    def description(self) -> str:
        return f"{self._coffee.description()}, {self._label}"

    def cost(self) -> float:
        return self._coffee.cost() + self._price


def decorate(coffee: Coffee, kind: AddOnKind) -> Coffee:
    label, price = _MENU[kind]
    return AddOn(coffee=coffee, label=label, price=price)


class DecoratorDemonstration:
    info = PatternInfo(
        pattern_id="decorator",
        title="Decorator",
        category="structural",
        summary="Wrap a simple coffee in add-ons that extend its description and cost.",
    )

    def sample_payload(self) -> list[str]:
        return ["milk", "sugar"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        coffee: Coffee = SimpleCoffee()
        for kind in _ADD_ONS.validate_python(payload):
            coffee = decorate(coffee=coffee, kind=kind)
        return [f"Coffee: {coffee.description()}", f"Cost: {coffee.cost():.2f}"]
