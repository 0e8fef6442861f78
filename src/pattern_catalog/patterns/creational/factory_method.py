"""Factory method — each logistics subclass decides which transport to create."""

from typing import Any, Literal, Protocol

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type LogisticsKind = Literal["road", "sea"]

_KIND = TypeAdapter(LogisticsKind)


class Transport(Protocol):
    name: str

    def deliver(self) -> str: ...


class Truck:
    name = "Truck"

    def deliver(self) -> str:
        return "Delivering by land in a box."


class Ship:
    name = "Ship"

    def deliver(self) -> str:
        return "Delivering by sea in a container."


class Logistics:
    def create_transport(self) -> Transport:
        raise NotImplementedError

    def plan_delivery(self) -> list[str]:
        transport = self.create_transport()
        return [f"Logistics created {transport.name}.", transport.deliver()]


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def make_logistics(kind: LogisticsKind) -> Logistics:
    match kind:
        case "road":
            return RoadLogistics()
        case "sea":
            return SeaLogistics()


class FactoryMethodDemonstration:
    info = PatternInfo(
        pattern_id="factory_method",
        title="Factory Method",
        category="creational",
        summary="Let road and sea logistics each create their own kind of transport.",
    )

    def sample_payload(self) -> str:
        return "road"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        return make_logistics(_KIND.validate_python(payload)).plan_delivery()
