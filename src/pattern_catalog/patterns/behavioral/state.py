"""State — an order's behaviour depends on its current status."""

from typing import Any, Literal

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type OrderStatus = Literal["placed", "shipped", "delivered"]
type Transition = Literal["next", "previous"]

_TRANSITIONS = TypeAdapter(list[Transition])

_ANNOUNCEMENTS: dict[OrderStatus, str] = {
    "placed": "Order placed.",
    "shipped": "Order shipped.",
    "delivered": "Order delivered.",
}


class Order:
    """Order moving through Placed -> Shipped -> Delivered.

    Both ends are terminal: ``advance`` at Delivered and ``revert`` at Placed
    leave the status unchanged.
    """

    def __init__(self) -> None:
        self.status: OrderStatus = "placed"

    def announce(self) -> str:
        return _ANNOUNCEMENTS[self.status]

    def advance(self) -> str:
        match self.status:
            case "placed":
                self.status = "shipped"
            case "shipped":
                self.status = "delivered"
            case "delivered":
                return "Order already delivered."
        return self.announce()

    def revert(self) -> str:
        match self.status:
            case "placed":
                return "Order has not been shipped yet."
            case "shipped":
                self.status = "placed"
            case "delivered":
                self.status = "shipped"
        return self.announce()


class StateDemonstration:
    info = PatternInfo(
        pattern_id="state",
        title="State",
        category="behavioral",
        summary="Let an order change its behaviour as its status moves forward or back.",
    )

    def sample_payload(self) -> list[str]:
        return ["next", "next", "next"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        transitions = _TRANSITIONS.validate_python(payload)
        order = Order()
        lines = [order.announce()]
        for transition in transitions:
            lines.append(order.advance() if transition == "next" else order.revert())
        return lines
