"""Strategy — the payment algorithm is chosen at runtime."""

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, Field

from pattern_catalog.catalog.domain.pattern import PatternInfo

type PaymentMethod = Literal["credit_card", "paypal", "bank_transfer"]


class PaymentRequest(BaseModel, frozen=True):
    amount: float = Field(gt=0, allow_inf_nan=False)
    method: PaymentMethod = "credit_card"


def pay_by_credit_card(amount: float) -> str:
    return f"Paid {amount:.2f} using Credit Card."


def pay_by_paypal(amount: float) -> str:
    return f"Paid {amount:.2f} using PayPal."


def pay_by_bank_transfer(amount: float) -> str:
    return f"Paid {amount:.2f} using Bank Transfer."


STRATEGIES: dict[PaymentMethod, Callable[[float], str]] = {
    "credit_card": pay_by_credit_card,
    "paypal": pay_by_paypal,
    "bank_transfer": pay_by_bank_transfer,
}


class ShoppingCart:
    """Context object — delegates checkout to whichever strategy it is given."""

    def __init__(self, strategy: Callable[[float], str]) -> None:
        self.strategy = strategy

    def checkout(self, amount: float) -> str:
        return self.strategy(amount)


class StrategyDemonstration:
    info = PatternInfo(
        pattern_id="strategy",
        title="Strategy",
        category="behavioral",
        summary="Swap the payment algorithm without changing the cart that uses it.",
    )

    def sample_payload(self) -> dict[str, Any]:
        return {"amount": 100.0, "method": "credit_card"}

    def parse_arguments(self, arguments: list[str]) -> dict[str, Any]:
        # <amount> [method]
        payload: dict[str, Any] = {"amount": arguments[0] if arguments else None}
        if len(arguments) > 1:
            payload["method"] = arguments[1]
        return payload

    def demonstrate(self, payload: Any) -> list[str]:
        request = PaymentRequest.model_validate(payload)
        cart = ShoppingCart(strategy=STRATEGIES[request.method])
        return [cart.checkout(request.amount)]
