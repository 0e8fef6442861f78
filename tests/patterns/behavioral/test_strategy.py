"""Tests for the payment strategy demonstration."""

import pytest
from pydantic import ValidationError

from pattern_catalog.patterns.behavioral.strategy import (
    STRATEGIES,
    ShoppingCart,
    StrategyDemonstration,
)


class TestShoppingCart:
    def test_strategy_can_be_swapped(self) -> None:
        cart = ShoppingCart(strategy=STRATEGIES["credit_card"])
        assert cart.checkout(10) == "Paid 10.00 using Credit Card."

        cart.strategy = STRATEGIES["bank_transfer"]
        assert cart.checkout(10) == "Paid 10.00 using Bank Transfer."


class TestStrategyDemonstration:
    def test_sample_trace(self) -> None:
        demo = StrategyDemonstration()
        assert demo.demonstrate(demo.sample_payload()) == ["Paid 100.00 using Credit Card."]

    def test_method_defaults_to_credit_card(self) -> None:
        assert StrategyDemonstration().demonstrate({"amount": 5}) == [
            "Paid 5.00 using Credit Card."
        ]

    def test_parse_arguments(self) -> None:
        demo = StrategyDemonstration()
        payload = demo.parse_arguments(["19.99", "paypal"])

        assert demo.demonstrate(payload) == ["Paid 19.99 using PayPal."]

    def test_non_positive_amount_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StrategyDemonstration().demonstrate({"amount": 0})

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StrategyDemonstration().demonstrate({"amount": 1, "method": "barter"})

    @pytest.mark.parametrize("amount", ["inf", float("inf"), "nan"])
    def test_non_finite_amount_rejected(self, amount: object) -> None:
        with pytest.raises(ValidationError):
            StrategyDemonstration().demonstrate({"amount": amount})
