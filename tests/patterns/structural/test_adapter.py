"""Tests for the Fahrenheit-to-Celsius adapter demonstration."""

import pytest
from pydantic import ValidationError

from pattern_catalog.patterns.structural.adapter import (
    AdapterDemonstration,
    FahrenheitSensor,
    FahrenheitToCelsiusAdapter,
)


class TestFahrenheitToCelsiusAdapter:
    def test_converts_freezing_point(self) -> None:
        adapter = FahrenheitToCelsiusAdapter(sensor=FahrenheitSensor(reading=32))
        assert adapter.read_celsius() == 0


class TestAdapterDemonstration:
    def test_sample_trace(self) -> None:
        demo = AdapterDemonstration()
        assert demo.demonstrate(demo.sample_payload()) == [
            "Sensor reading: 98.6°F",
            "Adapted reading: 37.0°C",
        ]

    def test_parsed_argument(self) -> None:
        demo = AdapterDemonstration()
        assert demo.demonstrate(demo.parse_arguments(["212"])) == [
            "Sensor reading: 212.0°F",
            "Adapted reading: 100.0°C",
        ]

    def test_non_numeric_reading_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AdapterDemonstration().demonstrate("warm")

    @pytest.mark.parametrize("reading", ["nan", "inf", "-inf", float("nan")])
    def test_non_finite_reading_rejected(self, reading: object) -> None:
        with pytest.raises(ValidationError):
            AdapterDemonstration().demonstrate(reading)
