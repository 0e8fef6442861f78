"""Adapter — a Fahrenheit sensor made to fit a Celsius interface."""

from typing import Annotated, Any, Protocol

from pydantic import Field, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_READING = TypeAdapter(Annotated[float, Field(allow_inf_nan=False)])


class CelsiusThermometer(Protocol):
    def read_celsius(self) -> float: ...


class FahrenheitSensor:
    """Legacy device with an incompatible interface."""

    def __init__(self, reading: float) -> None:
        self._reading = reading

    def read_fahrenheit(self) -> float:
        return self._reading


class FahrenheitToCelsiusAdapter:
    def __init__(self, sensor: FahrenheitSensor) -> None:
        self._sensor = sensor

    def read_celsius(self) -> float:
        return (self._sensor.read_fahrenheit() - 32) * 5 / 9


def report(thermometer: CelsiusThermometer) -> str:
    return f"Adapted reading: {thermometer.read_celsius():.1f}°C"


class AdapterDemonstration:
    info = PatternInfo(
        pattern_id="adapter",
        title="Adapter",
        category="structural",
        summary="Read a legacy Fahrenheit sensor through a Celsius interface.",
    )

    def sample_payload(self) -> float:
        return 98.6

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        sensor = FahrenheitSensor(reading=_READING.validate_python(payload))
        return [
            f"Sensor reading: {sensor.read_fahrenheit():.1f}°F",
            report(FahrenheitToCelsiusAdapter(sensor=sensor)),
        ]
