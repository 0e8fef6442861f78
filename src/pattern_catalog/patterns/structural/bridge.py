"""Bridge — remotes and devices vary independently."""

from typing import Any, Literal

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type DeviceKind = Literal["tv", "radio"]

_KIND = TypeAdapter(DeviceKind)


class Device:
    """Implementation side of the bridge."""

    name = "Device"
    initial_volume = 0

    def __init__(self) -> None:
        self.is_enabled = False
        self.volume = self.initial_volume

    def set_power(self, enabled: bool) -> str:
        self.is_enabled = enabled
        return f"{self.name} is now {'ON' if enabled else 'OFF'}."

    def set_volume(self, volume: int) -> str:
        self.volume = max(0, min(100, volume))
        return f"{self.name} volume set to {self.volume}."


class Tv(Device):
    name = "TV"
    initial_volume = 30


class Radio(Device):
    name = "Radio"
    initial_volume = 20


class RemoteControl:
    """Abstraction side of the bridge; works with any Device."""

    def __init__(self, device: Device) -> None:
        self._device = device

    def toggle_power(self) -> list[str]:
        return [
            "Remote: toggling power.",
            self._device.set_power(enabled=not self._device.is_enabled),
        ]

    def volume_up(self) -> list[str]:
        return ["Remote: volume up.", self._device.set_volume(self._device.volume + 10)]


def make_device(kind: DeviceKind) -> Device:
    match kind:
        case "tv":
            return Tv()
        case "radio":
            return Radio()


class BridgeDemonstration:
    info = PatternInfo(
        pattern_id="bridge",
        title="Bridge",
        category="structural",
        summary="Drive a TV or a radio through the same remote control abstraction.",
    )

    def sample_payload(self) -> str:
        return "tv"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        remote = RemoteControl(device=make_device(_KIND.validate_python(payload)))
        return remote.toggle_power() + remote.volume_up()
