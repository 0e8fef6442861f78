"""Command — requests become objects that a remote can execute and undo."""

from typing import Any, Literal, Protocol

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type Button = Literal["on", "off", "undo"]

_BUTTONS = TypeAdapter(list[Button])


class Light:
    def __init__(self) -> None:
        self.is_on = False

    def switch(self, on: bool) -> str:
        self.is_on = on
        return "Light is ON." if on else "Light is OFF."


class Command(Protocol):
    def execute(self) -> str: ...

    def undo(self) -> str: ...


class SwitchLightCommand:
    """Turns the light on or off, remembering the previous state for undo."""

    def __init__(self, light: Light, on: bool) -> None:
        self._light = light
        self._on = on
        self._was_on = light.is_on

    def execute(self) -> str:
        self._was_on = self._light.is_on
        return self._light.switch(on=self._on)

    def undo(self) -> str:
        return self._light.switch(on=self._was_on)


class RemoteControl:
    """Invoker keeping a history of executed commands."""

    def __init__(self) -> None:
        self._history: list[Command] = []

    def press(self, command: Command) -> str:
        self._history.append(command)
        return command.execute()

    def undo(self) -> str:
        if not self._history:
            return "Nothing to undo."
        return self._history.pop().undo()


class CommandDemonstration:
    info = PatternInfo(
        pattern_id="command",
        title="Command",
        category="behavioral",
        summary="Wrap light switching in command objects that can be undone.",
    )

    def sample_payload(self) -> list[str]:
        return ["on", "off", "undo"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        buttons = _BUTTONS.validate_python(payload)
        light = Light()
        remote = RemoteControl()
        lines: list[str] = []
        for button in buttons:
            match button:
                case "on":
                    lines.append(remote.press(SwitchLightCommand(light=light, on=True)))
                case "off":
                    lines.append(remote.press(SwitchLightCommand(light=light, on=False)))
                case "undo":
                    lines.append(remote.undo())
        return lines
