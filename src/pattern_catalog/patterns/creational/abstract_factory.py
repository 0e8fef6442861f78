"""Abstract factory — families of matching widgets from one factory."""

from typing import Any, Literal, Protocol

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

type WidgetFamily = Literal["windows", "mac"]

_FAMILY = TypeAdapter(WidgetFamily)


class Widget(Protocol):
    def render(self) -> str: ...


class WidgetFactory(Protocol):
    def create_button(self) -> Widget: ...

    def create_checkbox(self) -> Widget: ...


class WindowsButton:
    def render(self) -> str:
        return "Rendering Windows button."


class WindowsCheckbox:
    def render(self) -> str:
        return "Rendering Windows checkbox."


class MacButton:
    def render(self) -> str:
        return "Rendering Mac button."


class MacCheckbox:
    def render(self) -> str:
        return "Rendering Mac checkbox."


class WindowsFactory:
    def create_button(self) -> Widget:
        return WindowsButton()

    def create_checkbox(self) -> Widget:
        return WindowsCheckbox()


class MacFactory:
    def create_button(self) -> Widget:
        return MacButton()

    def create_checkbox(self) -> Widget:
        return MacCheckbox()


def make_factory(family: WidgetFamily) -> WidgetFactory:
    match family:
        case "windows":
            return WindowsFactory()
        case "mac":
            return MacFactory()


def render_dialog(factory: WidgetFactory) -> list[str]:
    """Client code — only ever talks to the factory and widget protocols."""
    return [factory.create_button().render(), factory.create_checkbox().render()]


class AbstractFactoryDemonstration:
    info = PatternInfo(
        pattern_id="abstract_factory",
        title="Abstract Factory",
        category="creational",
        summary="Render a dialog whose widgets all come from one platform family.",
    )

    def sample_payload(self) -> str:
        return "windows"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        return render_dialog(make_factory(_FAMILY.validate_python(payload)))
