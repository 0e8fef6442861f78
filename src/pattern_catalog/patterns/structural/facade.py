"""Facade — one call drives the whole home theater."""

from typing import Annotated, Any

from pydantic import Field, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_TITLE = TypeAdapter(Annotated[str, Field(min_length=1)])


class Lights:
    def dim(self, level: int) -> str:
        return f"Dimming lights to {level}%."


class Projector:
    def turn_on(self) -> str:
        return "Turning on projector."


class SoundSystem:
    def set_surround(self) -> str:
        return "Setting sound to surround mode."


class MediaPlayer:
    def play(self, title: str) -> str:
        return f"Playing movie: {title}"


class HomeTheaterFacade:
    def __init__(self) -> None:
        self._lights = Lights()
        self._projector = Projector()
        self._sound = SoundSystem()
        self._player = MediaPlayer()

    def watch_movie(self, title: str) -> list[str]:
        return [
            self._lights.dim(level=10),
            self._projector.turn_on(),
            self._sound.set_surround(),
            self._player.play(title=title),
        ]


class FacadeDemonstration:
    info = PatternInfo(
        pattern_id="facade",
        title="Facade",
        category="structural",
        summary="Start a movie night through one simple home-theater call.",
    )

    def sample_payload(self) -> str:
        return "Inception"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        return HomeTheaterFacade().watch_movie(title=_TITLE.validate_python(payload))
