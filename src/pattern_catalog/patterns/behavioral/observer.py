"""Observer — a publisher pushes every message to its subscribers."""

from typing import Any

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_MESSAGES = TypeAdapter(list[str])


class Subscriber:
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, message: str) -> str:
        return f"{self.name} received message: {message}"


class Publisher:
    """Keeps subscribers in subscription order and notifies each of them."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def notify(self, message: str) -> list[str]:
        return [subscriber.update(message) for subscriber in self._subscribers]


class ObserverDemonstration:
    info = PatternInfo(
        pattern_id="observer",
        title="Observer",
        category="behavioral",
        summary="Notify every registered subscriber when the publisher has news.",
    )

    def __init__(self, subscribers: list[str]) -> None:
        self._subscribers = subscribers

    def sample_payload(self) -> list[str]:
        return ["New update available!"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        messages = _MESSAGES.validate_python(payload)
        publisher = Publisher()
        for name in self._subscribers:
            publisher.subscribe(Subscriber(name=name))

        lines: list[str] = []
        for message in messages:
            lines.extend(publisher.notify(message))
        return lines
