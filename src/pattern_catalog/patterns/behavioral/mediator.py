"""Mediator — participants talk only through the chat room."""

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_MESSAGES = TypeAdapter(list[str])


class ChatMessage(BaseModel, frozen=True):
    sender: str = Field(min_length=1)
    text: str


def parse_message(raw: str) -> ChatMessage:
    """Parse ``"sender: text"`` into a ChatMessage.

    Raises:
        ValueError: if *raw* has no ``:`` separator.
    """
    sender, separator, text = raw.partition(":")
    if not separator:
        raise ValueError(f"message {raw!r} must look like 'sender: text'")
    return ChatMessage(sender=sender.strip(), text=text.strip())


class ChatRoom:
    """Routes each message to every participant except its sender."""

    def __init__(self, participants: list[str]) -> None:
        self._participants = list(participants)

    def send(self, message: ChatMessage) -> list[str]:
        if message.sender not in self._participants:
            raise ValueError(f"'{message.sender}' is not in the chat room")
        return [
            f"{name} received from {message.sender}: {message.text}"
            for name in self._participants
            if name != message.sender
        ]


class MediatorDemonstration:
    info = PatternInfo(
        pattern_id="mediator",
        title="Mediator",
        category="behavioral",
        summary="Route chat messages through a room instead of between users directly.",
    )

    def __init__(self, participants: list[str]) -> None:
        self._participants = participants

    def sample_payload(self) -> list[str]:
        return ["Alice: Hi everyone!", "Bob: Hello Alice!"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        messages = [parse_message(raw) for raw in _MESSAGES.validate_python(payload)]
        room = ChatRoom(participants=self._participants)
        lines: list[str] = []
        for message in messages:
            lines.extend(room.send(message))
        return lines
