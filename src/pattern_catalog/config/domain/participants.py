"""Participant lists for the configurable demonstrations."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

type HandlerName = Literal["admin", "moderator"]


def _reject_duplicates(names: list[str]) -> list[str]:
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"duplicate names: {', '.join(duplicates)}")
    return names


class ObserverConfig(BaseModel, frozen=True):
    """Subscribers registered with the publisher, in subscription order."""

    subscribers: list[str] = Field(default_factory=lambda: ["User1", "User2"])

    @field_validator("subscribers")
    @classmethod
    def _unique_subscribers(cls, value: list[str]) -> list[str]:
        return _reject_duplicates(value)


class ChainConfig(BaseModel, frozen=True):
    """Handler order for the chain of responsibility — first handler sees requests first."""

    handlers: list[HandlerName] = Field(
        default_factory=lambda: ["admin", "moderator"], min_length=1
    )

    @field_validator("handlers")
    @classmethod
    def _unique_handlers(cls, value: list[HandlerName]) -> list[HandlerName]:
        return _reject_duplicates(value)


class MediatorConfig(BaseModel, frozen=True):
    """Members of the chat room."""

    participants: list[str] = Field(
        default_factory=lambda: ["Alice", "Bob", "Charlie"], min_length=1
    )

    @field_validator("participants")
    @classmethod
    def _unique_participants(cls, value: list[str]) -> list[str]:
        return _reject_duplicates(value)
