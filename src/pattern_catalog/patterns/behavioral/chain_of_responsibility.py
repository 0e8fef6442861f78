"""Chain of responsibility — a request travels along handlers until one accepts it."""

from typing import Any

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo
from pattern_catalog.config.domain.participants import HandlerName

_REQUEST = TypeAdapter(str)


class Handler:
    """Handles requests naming its role and forwards everything else."""

    def __init__(self, role: HandlerName, successor: "Handler | None" = None) -> None:
        self.role = role
        self.successor = successor

    def handle(self, request: str) -> list[str]:
        if request == self.role:
            return [f"Request handled by {self.role.title()}."]
        if self.successor is None:
            return []
        return self.successor.handle(request)


def build_chain(roles: list[HandlerName]) -> Handler:
    """Link one handler per role so that ``roles[0]`` sees every request first."""
    head: Handler | None = None
    for role in reversed(roles):
        head = Handler(role=role, successor=head)
    if head is None:
        raise ValueError("a chain needs at least one handler")
    return head


class ChainOfResponsibilityDemonstration:
    info = PatternInfo(
        pattern_id="chain_of_responsibility",
        title="Chain of Responsibility",
        category="behavioral",
        summary="Pass a request along a chain of handlers until one of them handles it.",
    )

    def __init__(self, handlers: list[HandlerName]) -> None:
        self._chain = build_chain(roles=handlers)

    def sample_payload(self) -> str:
        return "admin"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        return self._chain.handle(_REQUEST.validate_python(payload))
