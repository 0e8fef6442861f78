"""Proxy — access control and lazy loading in front of a document."""

from typing import Any

from pydantic import TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_ROLE = TypeAdapter(str)


class Document:
    """The real subject; constructing it stands in for an expensive load."""

    def __init__(self, title: str) -> None:
        self.title = title

    def read(self) -> str:
        return f"Reading document: {self.title}"


class DocumentProxy:
    """Only admins get through, and the document is loaded on first granted access."""

    def __init__(self, title: str) -> None:
        self._title = title
        self._document: Document | None = None

    @property
    def loaded(self) -> bool:
        return self._document is not None

    def open(self, role: str) -> list[str]:
        if role != "admin":
            return [f"Access denied for {role}."]
        if self._document is None:
            self._document = Document(title=self._title)
        return [f"Access granted for {role}.", self._document.read()]


class ProxyDemonstration:
    info = PatternInfo(
        pattern_id="proxy",
        title="Proxy",
        category="structural",
        summary="Guard a document behind a proxy that checks roles and loads lazily.",
    )

    def sample_payload(self) -> str:
        return "admin"

    def parse_arguments(self, arguments: list[str]) -> str:
        return " ".join(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        proxy = DocumentProxy(title="Quarterly Report")
        return proxy.open(role=_ROLE.validate_python(payload))
