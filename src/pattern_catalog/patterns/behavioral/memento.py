"""Memento — snapshots let an editor roll back without exposing its internals."""

from typing import Any

from pydantic import BaseModel, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_EDITS = TypeAdapter(list[str])


class EditorSnapshot(BaseModel, frozen=True):
    content: str


class Editor:
    def __init__(self) -> None:
        self.content = ""

    def save(self) -> EditorSnapshot:
        return EditorSnapshot(content=self.content)

    def restore(self, snapshot: EditorSnapshot) -> None:
        self.content = snapshot.content


class History:
    """Caretaker — stores snapshots without looking inside them."""

    def __init__(self) -> None:
        self._snapshots: list[EditorSnapshot] = []

    def push(self, snapshot: EditorSnapshot) -> None:
        self._snapshots.append(snapshot)

    def pop(self) -> EditorSnapshot | None:
        return self._snapshots.pop() if self._snapshots else None


class MementoDemonstration:
    info = PatternInfo(
        pattern_id="memento",
        title="Memento",
        category="behavioral",
        summary="Save editor snapshots before each edit and restore the last one.",
    )

    def sample_payload(self) -> list[str]:
        return ["Hello", "Hello, World"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        editor = Editor()
        history = History()
        lines: list[str] = []
        for edit in _EDITS.validate_python(payload):
            history.push(editor.save())
            editor.content = edit
            lines.append(f"Editor content: {editor.content}")

        snapshot = history.pop()
        if snapshot is None:
            return ["Nothing to undo."]
        editor.restore(snapshot)
        lines.append(f"Restored editor content: {editor.content}")
        return lines
