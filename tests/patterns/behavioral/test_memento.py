"""Tests for the editor memento demonstration."""

from pattern_catalog.patterns.behavioral.memento import (
    Editor,
    History,
    MementoDemonstration,
)


class TestEditorSnapshots:
    def test_restore_returns_saved_content(self) -> None:
        editor = Editor()
        editor.content = "draft"
        snapshot = editor.save()
        editor.content = "final"

        editor.restore(snapshot)

        assert editor.content == "draft"

    def test_empty_history_pops_none(self) -> None:
        assert History().pop() is None


class TestMementoDemonstration:
    def test_sample_trace(self) -> None:
        demo = MementoDemonstration()
        assert demo.demonstrate(demo.sample_payload()) == [
            "Editor content: Hello",
            "Editor content: Hello, World",
            "Restored editor content: Hello",
        ]

    def test_single_edit_restores_empty_content(self) -> None:
        assert MementoDemonstration().demonstrate(["Only"]) == [
            "Editor content: Only",
            "Restored editor content: ",
        ]

    def test_no_edits(self) -> None:
        assert MementoDemonstration().demonstrate([]) == ["Nothing to undo."]
