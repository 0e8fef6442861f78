"""Composite — files and folders answer the same questions."""

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo

_ENTRIES = TypeAdapter(list[str])


class FileEntry(BaseModel, frozen=True):
    path: str = Field(min_length=1)
    size: int = Field(ge=0)


def parse_entry(raw: str) -> FileEntry:
    """Parse ``"path:size"``.

    Raises:
        ValueError: if *raw* has no ``:`` or the size is not a non-negative integer.
    """
    path, separator, size = raw.rpartition(":")
    if not separator:
        raise ValueError(f"entry {raw!r} must look like 'path:size'")
    return FileEntry.model_validate({"path": path, "size": size})


class File:
    def __init__(self, name: str, size: int) -> None:
        self.name = name
        self.size = size

    def total_size(self) -> int:
        return self.size

    def render(self, depth: int = 0) -> list[str]:
        return [f"{'  ' * depth}{self.name} ({self.size} bytes)"]


class Folder:
    def __init__(self, name: str) -> None:
        self.name = name
        self.children: dict[str, File | Folder] = {}

    def total_size(self) -> int:
        return sum(child.total_size() for child in self.children.values())

    def render(self, depth: int = 0) -> list[str]:
        lines = [f"{'  ' * depth}{self.name}/ ({self.total_size()} bytes)"]
        for child in self.children.values():
            lines.extend(child.render(depth + 1))
        return lines

    def add(self, entry: FileEntry) -> None:
        """Add a file, creating intermediate folders along its path.

        Raises:
            ValueError: if the path has an empty segment, or collides with an
                existing file or folder.
        """
        segments = entry.path.strip("/").split("/")
        if "" in segments:
            raise ValueError(f"'{entry.path}' has an empty path segment")
        *folders, file_name = segments
        current = self
        for folder_name in folders:
            child = current.children.setdefault(folder_name, Folder(name=folder_name))
            if not isinstance(child, Folder):
                raise ValueError(f"'{folder_name}' in '{entry.path}' is a file")
            current = child
        if file_name in current.children:
            raise ValueError(f"'{entry.path}' already exists")
        current.children[file_name] = File(name=file_name, size=entry.size)


class CompositeDemonstration:
    info = PatternInfo(
        pattern_id="composite",
        title="Composite",
        category="structural",
        summary="Treat files and folders uniformly when rendering a tree and its sizes.",
    )

    def sample_payload(self) -> list[str]:
        return ["docs/readme.txt:120", "docs/guide.pdf:300", "photo.png:580"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        root = Folder(name="root")
        for raw in _ENTRIES.validate_python(payload):
            root.add(parse_entry(raw))
        return root.render()
