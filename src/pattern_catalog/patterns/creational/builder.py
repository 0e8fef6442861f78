"""Builder — assemble a computer one part at a time."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.catalog.domain.pattern import PatternInfo


class Computer(BaseModel, frozen=True):
    cpu: str
    ram: str
    storage: str
    gpu: str | None = None

    def describe(self) -> str:
        parts = [f"cpu={self.cpu}", f"ram={self.ram}", f"storage={self.storage}"]
        if self.gpu is not None:
            parts.append(f"gpu={self.gpu}")
        return "Computer: " + ", ".join(parts)


class ComputerSpec(BaseModel):
    """Payload accepted by the builder demonstration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    cpu: str = Field(min_length=1)
    ram: str = Field(min_length=1)
    storage: str = Field(min_length=1)
    gpu: str | None = None


class ComputerBuilder:
    """Fluent builder; ``build`` refuses to produce a computer missing a required part."""

    def __init__(self) -> None:
        self._parts: dict[str, str] = {}

    def with_cpu(self, cpu: str) -> Self:
        self._parts["cpu"] = cpu
        return self

    def with_ram(self, ram: str) -> Self:
        self._parts["ram"] = ram
        return self

    def with_storage(self, storage: str) -> Self:
        self._parts["storage"] = storage
        return self

    def with_gpu(self, gpu: str) -> Self:
        self._parts["gpu"] = gpu
        return self

    def build(self) -> Computer:
        missing = [p for p in ("cpu", "ram", "storage") if p not in self._parts]
        if missing:
            raise ValueError(f"missing parts: {', '.join(missing)}")
        return Computer(**self._parts)


def parse_parts(arguments: list[str]) -> dict[str, str]:
    """Parse ``part=value`` words.

    Raises:
        ValueError: if a word has no ``=``.
    """
    parts: dict[str, str] = {}
    for word in arguments:
        key, separator, value = word.partition("=")
        if not separator:
            raise ValueError(f"expected part=value, got {word!r}")
        parts[key] = value
    return parts


class BuilderDemonstration:
    info = PatternInfo(
        pattern_id="builder",
        title="Builder",
        category="creational",
        summary="Assemble a computer step by step through a fluent builder.",
    )

    def sample_payload(self) -> dict[str, str]:
        return {"cpu": "Intel i7", "ram": "16GB", "storage": "512GB SSD"}

    def parse_arguments(self, arguments: list[str]) -> dict[str, str]:
        return parse_parts(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        spec = ComputerSpec.model_validate(payload)
        builder = (
            ComputerBuilder()
            .with_cpu(spec.cpu)
            .with_ram(spec.ram)
            .with_storage(spec.storage)
        )
        if spec.gpu is not None:
            builder.with_gpu(spec.gpu)
        return [builder.build().describe()]
