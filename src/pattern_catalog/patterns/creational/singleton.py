"""Singleton, reworked — one explicitly created AppContext passed to every service.

Instead of a hidden process-wide instance, the context has exactly one
creation point (``create_app_context``) and consumers receive it as an argument.
"""

from typing import Any

from pydantic import BaseModel, TypeAdapter

from pattern_catalog.catalog.domain.pattern import PatternInfo
from pattern_catalog.config.domain.context import ContextConfig

_SERVICE_NAMES = TypeAdapter(list[str])


class AppContext(BaseModel, frozen=True):
    app_name: str
    environment: str


def create_app_context(config: ContextConfig) -> AppContext:
    return AppContext(app_name=config.app_name, environment=config.environment)


class Service:
    def __init__(self, name: str, context: AppContext) -> None:
        self.name = name
        self.context = context

    def describe(self) -> str:
        return (
            f"{self.name} uses context "
            f"{self.context.app_name}/{self.context.environment}."
        )


class SingletonDemonstration:
    info = PatternInfo(
        pattern_id="singleton",
        title="Singleton",
        category="creational",
        summary="Share one application context, created once and passed explicitly.",
    )

    def __init__(self, context: ContextConfig) -> None:
        self._context = create_app_context(config=context)

    def sample_payload(self) -> list[str]:
        return ["Logger", "Database"]

    def parse_arguments(self, arguments: list[str]) -> list[str]:
        return list(arguments)

    def demonstrate(self, payload: Any) -> list[str]:
        services = [
            Service(name=name, context=self._context)
            for name in _SERVICE_NAMES.validate_python(payload)
        ]
        lines = [service.describe() for service in services]
        shared = all(service.context is self._context for service in services)
        lines.append(f"Shared context: {shared}")
        return lines
