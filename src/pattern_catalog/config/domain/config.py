"""Top-level CatalogConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from pattern_catalog.config.domain.context import ContextConfig
from pattern_catalog.config.domain.participants import (
    ChainConfig,
    MediatorConfig,
    ObserverConfig,
)


class CatalogConfig(BaseModel, frozen=True):
    """Root configuration aggregate for the pattern catalog.

    Every field has a default, so ``CatalogConfig()`` is the built-in
    configuration used when no YAML file is given.
    """

    name: str = Field(default="design-patterns", min_length=1)
    version: str = Field(default="1", min_length=1)
    context: ContextConfig = Field(default_factory=ContextConfig)
    observer: ObserverConfig = Field(default_factory=ObserverConfig)
    chain_of_responsibility: ChainConfig = Field(default_factory=ChainConfig)
    mediator: MediatorConfig = Field(default_factory=MediatorConfig)
