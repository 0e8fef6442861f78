"""Tests for defaults and validation constraints on config domain models."""

import pytest
from pydantic import ValidationError

from pattern_catalog.config.domain.config import CatalogConfig
from pattern_catalog.config.domain.context import ContextConfig
from pattern_catalog.config.domain.participants import (
    ChainConfig,
    MediatorConfig,
    ObserverConfig,
)


class TestCatalogConfigDefaults:
    """CatalogConfig() is a complete built-in configuration."""

    def test_default_name_and_version(self) -> None:
        cfg = CatalogConfig()
        assert cfg.name == "design-patterns"
        assert cfg.version == "1"

    def test_default_subscribers(self) -> None:
        assert CatalogConfig().observer.subscribers == ["User1", "User2"]

    def test_default_handlers(self) -> None:
        assert CatalogConfig().chain_of_responsibility.handlers == ["admin", "moderator"]

    def test_default_participants(self) -> None:
        assert CatalogConfig().mediator.participants == ["Alice", "Bob", "Charlie"]

    def test_default_context(self) -> None:
        cfg = CatalogConfig()
        assert cfg.context.app_name == "pattern-catalog"
        assert cfg.context.environment == "development"

    def test_config_is_frozen(self) -> None:
        cfg = CatalogConfig()
        with pytest.raises(ValidationError):
            cfg.name = "changed"  # type: ignore[misc]


class TestCatalogConfigConstraints:
    def test_empty_name_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            CatalogConfig(name="")

    def test_empty_version_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            CatalogConfig(version="")


class TestContextConfigConstraints:
    def test_empty_app_name_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ContextConfig(app_name="")

    def test_empty_environment_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ContextConfig(environment="")


class TestObserverConfigConstraints:
    def test_empty_subscribers_is_valid(self) -> None:
        assert ObserverConfig(subscribers=[]).subscribers == []

    def test_duplicate_subscribers_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError, match="User1"):
            ObserverConfig(subscribers=["User1", "User2", "User1"])


class TestChainConfigConstraints:
    def test_empty_handlers_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ChainConfig(handlers=[])

    def test_unknown_handler_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ChainConfig(handlers=["admin", "janitor"])  # type: ignore[list-item]

    def test_duplicate_handlers_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ChainConfig(handlers=["admin", "admin"])

    def test_single_handler_is_valid(self) -> None:
        assert ChainConfig(handlers=["moderator"]).handlers == ["moderator"]


class TestMediatorConfigConstraints:
    def test_empty_participants_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            MediatorConfig(participants=[])

    def test_duplicate_participants_raise_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            MediatorConfig(participants=["Alice", "Alice"])
