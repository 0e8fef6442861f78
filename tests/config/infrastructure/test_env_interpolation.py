"""Tests for recursive ${ENV_VAR} interpolation."""

import pytest

from pattern_catalog.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)


class TestCollectMissingVars:
    def test_no_references_returns_empty(self) -> None:
        assert collect_missing_vars({"name": "plain", "items": [1, 2.5, True, None]}) == []

    def test_collects_from_nested_structures(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("FIRST_MISSING", raising=False)
        monkeypatch.delenv("SECOND_MISSING", raising=False)
        data = {"a": {"b": ["${FIRST_MISSING}"]}, "c": "x-${SECOND_MISSING}-y"}

        assert collect_missing_vars(data) == ["FIRST_MISSING", "SECOND_MISSING"]

    def test_each_missing_var_reported_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REPEATED", raising=False)
        assert collect_missing_vars(["${REPEATED}", "${REPEATED}"]) == ["REPEATED"]

    def test_set_vars_are_not_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PRESENT", "yes")
        assert collect_missing_vars({"value": "${PRESENT}"}) == []


class TestInterpolate:
    def test_substitutes_inside_strings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        assert interpolate("env-${ENVIRONMENT}") == "env-staging"

    def test_substitutes_recursively(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USER_A", "Ana")
        data = {"observer": {"subscribers": ["${USER_A}", "Ben"]}}

        assert interpolate(data) == {"observer": {"subscribers": ["Ana", "Ben"]}}

    def test_non_string_scalars_pass_through(self) -> None:
        assert interpolate({"n": 3, "f": 1.5, "b": False, "none": None}) == {
            "n": 3,
            "f": 1.5,
            "b": False,
            "none": None,
        }

    def test_several_references_in_one_string(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APP", "catalog")
        monkeypatch.setenv("STAGE", "dev")
        data = [{"name": "${APP}-${STAGE}"}, "${STAGE}"]

        assert interpolate(data) == [{"name": "catalog-dev"}, "dev"]

    def test_input_is_not_mutated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USER_A", "Ana")
        data = {"subscribers": ["${USER_A}"]}

        interpolate(data)

        assert data == {"subscribers": ["${USER_A}"]}
