"""Tests for the widget abstract factory demonstration."""

import pytest
from pydantic import ValidationError

from pattern_catalog.patterns.creational.abstract_factory import (
    AbstractFactoryDemonstration,
)


class TestAbstractFactoryDemonstration:
    def test_windows_family(self) -> None:
        assert AbstractFactoryDemonstration().demonstrate("windows") == [
            "Rendering Windows button.",
            "Rendering Windows checkbox.",
        ]

    def test_mac_family(self) -> None:
        assert AbstractFactoryDemonstration().demonstrate("mac") == [
            "Rendering Mac button.",
            "Rendering Mac checkbox.",
        ]

    def test_unknown_family_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AbstractFactoryDemonstration().demonstrate("linux")
