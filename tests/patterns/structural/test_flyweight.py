"""Tests for the forest flyweight demonstration."""

from pattern_catalog.patterns.structural.flyweight import (
    FlyweightDemonstration,
    Forest,
    TreeTypeFactory,
)


class TestTreeTypeFactory:
    def test_same_species_shares_instance(self) -> None:
        factory = TreeTypeFactory()
        first, created_first = factory.get("Oak")
        second, created_second = factory.get("Oak")

        assert first is second
        assert created_first is True
        assert created_second is False
        assert len(factory) == 1


class TestForest:
    def test_trees_reference_shared_type(self) -> None:
        forest = Forest()
        forest.plant("Birch")
        forest.plant("Birch")

        assert forest.trees[0].tree_type is forest.trees[1].tree_type
        assert (forest.trees[0].x, forest.trees[1].x) == (1, 2)


class TestFlyweightDemonstration:
    def test_sample_trace(self) -> None:
        demo = FlyweightDemonstration()
        assert demo.demonstrate(demo.sample_payload()) == [
            "Planted Oak #1 (new type).",
            "Planted Pine #2 (new type).",
            "Planted Oak #3 (shared type).",
            "Trees: 3, tree types: 2",
        ]
