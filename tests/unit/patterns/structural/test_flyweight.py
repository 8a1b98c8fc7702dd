"""Tests for the flyweight pattern."""

import random

from pattern_catalog.domain.patterns.structural.flyweight import (
    CharacterFactory,
    Forest,
    ParticleSystem,
    Position,
    TextDocument,
)


class TestCharacterFlyweights:
    """Test glyph sharing."""

    def test_same_key_returns_same_instance(self):
        """Test identical intrinsic state is shared."""
        factory = CharacterFactory()

        first = factory.get_character("a", "Arial", "Bold")
        second = factory.get_character("a", "Arial", "Bold")
        other = factory.get_character("a", "Arial", "Regular")

        assert first is second
        assert other is not first
        assert factory.created_count == 2

    def test_document_shares_glyphs(self):
        """Test repeated characters reuse flyweights."""
        document = TextDocument()
        for index, char in enumerate("aaab"):
            document.add_character(char, Position(index, 0), 12, "black")

        assert document.statistics() == (4, 2)
        assert document.characters[0].flyweight is document.characters[1].flyweight
        assert document.render()[3] == "'b' at (3,0) size:12 color:black font:Arial-Regular"


class TestParticleSystem:
    """Test shared particle types."""

    def test_types_are_shared_across_particles(self):
        """Test particle count exceeds type count."""
        system = ParticleSystem(random.Random(1))

        system.create_explosion(Position(0, 0), 100)

        count, types = system.statistics()
        assert count == 100
        assert types <= len(ParticleSystem.TYPES) * len(ParticleSystem.COLORS)

    def test_particles_expire(self):
        """Test particles die once their alpha reaches zero."""
        system = ParticleSystem(random.Random(1))
        system.create_explosion(Position(0, 0), 10)

        assert system.update(1.0) == 10
        for _ in range(3):
            system.update(1.0)
        assert system.update(1.0) == 0


class TestForest:
    """Test tree type sharing and reproducibility."""

    def test_tree_types_are_bounded(self):
        """Test many trees share at most 64 types."""
        forest = Forest(random.Random(3))

        forest.plant_random_forest(500)

        trees, types = forest.statistics()
        assert trees == 500
        assert types <= 64

    def test_same_seed_same_forest(self):
        """Test a seeded forest is reproducible."""
        first = Forest(random.Random(42))
        second = Forest(random.Random(42))

        first.plant_random_forest(20)
        second.plant_random_forest(20)

        assert [t.render() for t in first.trees] == [t.render() for t in second.trees]

    def test_planted_trees_share_type(self):
        """Test explicit planting reuses types."""
        forest = Forest(random.Random(0))

        oak1 = forest.plant_tree(0, 0, "Oak", "Green", "Round")
        oak2 = forest.plant_tree(5, 5, "Oak", "Green", "Round")

        assert oak1.type is oak2.type
        assert forest.factory.list_types() == ["Oak (Green Round)"]
