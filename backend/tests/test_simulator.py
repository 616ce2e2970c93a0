"""Tests for level auto-play simulation."""
import random

import pytest
from linklink.core.simulator import LevelSimulator, get_simulator
from linklink.models.level import LevelConfig


@pytest.fixture
def simulator():
    """Create simulator instance."""
    return LevelSimulator()


class TestLevelSimulator:
    """Test cases for LevelSimulator."""

    def test_single_type_board_always_clears(self, simulator):
        config = LevelConfig(rows=2, cols=2, types_count=1)
        result = simulator.simulate(config, 1, iterations=5, rng=random.Random(1))

        assert result.clear_rate == 1.0
        assert result.min_moves == 2
        assert result.max_moves == 2
        assert result.avg_shuffles == 0

    def test_result_ranges(self, simulator):
        config = LevelConfig(rows=6, cols=6, types_count=8)
        result = simulator.simulate(config, 1, iterations=5, rng=random.Random(2))

        assert result.iterations == 5
        assert 0 <= result.clear_rate <= 1
        assert 0 <= result.min_moves <= result.max_moves <= 18
        assert result.avg_shuffles <= LevelSimulator.DEFAULT_MAX_SHUFFLES

    def test_random_strategy(self, simulator):
        config = LevelConfig(rows=4, cols=4, types_count=4)
        result = simulator.simulate(
            config, 1, iterations=5, strategy="random", rng=random.Random(3)
        )

        assert 0 <= result.clear_rate <= 1
        assert result.max_moves <= 8

    def test_cleared_games_match_every_pair(self, simulator):
        config = LevelConfig(rows=4, cols=4, types_count=2)
        result = simulator.simulate(config, 1, iterations=10, rng=random.Random(4))

        if result.clear_rate == 1.0:
            assert result.min_moves == result.max_moves == 8

    def test_invalid_strategy(self, simulator):
        config = LevelConfig(rows=2, cols=2, types_count=1)

        with pytest.raises(ValueError):
            simulator.simulate(config, 1, iterations=1, strategy="optimal")

    def test_seeded_simulation_is_reproducible(self, simulator):
        config = LevelConfig(rows=6, cols=6, types_count=6)
        first = simulator.simulate(config, 2, iterations=3, rng=random.Random(11))
        second = simulator.simulate(config, 2, iterations=3, rng=random.Random(11))

        assert first.to_dict() == second.to_dict()

    def test_result_to_dict(self, simulator):
        config = LevelConfig(rows=2, cols=2, types_count=1)
        data = simulator.simulate(config, 1, iterations=2, rng=random.Random(1)).to_dict()

        assert set(data) == {
            "clear_rate", "avg_moves", "min_moves", "max_moves", "avg_shuffles", "iterations",
        }

    def test_singleton_simulator(self):
        """Test that get_simulator returns singleton."""
        assert get_simulator() is get_simulator()
