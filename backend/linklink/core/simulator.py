"""Level auto-play simulation: hint, match, reshuffle on deadlock."""
import random
import statistics
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..exceptions import DeadlockError
from ..models.grid import Grid
from ..models.level import LevelConfig, SimulationResult
from ..utils.helpers import resolve_rng
from ..utils.logger import get_logger
from .board import is_cleared, match_pair
from .generator import generate_level
from .shuffler import shuffle_until_solvable
from .solver import find_available_match, iter_available_matches

logger = get_logger(__name__)


class SimulationStrategy(str, Enum):
    """Simulation strategy enumeration."""
    FIRST = "first"    # Always take the hint
    RANDOM = "random"  # Pick uniformly among all legal moves


@dataclass
class GameState:
    """Represents the current state of a simulated game."""
    grid: Grid
    moves_used: int = 0
    shuffles_used: int = 0
    cleared: bool = False
    failed: bool = False  # Deadlock that could not be shuffled away


class LevelSimulator:
    """Plays generated levels to estimate how often they can be cleared."""

    DEFAULT_MAX_SHUFFLES = 3
    SHUFFLE_ATTEMPTS = 20

    def simulate(
        self,
        config: LevelConfig,
        level: int,
        iterations: int = 20,
        strategy: str = "first",
        max_shuffles: int = DEFAULT_MAX_SHUFFLES,
        rng: Optional[random.Random] = None,
    ) -> SimulationResult:
        """
        Generate and play a level repeatedly.

        Args:
            config: Board parameters.
            level: 1-based level number.
            iterations: Number of boards to play.
            strategy: Move choice (first/random).
            max_shuffles: Reshuffles allowed per game on deadlock.
            rng: Random source for generation, move choice and shuffles.

        Returns:
            SimulationResult with statistics.
        """
        rng = resolve_rng(rng)
        strategy = SimulationStrategy(strategy)
        results: List[GameState] = []

        for _ in range(iterations):
            state = GameState(grid=generate_level(config, level, rng))
            results.append(self._play_game(state, strategy, max_shuffles, rng))

        cleared_count = sum(1 for r in results if r.cleared)
        moves_list = [r.moves_used for r in results]
        shuffles_list = [r.shuffles_used for r in results]

        logger.info(
            "Simulated level %d x%d (%s): clear rate %.2f",
            level, iterations, strategy.value,
            cleared_count / len(results) if results else 0,
        )

        return SimulationResult(
            clear_rate=cleared_count / len(results) if results else 0.0,
            avg_moves=statistics.mean(moves_list) if moves_list else 0.0,
            min_moves=min(moves_list) if moves_list else 0,
            max_moves=max(moves_list) if moves_list else 0,
            avg_shuffles=statistics.mean(shuffles_list) if shuffles_list else 0.0,
            iterations=iterations,
        )

    def _play_game(
        self,
        state: GameState,
        strategy: SimulationStrategy,
        max_shuffles: int,
        rng: random.Random,
    ) -> GameState:
        """Play until the board is cleared or stuck."""
        while not is_cleared(state.grid):
            move = self._select_move(state.grid, strategy, rng)

            if move is None:
                if state.shuffles_used >= max_shuffles:
                    state.failed = True
                    break
                state.shuffles_used += 1
                try:
                    state.grid = shuffle_until_solvable(state.grid, rng, self.SHUFFLE_ATTEMPTS)
                except DeadlockError:
                    state.failed = True
                    break
                continue

            state.grid = match_pair(state.grid, *move).grid
            state.moves_used += 1

        state.cleared = not state.failed and is_cleared(state.grid)
        return state

    def _select_move(self, grid: Grid, strategy: SimulationStrategy, rng: random.Random):
        if strategy == SimulationStrategy.RANDOM:
            moves = list(iter_available_matches(grid))
            return rng.choice(moves) if moves else None
        return find_available_match(grid)


# Singleton instance
_simulator = None


def get_simulator() -> LevelSimulator:
    """Get or create simulator singleton instance."""
    global _simulator
    if _simulator is None:
        _simulator = LevelSimulator()
    return _simulator
