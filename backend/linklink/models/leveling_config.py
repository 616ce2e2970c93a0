"""
Level progression policy.

Levels come in cycles of ten. The first cycle grows the board from 8x6 to
10x7; later cycles alternate between 9x7 and 10x6. Type variety grows by
four per cycle and by one every two levels inside a cycle, and the time
budget per tile shrinks for the first five cycles.
"""
import math
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .level import LevelConfig, TILE_POOL, BASE_SCORE


LEVELS_PER_CYCLE = 10
BASE_TYPES_COUNT = 12
TYPES_PER_CYCLE = 4
MIN_TIME_SECONDS = 25

# (exclusive upper step, rows, cols) for the first cycle
FIRST_CYCLE_SIZES: List[Tuple[int, int, int]] = [
    (2, 8, 6),    # Lv 1-2: 48 tiles
    (5, 8, 7),    # Lv 3-5: 56 tiles
    (8, 8, 8),    # Lv 6-8: 64 tiles
    (10, 10, 7),  # Lv 9-10: 70 tiles, tall grid
]

# Later cycles alternate by step parity
LATER_CYCLE_SIZES: Dict[int, Tuple[int, int]] = {
    0: (9, 7),
    1: (10, 6),
}


def _time_budget(rows: int, cols: int, cycle: int) -> int:
    time_per_tile = 2.0 - min(cycle, 5) * 0.1
    return max(MIN_TIME_SECONDS, math.floor(rows * cols * time_per_tile))


def _board_size(cycle: int, step: int) -> Tuple[int, int]:
    if cycle >= 1:
        return LATER_CYCLE_SIZES[step % 2]
    for upper, rows, cols in FIRST_CYCLE_SIZES:
        if step < upper:
            return rows, cols
    return FIRST_CYCLE_SIZES[-1][1], FIRST_CYCLE_SIZES[-1][2]


def get_level_config(level: int) -> LevelConfig:
    """
    Get the board parameters for a level.

    Args:
        level: 1-based level number.

    Returns:
        LevelConfig for the level.

    Raises:
        ValueError: If level is below 1.
    """
    if level < 1:
        raise ValueError(f"Level must be >= 1, got {level}")

    cycle = (level - 1) // LEVELS_PER_CYCLE
    step = (level - 1) % LEVELS_PER_CYCLE

    rows, cols = _board_size(cycle, step)

    types_count = min(len(TILE_POOL), BASE_TYPES_COUNT + cycle * TYPES_PER_CYCLE + step // 2)

    score_threshold = int(rows * cols * BASE_SCORE / 2)

    return LevelConfig(
        rows=rows,
        cols=cols,
        time_seconds=_time_budget(rows, cols, cycle),
        types_count=types_count,
        score_threshold=score_threshold,
    )


def generate_level_progression(start_level: int = 1, count: int = 10) -> List[LevelConfig]:
    """Get configs for a run of consecutive levels."""
    return [get_level_config(level) for level in range(start_level, start_level + count)]


def resolve_level_config(
    level: int,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    types_count: Optional[int] = None,
) -> LevelConfig:
    """Progression config for a level with optional board overrides."""
    config = get_level_config(level)
    if rows is None and cols is None and types_count is None:
        return config

    rows = rows if rows is not None else config.rows
    cols = cols if cols is not None else config.cols
    return replace(
        config,
        rows=rows,
        cols=cols,
        time_seconds=_time_budget(rows, cols, (level - 1) // LEVELS_PER_CYCLE),
        types_count=types_count if types_count is not None else config.types_count,
        score_threshold=int(rows * cols * BASE_SCORE / 2),
    )
