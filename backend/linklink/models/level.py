"""Level data models and structures."""
from dataclasses import dataclass
from typing import Dict, Any, List
from enum import Enum


class LayoutPattern(str, Enum):
    """Board shape patterns, cycled by level number."""
    FULL = "full"          # Full rectangle
    RING = "ring"          # Hollow interior
    CONCAVE = "concave"    # Notch cut from the top middle
    STRIPES = "stripes"    # Holes every other row on odd columns
    CORNERS = "corners"    # Corners removed

    @classmethod
    def for_level(cls, level: int) -> "LayoutPattern":
        """Get pattern for a 1-based level number."""
        return _PATTERN_CYCLE[(level - 1) % len(_PATTERN_CYCLE)]


_PATTERN_CYCLE = [
    LayoutPattern.FULL,
    LayoutPattern.RING,
    LayoutPattern.CONCAVE,
    LayoutPattern.STRIPES,
    LayoutPattern.CORNERS,
]


@dataclass
class LevelConfig:
    """Board parameters for a single level."""
    rows: int
    cols: int
    time_seconds: int = 0
    types_count: int = 12
    score_threshold: int = 0

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "time_seconds": self.time_seconds,
            "types_count": self.types_count,
            "score_threshold": self.score_threshold,
        }


@dataclass
class SimulationResult:
    """Result of level auto-play simulation."""
    clear_rate: float
    avg_moves: float
    min_moves: int
    max_moves: int
    avg_shuffles: float
    iterations: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "clear_rate": round(self.clear_rate, 3),
            "avg_moves": round(self.avg_moves, 2),
            "min_moves": self.min_moves,
            "max_moves": self.max_moves,
            "avg_shuffles": round(self.avg_shuffles, 2),
            "iterations": self.iterations,
        }


# Tile type pool, a level uses the first types_count entries
TILE_POOL: List[str] = [f"mon_{i + 1}" for i in range(64)]

# Points per matched pair, used for the par score of a level
BASE_SCORE = 10
