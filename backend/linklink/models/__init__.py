"""Data models package.

This package contains the grid model, level parameters, progression
policy and API schemas.
"""
from .grid import (
    Coordinate,
    TileStatus,
    Tile,
    Grid,
)
from .level import (
    LayoutPattern,
    LevelConfig,
    SimulationResult,
    TILE_POOL,
    BASE_SCORE,
)
from .leveling_config import (
    get_level_config,
    generate_level_progression,
    resolve_level_config,
)

__all__ = [
    # Grid model
    "Coordinate",
    "TileStatus",
    "Tile",
    "Grid",
    # Level models
    "LayoutPattern",
    "LevelConfig",
    "SimulationResult",
    "TILE_POOL",
    "BASE_SCORE",
    # Progression
    "get_level_config",
    "generate_level_progression",
    "resolve_level_config",
]
