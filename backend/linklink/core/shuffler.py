"""Board re-randomization: redistribute types over occupied cells."""
import random
from typing import Optional

from ..exceptions import DeadlockError
from ..models.grid import Grid, TileStatus, new_tile_id
from ..utils.helpers import fisher_yates_shuffle, resolve_rng
from ..utils.logger import get_logger
from .solver import find_available_match

logger = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 20


def shuffle_tiles(grid: Grid, rng: Optional[random.Random] = None) -> Grid:
    """
    Permute tile types across the currently occupied coordinates.

    Occupied cells stay occupied and matched cells stay matched; only the
    type labels move. Selected tiles become active and every moved tile
    gets a fresh id. The result may be deadlocked.

    Args:
        grid: Board to shuffle. Not modified.
        rng: Random source.

    Returns:
        New shuffled Grid.
    """
    new_grid = grid.copy()
    coords = new_grid.occupied_coordinates()
    types = [new_grid.tile(coord).type for coord in coords]

    for coord in coords:
        tile = new_grid.tile(coord)
        if tile.status == TileStatus.SELECTED:
            tile.status = TileStatus.ACTIVE

    fisher_yates_shuffle(types, rng)

    for coord, tile_type in zip(coords, types):
        tile = new_grid.tile(coord)
        tile.type = tile_type
        tile.id = new_tile_id(coord.row, coord.col)

    return new_grid


def shuffle_until_solvable(
    grid: Grid,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Grid:
    """
    Shuffle until the board has at least one legal move.

    Args:
        grid: Board to shuffle. Not modified.
        rng: Random source shared by all attempts.
        max_attempts: Number of shuffles to try.

    Returns:
        Shuffled Grid with a legal move (or an empty board, returned as is).

    Raises:
        DeadlockError: If every attempt produced a deadlocked board.
    """
    rng = resolve_rng(rng)

    if grid.remaining_count() == 0:
        return shuffle_tiles(grid, rng)

    for attempt in range(1, max_attempts + 1):
        shuffled = shuffle_tiles(grid, rng)
        if find_available_match(shuffled) is not None:
            if attempt > 1:
                logger.info("Found a solvable shuffle after %d attempts", attempt)
            return shuffled

    logger.warning(
        "No solvable shuffle in %d attempts (%d tiles remaining)",
        max_attempts, grid.remaining_count(),
    )
    raise DeadlockError(f"No solvable shuffle found in {max_attempts} attempts")
