"""Level layout generation: shape mask, paired types, shuffled placement."""
import random
from typing import List, Optional

from ..exceptions import InvalidLayoutError
from ..models.grid import Coordinate, Grid, Tile, TileStatus, new_tile_id
from ..models.level import LayoutPattern, LevelConfig, TILE_POOL
from ..utils.helpers import fisher_yates_shuffle
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Shaped patterns need at least this many rows and columns
MIN_PATTERN_SIZE = 4
# Corners lose a second, inner cell beyond this size
INNER_CORNER_SIZE = 5


def get_layout_mask(rows: int, cols: int, level: int) -> List[List[bool]]:
    """
    Build the playable-cell mask for a level.

    Args:
        rows: Board rows.
        cols: Board columns.
        level: 1-based level number, selects the pattern.

    Returns:
        rows x cols matrix, True where a tile may be placed.
    """
    mask = [[True] * cols for _ in range(rows)]

    # Small boards always use the full rectangle
    if rows < MIN_PATTERN_SIZE or cols < MIN_PATTERN_SIZE:
        return mask

    pattern = LayoutPattern.for_level(level)

    if pattern == LayoutPattern.RING:
        for r in range(1, rows - 1):
            for c in range(1, cols - 1):
                mask[r][c] = False

    elif pattern == LayoutPattern.CONCAVE:
        start_c = cols // 3
        end_c = (cols * 2) // 3
        for r in range(rows // 2):
            for c in range(start_c, end_c + 1):
                mask[r][c] = False

    elif pattern == LayoutPattern.STRIPES:
        for c in range(1, cols, 2):
            for r in range(0, rows, 2):
                mask[r][c] = False

    elif pattern == LayoutPattern.CORNERS:
        for r, c in ((0, 0), (0, cols - 1), (rows - 1, 0), (rows - 1, cols - 1)):
            mask[r][c] = False
        if rows > INNER_CORNER_SIZE and cols > INNER_CORNER_SIZE:
            for r, c in ((1, 1), (1, cols - 2), (rows - 2, 1), (rows - 2, cols - 2)):
                mask[r][c] = False

    return mask


def effective_pattern(rows: int, cols: int, level: int) -> LayoutPattern:
    """Pattern actually applied, accounting for the small-board fallback."""
    if rows < MIN_PATTERN_SIZE or cols < MIN_PATTERN_SIZE:
        return LayoutPattern.FULL
    return LayoutPattern.for_level(level)


def collect_slots(mask: List[List[bool]]) -> List[Coordinate]:
    """Mask-true coordinates in row-major order, trimmed to an even count."""
    slots = [
        Coordinate(r, c)
        for r, row in enumerate(mask)
        for c, allowed in enumerate(row)
        if allowed
    ]
    if len(slots) % 2 != 0:
        slots.pop()
    return slots


def assign_pair_types(slot_count: int, types_count: int) -> List[str]:
    """Two tiles per pair, pair i taking pool type i mod types_count."""
    types_count = max(1, min(types_count, len(TILE_POOL)))
    pairs: List[str] = []
    for i in range(slot_count // 2):
        tile_type = TILE_POOL[i % types_count]
        pairs.extend([tile_type, tile_type])
    return pairs


def generate_level(
    config: LevelConfig,
    level: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Generate a playable grid for a level.

    Args:
        config: Board parameters (rows, cols, types_count are used).
        level: 1-based level number, selects the mask pattern.
        rng: Random source for the type shuffle.

    Returns:
        New Grid; slots hold active tiles, all other cells are matched voids.

    Raises:
        InvalidLayoutError: If the mask leaves no slots to fill.
    """
    rows, cols = config.rows, config.cols
    if rows < 1 or cols < 1:
        raise InvalidLayoutError(f"Board must be at least 1x1, got {rows}x{cols}")

    mask = get_layout_mask(rows, cols, level)
    slots = collect_slots(mask)

    if not slots:
        raise InvalidLayoutError(
            f"No valid slots for level {level} on a {rows}x{cols} board"
        )

    pairs = assign_pair_types(len(slots), config.types_count)
    fisher_yates_shuffle(pairs, rng)

    tiles = [[Tile.void(r, c) for c in range(cols)] for r in range(rows)]
    for slot, tile_type in zip(slots, pairs):
        tiles[slot.row][slot.col] = Tile(
            id=new_tile_id(slot.row, slot.col),
            type=tile_type,
            status=TileStatus.ACTIVE,
        )

    logger.debug(
        "Generated level %d: %dx%d, pattern=%s, slots=%d, types=%d",
        level, rows, cols, effective_pattern(rows, cols, level).value,
        len(slots), len(set(pairs)),
    )
    return Grid(tiles)
