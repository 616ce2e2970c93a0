"""Available-move search used for hints and deadlock detection."""
from typing import Dict, Iterator, List, Optional, Tuple

from ..models.grid import Coordinate, Grid
from .connectivity import find_connection_path

MatchPair = Tuple[Coordinate, Coordinate]


def _group_by_type(grid: Grid) -> Dict[str, List[Coordinate]]:
    """Non-matched coordinates grouped by type, in first-seen order."""
    groups: Dict[str, List[Coordinate]] = {}
    for coord in grid.occupied_coordinates():
        groups.setdefault(grid.tile(coord).type, []).append(coord)
    return groups


def iter_available_matches(grid: Grid) -> Iterator[MatchPair]:
    """Yield every connectable same-type pair in oracle order."""
    for group in _group_by_type(grid).values():
        if len(group) < 2:
            continue
        for i in range(len(group)):
            for j in range(i + 1, len(group)):
                if find_connection_path(grid, group[i], group[j]) is not None:
                    yield group[i], group[j]


def find_available_match(grid: Grid) -> Optional[MatchPair]:
    """
    Find a legal move on the board.

    Tiles are grouped by type in the order the types first appear
    (row-major); within a group pairs are tried as (i, j) with i < j.

    Args:
        grid: Board to scan.

    Returns:
        First connectable same-type pair, or None when no move exists.
    """
    return next(iter_available_matches(grid), None)


def count_available_matches(grid: Grid) -> int:
    """Number of connectable same-type pairs currently on the board."""
    return sum(1 for _ in iter_available_matches(grid))


def is_deadlocked(grid: Grid) -> bool:
    """True when tiles remain but none of them can be matched."""
    return grid.remaining_count() > 0 and find_available_match(grid) is None
