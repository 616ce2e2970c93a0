"""Link path search with at most two right-angle turns.

The board is surrounded by one ring of empty space, so two tiles on the
same edge can connect around the outside. Matched tiles count as empty.
"""
from typing import List, Optional

from ..models.grid import Coordinate, Grid

MAX_TURNS = 2


def _horizontal_clear(grid: Grid, row: int, col1: int, col2: int) -> bool:
    """Check cells strictly between col1 and col2 on a row."""
    lo, hi = min(col1, col2), max(col1, col2)
    for c in range(lo + 1, hi):
        if not grid.is_passable((row, c)):
            return False
    return True


def _vertical_clear(grid: Grid, col: int, row1: int, row2: int) -> bool:
    """Check cells strictly between row1 and row2 on a column."""
    lo, hi = min(row1, row2), max(row1, row2)
    for r in range(lo + 1, hi):
        if not grid.is_passable((r, col)):
            return False
    return True


def _zero_turns(grid: Grid, p1: Coordinate, p2: Coordinate) -> bool:
    if p1.row == p2.row:
        return _horizontal_clear(grid, p1.row, p1.col, p2.col)
    if p1.col == p2.col:
        return _vertical_clear(grid, p1.col, p1.row, p2.row)
    return False


def _one_turn(grid: Grid, p1: Coordinate, p2: Coordinate) -> Optional[Coordinate]:
    """Return the corner joining p1 and p2 with a single turn, if any."""
    corner = Coordinate(p1.row, p2.col)
    if grid.is_passable(corner):
        if (_horizontal_clear(grid, p1.row, p1.col, corner.col)
                and _vertical_clear(grid, p2.col, corner.row, p2.row)):
            return corner

    corner = Coordinate(p2.row, p1.col)
    if grid.is_passable(corner):
        if (_vertical_clear(grid, p1.col, p1.row, corner.row)
                and _horizontal_clear(grid, p2.row, corner.col, p2.col)):
            return corner

    return None


def _two_turns(grid: Grid, p1: Coordinate, p2: Coordinate) -> Optional[List[Coordinate]]:
    """Scan outward from p1 only; the one-turn check covers both corners at p2."""
    # Horizontal scan, including the virtual column on each side
    for c in range(-1, grid.cols + 1):
        if c == p1.col:
            continue
        scan = Coordinate(p1.row, c)
        if grid.is_passable(scan) and _horizontal_clear(grid, p1.row, p1.col, c):
            corner = _one_turn(grid, scan, p2)
            if corner is not None:
                return [scan, corner]

    # Vertical scan, including the virtual row above and below
    for r in range(-1, grid.rows + 1):
        if r == p1.row:
            continue
        scan = Coordinate(r, p1.col)
        if grid.is_passable(scan) and _vertical_clear(grid, p1.col, p1.row, r):
            corner = _one_turn(grid, scan, p2)
            if corner is not None:
                return [scan, corner]

    return None


def find_connection_path(
    grid: Grid, p1: Coordinate, p2: Coordinate
) -> Optional[List[Coordinate]]:
    """
    Find the first path joining two tiles with at most two turns.

    Search order is fixed: straight line, then one turn (corner at
    ``(p1.row, p2.col)`` before ``(p2.row, p1.col)``), then two turns
    scanning horizontally from p1 before vertically. The first hit wins,
    which is not necessarily the shortest path.

    Tile types are not compared here. Identical endpoints, endpoints
    outside the grid and matched endpoints are rejected with ``None``.

    Args:
        grid: Board to search.
        p1: First endpoint.
        p2: Second endpoint.

    Returns:
        Path of 2-4 coordinates from p1 to p2 (endpoints plus turn points),
        or None if no path exists.
    """
    p1, p2 = Coordinate(*p1), Coordinate(*p2)
    if p1 == p2 or not grid.is_occupied(p1) or not grid.is_occupied(p2):
        return None

    if _zero_turns(grid, p1, p2):
        return [p1, p2]

    corner = _one_turn(grid, p1, p2)
    if corner is not None:
        return [p1, corner, p2]

    corners = _two_turns(grid, p1, p2)
    if corners is not None:
        return [p1, *corners, p2]

    return None


def can_connect(grid: Grid, p1: Coordinate, p2: Coordinate) -> bool:
    """Check whether a path of at most two turns joins p1 and p2."""
    return find_connection_path(grid, p1, p2) is not None


def count_turns(path: List[Coordinate]) -> int:
    """Number of turns in a path returned by find_connection_path."""
    return max(0, len(path) - 2)
