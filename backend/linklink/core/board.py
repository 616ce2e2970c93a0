"""Selection and pair-match transitions on a grid."""
from dataclasses import dataclass
from typing import Any, Dict, List

from ..exceptions import InvalidMoveError
from ..models.grid import Coordinate, Grid, TileStatus
from .connectivity import find_connection_path


@dataclass
class MatchResult:
    """Outcome of a successful pair match."""
    grid: Grid
    path: List[Coordinate]
    tile_type: str

    @property
    def cleared(self) -> bool:
        return is_cleared(self.grid)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "grid": self.grid.to_dict(),
            "path": [list(p) for p in self.path],
            "tile_type": self.tile_type,
            "cleared": self.cleared,
        }


def _require_occupied(grid: Grid, coord: Coordinate) -> None:
    if not grid.in_bounds(coord):
        raise InvalidMoveError(f"Coordinate {tuple(coord)} is outside the grid")
    if grid.tile(coord).is_matched:
        raise InvalidMoveError(f"Tile at {tuple(coord)} is already matched")


def select_tile(grid: Grid, coord: Coordinate) -> Grid:
    """
    Toggle the selection of a tile.

    Args:
        grid: Current board. Not modified.
        coord: Tile to toggle.

    Returns:
        New Grid with the tile switched between active and selected.

    Raises:
        InvalidMoveError: If the coordinate is out of bounds or matched.
    """
    coord = Coordinate(*coord)
    _require_occupied(grid, coord)

    new_grid = grid.copy()
    tile = new_grid.tile(coord)
    if tile.status == TileStatus.SELECTED:
        tile.status = TileStatus.ACTIVE
    else:
        tile.status = TileStatus.SELECTED
    return new_grid


def match_pair(grid: Grid, p1: Coordinate, p2: Coordinate) -> MatchResult:
    """
    Remove a connectable same-type pair from the board.

    Args:
        grid: Current board. Not modified.
        p1: First tile.
        p2: Second tile.

    Returns:
        MatchResult with the new grid (both tiles matched) and the path.

    Raises:
        InvalidMoveError: If the tiles are the same cell, not occupied,
            of different types, or not connectable.
    """
    p1, p2 = Coordinate(*p1), Coordinate(*p2)
    if p1 == p2:
        raise InvalidMoveError("Cannot match a tile with itself")
    _require_occupied(grid, p1)
    _require_occupied(grid, p2)

    tile_type = grid.tile(p1).type
    if grid.tile(p2).type != tile_type:
        raise InvalidMoveError(
            f"Tile types differ: '{tile_type}' vs '{grid.tile(p2).type}'"
        )

    path = find_connection_path(grid, p1, p2)
    if path is None:
        raise InvalidMoveError(
            f"No path with at most two turns joins {tuple(p1)} and {tuple(p2)}"
        )

    new_grid = grid.copy()
    new_grid.tile(p1).status = TileStatus.MATCHED
    new_grid.tile(p2).status = TileStatus.MATCHED
    return MatchResult(grid=new_grid, path=path, tile_type=tile_type)


def is_cleared(grid: Grid) -> bool:
    """True when every tile is matched."""
    return grid.remaining_count() == 0
