"""Grid, tile and coordinate models for the link-link board."""
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, NamedTuple, Tuple

from ..exceptions import InvalidGridError


class Coordinate(NamedTuple):
    """Row-major board address. May point one step outside the board."""
    row: int
    col: int


class TileStatus(str, Enum):
    """Tile status enumeration."""
    ACTIVE = "active"
    SELECTED = "selected"
    MATCHED = "matched"  # Also used for void slots


def new_tile_id(row: int, col: int) -> str:
    """Create a fresh tile identity for change detection."""
    return f"tile-{row}-{col}-{uuid.uuid4().hex[:12]}"


@dataclass
class Tile:
    """A single board cell."""
    id: str
    type: str
    status: TileStatus = TileStatus.ACTIVE

    @classmethod
    def void(cls, row: int, col: int) -> "Tile":
        """Placeholder for a cell that never holds a playable tile."""
        return cls(id=f"tile-{row}-{col}-void", type="", status=TileStatus.MATCHED)

    @property
    def is_matched(self) -> bool:
        return self.status == TileStatus.MATCHED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "type": self.type,
            "status": self.status.value,
        }


class Grid:
    """Fixed-size rectangular array of tiles.

    Cells outside the bounds and matched cells are empty space; everything
    else blocks a connection segment.
    """

    def __init__(self, tiles: List[List[Tile]]):
        if not tiles or not tiles[0]:
            raise InvalidGridError("Grid must have at least one row and one column")
        width = len(tiles[0])
        for row in tiles:
            if len(row) != width:
                raise InvalidGridError("All grid rows must have the same length")
        self.tiles = tiles

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0])

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile(self, coord: Tuple[int, int]) -> Tile:
        row, col = coord
        if not self.in_bounds(coord):
            raise IndexError(f"Coordinate ({row}, {col}) is outside the {self.rows}x{self.cols} grid")
        return self.tiles[row][col]

    def is_occupied(self, coord: Tuple[int, int]) -> bool:
        """True for an in-bounds tile that is not matched."""
        return self.in_bounds(coord) and not self.tile(coord).is_matched

    def is_passable(self, coord: Tuple[int, int]) -> bool:
        """True for out-of-bounds space or a matched tile."""
        return not self.is_occupied(coord)

    def coordinates(self) -> Iterator[Coordinate]:
        """All in-bounds coordinates in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield Coordinate(r, c)

    def occupied_coordinates(self) -> List[Coordinate]:
        """Coordinates of all non-matched tiles in row-major order."""
        return [coord for coord in self.coordinates() if self.is_occupied(coord)]

    def remaining_count(self) -> int:
        return len(self.occupied_coordinates())

    def type_counts(self) -> Dict[str, int]:
        """Count of each type among non-matched tiles."""
        counts: Dict[str, int] = {}
        for coord in self.occupied_coordinates():
            tile_type = self.tile(coord).type
            counts[tile_type] = counts.get(tile_type, 0) + 1
        return counts

    def copy(self) -> "Grid":
        """Copy the grid so that tiles can be changed without touching this one."""
        return Grid([
            [Tile(id=t.id, type=t.type, status=t.status) for t in row]
            for row in self.tiles
        ])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "tiles": [[t.to_dict() for t in row] for row in self.tiles],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        """
        Build a grid from its dictionary form.

        Args:
            data: Dictionary with a ``tiles`` matrix; ``rows``/``cols`` are
                checked against it when present.

        Returns:
            Parsed Grid.

        Raises:
            InvalidGridError: If the data is malformed.
        """
        raw_tiles = data.get("tiles")
        if not isinstance(raw_tiles, list) or not raw_tiles:
            raise InvalidGridError("Grid data must contain a non-empty 'tiles' matrix")

        tiles: List[List[Tile]] = []
        for r, raw_row in enumerate(raw_tiles):
            if not isinstance(raw_row, list):
                raise InvalidGridError(f"Grid row {r} must be a list")
            row: List[Tile] = []
            for c, raw in enumerate(raw_row):
                if not isinstance(raw, dict):
                    raise InvalidGridError(f"Tile at ({r}, {c}) must be an object")
                try:
                    status = TileStatus(raw.get("status", TileStatus.ACTIVE.value))
                except ValueError:
                    raise InvalidGridError(
                        f"Tile at ({r}, {c}) has unknown status '{raw.get('status')}'"
                    )
                row.append(Tile(
                    id=str(raw.get("id") or new_tile_id(r, c)),
                    type=str(raw.get("type", "")),
                    status=status,
                ))
            tiles.append(row)

        grid = cls(tiles)
        if "rows" in data and data["rows"] != grid.rows:
            raise InvalidGridError(f"Declared rows {data['rows']} != actual rows {grid.rows}")
        if "cols" in data and data["cols"] != grid.cols:
            raise InvalidGridError(f"Declared cols {data['cols']} != actual cols {grid.cols}")
        return grid

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, remaining={self.remaining_count()})"
