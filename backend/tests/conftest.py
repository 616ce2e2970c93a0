"""Shared fixtures for engine tests."""
from typing import List

import pytest

from linklink.models.grid import Grid, Tile, TileStatus


def grid_from_rows(rows: List[str]) -> Grid:
    """Build a grid from strings, one char per tile; '.' is a matched cell."""
    tiles = []
    for r, line in enumerate(rows):
        row = []
        for c, char in enumerate(line):
            if char == ".":
                row.append(Tile.void(r, c))
            else:
                row.append(Tile(id=f"t-{r}-{c}", type=char, status=TileStatus.ACTIVE))
        tiles.append(row)
    return Grid(tiles)


@pytest.fixture
def build_grid():
    """Factory fixture turning row strings into a Grid."""
    return grid_from_rows
