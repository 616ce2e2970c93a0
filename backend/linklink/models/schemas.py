"""Pydantic schemas for API request/response validation."""
from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional, Tuple


Point = Tuple[int, int]


class TileSchema(BaseModel):
    """Single tile on the wire."""
    id: str = Field(default="", description="Opaque tile identity")
    type: str = Field(default="", description="Tile type from the pool ('' for voids)")
    status: str = Field(default="active", description="active/selected/matched")


class GridSchema(BaseModel):
    """Grid on the wire."""
    rows: Optional[int] = Field(default=None, ge=1, description="Row count (checked when given)")
    cols: Optional[int] = Field(default=None, ge=1, description="Column count (checked when given)")
    tiles: List[List[TileSchema]] = Field(..., description="Row-major tile matrix")

    def to_engine_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"tiles": [[t.model_dump() for t in row] for row in self.tiles]}
        if self.rows is not None:
            data["rows"] = self.rows
        if self.cols is not None:
            data["cols"] = self.cols
        return data


class LevelConfigResponse(BaseModel):
    """Response schema for a level's board parameters."""
    level: int = Field(..., ge=1, description="Level number")
    rows: int
    cols: int
    time_seconds: int
    types_count: int
    score_threshold: int
    pattern: str = Field(..., description="Layout pattern applied at this size")


class GenerateRequest(BaseModel):
    """Request schema for level generation."""
    level: int = Field(default=1, ge=1, description="Level number (1-based)")
    rows: Optional[int] = Field(default=None, ge=1, le=30, description="Override board rows")
    cols: Optional[int] = Field(default=None, ge=1, le=30, description="Override board columns")
    types_count: Optional[int] = Field(default=None, ge=1, le=64, description="Override type count")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible layouts")


class GenerateResponse(BaseModel):
    """Response schema for level generation."""
    level: int = Field(..., description="Level number")
    config: Dict[str, Any] = Field(..., description="Board parameters used")
    pattern: str = Field(..., description="Layout pattern applied")
    tile_count: int = Field(..., description="Number of playable tiles")
    grid: Dict[str, Any] = Field(..., description="Generated grid")


class ConnectRequest(BaseModel):
    """Request schema for a connectivity query."""
    grid: GridSchema
    p1: Point = Field(..., description="First tile (row, col)")
    p2: Point = Field(..., description="Second tile (row, col)")


class ConnectResponse(BaseModel):
    """Response schema for a connectivity query."""
    connected: bool
    path: Optional[List[Point]] = Field(default=None, description="Endpoints and turn points")
    turns: Optional[int] = Field(default=None, description="Number of turns in the path")


class MatchResponse(BaseModel):
    """Response schema for a pair match."""
    grid: Dict[str, Any] = Field(..., description="Grid after the match")
    path: List[Point] = Field(..., description="Path used by the match")
    tile_type: str
    cleared: bool = Field(..., description="True when no tiles remain")


class HintRequest(BaseModel):
    """Request schema for a hint."""
    grid: GridSchema


class HintResponse(BaseModel):
    """Response schema for a hint."""
    pair: Optional[Tuple[Point, Point]] = Field(default=None, description="Matchable pair, if any")
    deadlocked: bool = Field(..., description="True when tiles remain but no pair connects")
    remaining: int = Field(..., description="Non-matched tiles on the board")


class ShuffleRequest(BaseModel):
    """Request schema for a shuffle."""
    grid: GridSchema
    seed: Optional[int] = Field(default=None, description="Random seed")
    ensure_solvable: bool = Field(default=False, description="Retry until a legal move exists")


class ShuffleResponse(BaseModel):
    """Response schema for a shuffle."""
    grid: Dict[str, Any]
    solvable: bool = Field(..., description="True when the new board has a legal move")


class SimulateRequest(BaseModel):
    """Request schema for level simulation."""
    level: int = Field(default=1, ge=1, description="Level number")
    iterations: int = Field(default=20, ge=1, le=1000, description="Number of boards to play")
    strategy: str = Field(default="first", description="Move choice (first/random)")
    max_shuffles: int = Field(default=3, ge=0, le=20, description="Reshuffles allowed per game")
    rows: Optional[int] = Field(default=None, ge=1, le=30)
    cols: Optional[int] = Field(default=None, ge=1, le=30)
    types_count: Optional[int] = Field(default=None, ge=1, le=64)
    seed: Optional[int] = Field(default=None)


class SimulateResponse(BaseModel):
    """Response schema for level simulation."""
    clear_rate: float = Field(..., ge=0, le=1, description="Clear rate (0-1)")
    avg_moves: float = Field(..., description="Average pairs matched")
    min_moves: int
    max_moves: int
    avg_shuffles: float = Field(..., description="Average reshuffles per game")
    iterations: int


class ErrorResponse(BaseModel):
    """Error response schema."""
    detail: str = Field(..., description="Error message")
