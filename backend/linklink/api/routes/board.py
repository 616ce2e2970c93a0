"""Board interaction API routes: connect, match, hint, shuffle."""
from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings, get_settings
from ...exceptions import DeadlockError, InvalidGridError, InvalidMoveError
from ...models.grid import Coordinate, Grid
from ...models.schemas import (
    ErrorResponse,
    ConnectRequest,
    ConnectResponse,
    GridSchema,
    HintRequest,
    HintResponse,
    MatchResponse,
    ShuffleRequest,
    ShuffleResponse,
)
from ...core.board import match_pair
from ...core.connectivity import count_turns, find_connection_path
from ...core.shuffler import shuffle_tiles, shuffle_until_solvable
from ...core.solver import find_available_match
from ...utils.helpers import make_rng
from ...utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["board"])

logger = get_logger(__name__)


def _parse_grid(schema: GridSchema) -> Grid:
    try:
        return Grid.from_dict(schema.to_engine_dict())
    except InvalidGridError as e:
        raise HTTPException(status_code=400, detail=f"Invalid grid: {str(e)}")


@router.post(
    "/connect",
    response_model=ConnectResponse,
    responses={400: {"model": ErrorResponse}},
)
async def connect(request: ConnectRequest) -> ConnectResponse:
    """
    Find the link path between two tiles.

    Type equality is not checked; use /api/match to apply a move.
    """
    grid = _parse_grid(request.grid)
    path = find_connection_path(grid, Coordinate(*request.p1), Coordinate(*request.p2))
    if path is None:
        return ConnectResponse(connected=False)
    return ConnectResponse(
        connected=True,
        path=[tuple(p) for p in path],
        turns=count_turns(path),
    )


@router.post(
    "/match",
    response_model=MatchResponse,
    responses={400: {"model": ErrorResponse}},
)
async def match(request: ConnectRequest) -> MatchResponse:
    """Match two same-type tiles and return the updated grid."""
    grid = _parse_grid(request.grid)
    try:
        result = match_pair(grid, Coordinate(*request.p1), Coordinate(*request.p2))
    except InvalidMoveError as e:
        raise HTTPException(status_code=400, detail=f"Invalid move: {str(e)}")
    return MatchResponse(**result.to_dict())


@router.post(
    "/hint",
    response_model=HintResponse,
    responses={400: {"model": ErrorResponse}},
)
async def hint(request: HintRequest) -> HintResponse:
    """Return a matchable pair, or report a deadlock."""
    grid = _parse_grid(request.grid)
    pair = find_available_match(grid)
    remaining = grid.remaining_count()
    return HintResponse(
        pair=(tuple(pair[0]), tuple(pair[1])) if pair else None,
        deadlocked=pair is None and remaining > 0,
        remaining=remaining,
    )


@router.post(
    "/shuffle",
    response_model=ShuffleResponse,
    responses={400: {"model": ErrorResponse}},
)
async def shuffle(
    request: ShuffleRequest,
    settings: Settings = Depends(get_settings),
) -> ShuffleResponse:
    """
    Redistribute tile types over the occupied cells.

    With ensure_solvable the shuffle is retried until a legal move exists.
    """
    grid = _parse_grid(request.grid)
    rng = make_rng(request.seed)

    if request.ensure_solvable:
        try:
            shuffled = shuffle_until_solvable(grid, rng, settings.shuffle_max_attempts)
        except DeadlockError as e:
            raise HTTPException(status_code=400, detail=f"Shuffle failed: {str(e)}")
    else:
        shuffled = shuffle_tiles(grid, rng)

    return ShuffleResponse(
        grid=shuffled.to_dict(),
        solvable=find_available_match(shuffled) is not None,
    )
