"""Level progression API routes."""
from fastapi import APIRouter, HTTPException, Query
from typing import List

from ...models.level import LevelConfig
from ...models.leveling_config import generate_level_progression, get_level_config
from ...models.schemas import ErrorResponse, LevelConfigResponse
from ...core.generator import effective_pattern


router = APIRouter(prefix="/api/levels", tags=["leveling"])


def _config_response(level: int, config: LevelConfig) -> LevelConfigResponse:
    return LevelConfigResponse(
        level=level,
        pattern=effective_pattern(config.rows, config.cols, level).value,
        **config.to_dict(),
    )


@router.get("/progression", response_model=List[LevelConfigResponse])
async def get_level_progression(
    start_level: int = Query(default=1, ge=1),
    count: int = Query(default=10, ge=1, le=200),
) -> List[LevelConfigResponse]:
    """Board parameters for a run of consecutive levels."""
    configs = generate_level_progression(start_level, count)
    return [_config_response(start_level + i, config) for i, config in enumerate(configs)]


@router.get(
    "/{level}/config",
    response_model=LevelConfigResponse,
    responses={400: {"model": ErrorResponse}},
)
async def get_single_level_config(level: int) -> LevelConfigResponse:
    """
    Board parameters for one level.

    Args:
        level: 1-based level number.

    Returns:
        LevelConfigResponse with size, type count, time budget and pattern.
    """
    if level < 1:
        raise HTTPException(status_code=400, detail="Level must be >= 1")
    return _config_response(level, get_level_config(level))
