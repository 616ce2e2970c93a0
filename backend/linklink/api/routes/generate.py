"""Level generation and simulation API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...config import Settings, get_settings
from ...exceptions import LinkEngineError
from ...models.schemas import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    SimulateRequest,
    SimulateResponse,
)
from ...models.leveling_config import resolve_level_config
from ...core.generator import effective_pattern, generate_level
from ...core.simulator import LevelSimulator
from ...utils.helpers import make_rng
from ...utils.logger import get_logger
from ..deps import get_level_simulator

router = APIRouter(prefix="/api", tags=["generate"])

logger = get_logger(__name__)


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate(request: GenerateRequest) -> GenerateResponse:
    """
    Generate the board for a level.

    Args:
        request: GenerateRequest with level number and optional overrides.

    Returns:
        GenerateResponse with the config used and the new grid.
    """
    config = resolve_level_config(
        request.level, request.rows, request.cols, request.types_count
    )
    try:
        grid = generate_level(config, request.level, make_rng(request.seed))
    except LinkEngineError as e:
        logger.warning("Generation failed for level %d: %s", request.level, e)
        raise HTTPException(status_code=400, detail=f"Generation failed: {str(e)}")

    return GenerateResponse(
        level=request.level,
        config=config.to_dict(),
        pattern=effective_pattern(config.rows, config.cols, request.level).value,
        tile_count=grid.remaining_count(),
        grid=grid.to_dict(),
    )


@router.post(
    "/simulate",
    response_model=SimulateResponse,
    responses={400: {"model": ErrorResponse}},
)
async def simulate_level(
    request: SimulateRequest,
    simulator: LevelSimulator = Depends(get_level_simulator),
    settings: Settings = Depends(get_settings),
) -> SimulateResponse:
    """
    Auto-play a level several times.

    Args:
        request: SimulateRequest with level and simulation parameters.
        simulator: LevelSimulator dependency.
        settings: Application settings.

    Returns:
        SimulateResponse with simulation statistics.
    """
    valid_strategies = ["first", "random"]
    if request.strategy not in valid_strategies:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid strategy. Must be one of: {valid_strategies}",
        )
    if request.iterations > settings.simulation_max_iterations:
        raise HTTPException(
            status_code=400,
            detail=f"At most {settings.simulation_max_iterations} iterations are allowed",
        )

    config = resolve_level_config(
        request.level, request.rows, request.cols, request.types_count
    )
    try:
        result = simulator.simulate(
            config,
            request.level,
            iterations=request.iterations,
            strategy=request.strategy,
            max_shuffles=request.max_shuffles,
            rng=make_rng(request.seed),
        )
    except LinkEngineError as e:
        logger.warning("Simulation failed for level %d: %s", request.level, e)
        raise HTTPException(status_code=400, detail=f"Simulation failed: {str(e)}")

    return SimulateResponse(**result.to_dict())
