"""FastAPI application entry point."""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import LinkEngineError
from .api.routes import board, generate, leveling
from .utils.logger import configure_logging, get_logger

# Get settings
settings = get_settings()

configure_logging(settings.log_level)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Connectivity, layout generation, hint and shuffle engine for link-link tile puzzles",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(generate.router)
app.include_router(board.router)
app.include_router(leveling.router)


@app.exception_handler(LinkEngineError)
async def engine_error_handler(request: Request, exc: LinkEngineError) -> JSONResponse:
    """Engine errors that escape a route are client errors."""
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Link-Link Engine API",
        "endpoints": {
            "generate": "/api/generate",
            "connect": "/api/connect",
            "match": "/api/match",
            "hint": "/api/hint",
            "shuffle": "/api/shuffle",
            "simulate": "/api/simulate",
            "level_config": "/api/levels/{level}/config",
            "progression": "/api/levels/progression",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "linklink.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
