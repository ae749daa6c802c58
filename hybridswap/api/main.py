"""FastAPI application for the quote service.

Quotes are pure functions of the request body; the service keeps no pool
state between requests.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hybridswap import __version__
from hybridswap.api.endpoints import router
from hybridswap.errors import HybridSwapError, InvalidInput, PoolPaused

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("HYBRIDSWAP_HOST", "0.0.0.0")
PORT = int(os.environ.get("HYBRIDSWAP_PORT", "8000"))
DEBUG = os.environ.get("HYBRIDSWAP_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Hybrid StableSwap Simulator",
    description="Off-chain quotes for hybrid StableSwap pools",
    version=__version__,
)


@app.exception_handler(HybridSwapError)
async def pool_math_error(request: Request, exc: HybridSwapError) -> JSONResponse:
    """Map pool math failures to client errors.

    Bad arguments and paused pools are 400; computation failures on
    well-formed input (non-convergence, overflow, degenerate state) are 422.
    """
    status_code = 400 if isinstance(exc, (InvalidInput, PoolPaused)) else 422
    logger.warning(
        "quote_failed",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - HYBRIDSWAP_HOST: Host to bind to (default: 0.0.0.0)
    - HYBRIDSWAP_PORT: Port to bind to (default: 8000)
    - HYBRIDSWAP_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "hybridswap.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
