"""
An N-in-a-row game engine with a computer opponent.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.router import include_routers
from app.core.config import settings
from app.core.exception_handlers import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Lifespan context manager for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application lifecycle events."""
    logger.info(
        f"Starting Tic Tac Toe engine (default {settings.DEFAULT_BOARD_SIZE}x"
        f"{settings.DEFAULT_BOARD_SIZE}, {settings.DEFAULT_DIFFICULTY.value})..."
    )

    yield

    logger.info("Shutting down Tic Tac Toe engine...")


# Create FastAPI application
app = FastAPI(
    title="TicTacToe Engine",
    description="""
    Outcome classification and computer move selection for 3x3, 4x4 and 5x5
    N-in-a-row boards, plus in-memory games against the computer.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Register exception handlers
register_exception_handlers(app)


# Include routers
include_routers(app)

# CLI entry point
if __name__ == "__main__":
    import uvicorn

    # Development server configuration
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True
    )
