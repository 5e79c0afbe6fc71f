"""
Backend for the StreamerPulse streamer and casino-affiliate website.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streamerpulse.api.router import include_routers
from streamerpulse.core.config import settings
from streamerpulse.core.exception_handlers import register_exception_handlers
from streamerpulse.core.startup import create_leaderboard_cache, initialize_database, shutdown_database

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
    # Startup
    logger.info("Starting StreamerPulse ...")
    initialize_database()

    cache = create_leaderboard_cache()
    app.state.leaderboard_cache = cache
    if settings.LEADERBOARD_BACKGROUND_REFRESH:
        cache.start()

    yield

    # Shutdown
    logger.info("Shutting down StreamerPulse API...")
    await cache.stop()
    shutdown_database()


# Create FastAPI application
app = FastAPI(
    title="StreamerPulse",
    description="""
    Content, giveaway and wager leaderboard API for the StreamerPulse site.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", settings.CLIENT_URL],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    allow_credentials=True
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
