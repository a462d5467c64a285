import argparse
import dataclasses
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
import uvicorn

from core import Settings, HashService, DelayedTaskScheduler
from storage import ResultStore, StatsAggregator
from routes import api_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - drop pending hashes on shutdown."""
    logger.info(f"Hash delay set to {app.state.settings.hash_delay_seconds}s")
    yield
    logger.info("Application shutting down")
    await app.state.scheduler.shutdown()


def _no_server_attached():
    logger.warning("Shutdown requested but no server is attached; ignoring")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its own store, stats and scheduler.

    Every call returns an independent instance with empty state.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Delayed Hash Service",
        description="Hashes passwords after a fixed delay and reports submission latency",
        version="1.0.0",
        lifespan=lifespan
    )

    scheduler = DelayedTaskScheduler()
    app.state.settings = settings
    app.state.scheduler = scheduler
    app.state.hash_service = HashService(
        store=ResultStore(),
        stats=StatsAggregator(),
        scheduler=scheduler,
        hash_delay_seconds=settings.hash_delay_seconds,
    )
    app.state.request_shutdown = _no_server_attached

    # Include all API routes
    app.include_router(api_router)

    @app.get("/healthz", tags=["health"])
    async def healthz():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run(argv: Optional[list[str]] = None) -> None:
    """Serve the application until /shutdown is called or the process is interrupted."""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Delayed hash service")
    parser.add_argument(
        "--host",
        type=str,
        default=settings.host,
        help=f"Interface to listen on (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=settings.hash_delay_seconds,
        help=f"Seconds before a submitted hash is generated (default: {settings.hash_delay_seconds})"
    )
    args = parser.parse_args(argv)

    settings = dataclasses.replace(
        settings,
        host=args.host,
        port=args.port,
        hash_delay_seconds=args.delay,
    )
    service_app = create_app(settings)

    config = uvicorn.Config(
        service_app,
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )
    server = uvicorn.Server(config)

    def request_shutdown():
        logger.info("Server is shutting down...")
        server.should_exit = True

    service_app.state.request_shutdown = request_shutdown

    logger.info(f"Server is ready to handle requests at {settings.host}:{settings.port}")
    server.run()
    logger.info("Server stopped")


if __name__ == "__main__":
    run()
