"""Application entry point and FastAPI app factory."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.router import api_router
from backend.core.cors_middleware import AllowAllOriginsMiddleware
from backend.core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events (startup/shutdown)."""
    # Startup: console logging (also when run as `uvicorn backend.main:app`)
    setup_logging()
    yield
    # Shutdown


def create_app() -> FastAPI:
    """Build the app: one route, permissive CORS, no generated docs routes."""
    app = FastAPI(
        title="Greeting Backend",
        version="1.0.0",
        description="Serves a fixed greeting on GET /message.",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Inner: "*" on every response, 204 for OPTIONS that are not full preflights.
    app.add_middleware(AllowAllOriginsMiddleware)
    # CORS: allow all origins, no credentials (so "*" is valid). Answers preflights.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


app = create_app()
