"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskgate.api.v1 import admin, schemas, tasks
from taskgate.core.config import settings
from taskgate.core.logging import get_logger, setup_logging
from taskgate.db.session import async_session
from taskgate.repositories.task_store import SqlTaskStore
from taskgate.validation.pipeline import ValidationPipeline


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else settings.LOG_LEVEL)
    logger = get_logger("startup")

    # One pipeline per process: the cache and failure tracker live on it
    if getattr(app.state, "pipeline", None) is None:
        app.state.pipeline = ValidationPipeline(SqlTaskStore(async_session))

    logger.info("Application starting", env=settings.APP_ENV)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Task Validation API",
    description="Validates agent-posted tasks before they reach human workers",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api"
app.include_router(schemas.router, prefix=API_PREFIX)
app.include_router(tasks.router, prefix=API_PREFIX)
app.include_router(admin.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
