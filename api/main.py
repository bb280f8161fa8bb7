"""FastAPI application for the post-round insights API."""

import logging
import os
import sys
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from database.connection import DatabaseSettings, db
from database.db_manager import DatabaseManager
from services.insight_service import DEFAULT_FREE_MESSAGE_LIMIT, PostRoundInsightService

load_dotenv()

logger = logging.getLogger(__name__)


def setup_logging(level: str = None) -> None:
    """Stream logs to stdout at LOG_LEVEL (default INFO)."""
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _free_message_limit() -> int:
    raw = os.environ.get("INSIGHTS_FREE_MESSAGE_LIMIT")
    if raw is None:
        return DEFAULT_FREE_MESSAGE_LIMIT
    try:
        return max(0, min(3, int(raw)))
    except ValueError:
        logger.warning("Ignoring invalid INSIGHTS_FREE_MESSAGE_LIMIT=%r", raw)
        return DEFAULT_FREE_MESSAGE_LIMIT


def _cors_origins() -> list:
    raw = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the pool and build the shared service; close the pool on shutdown."""
    await db.initialize(DatabaseSettings.from_env())
    if os.environ.get("INSIGHTS_APPLY_SCHEMA", "").lower() in ("1", "true", "yes"):
        await db.apply_schema()
    app.state.db_manager = DatabaseManager(db.pool)
    app.state.insight_service = PostRoundInsightService(app.state.db_manager)
    yield
    await db.close()


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="Golf Post-Round Insights API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.free_message_limit = _free_message_limit()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import insights
    app.include_router(insights.router, prefix="/api/insights", tags=["insights"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
