from fastapi import Request

from database.db_manager import DatabaseManager
from services.insight_service import DEFAULT_FREE_MESSAGE_LIMIT, PostRoundInsightService


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_insight_service(request: Request) -> PostRoundInsightService:
    """FastAPI dependency that provides the shared insight service."""
    return request.app.state.insight_service


def get_free_message_limit(request: Request) -> int:
    return getattr(request.app.state, "free_message_limit", DEFAULT_FREE_MESSAGE_LIMIT)
