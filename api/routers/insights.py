"""Post-round insight endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_db, get_free_message_limit, get_insight_service
from api.schemas import RoundInsightsResponse
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from models import PersistedInsightRecord
from services.insight_service import PostRoundInsightService, visible_message_count

logger = logging.getLogger(__name__)

router = APIRouter()


async def _respond(
    record: PersistedInsightRecord, user_id: str, db: DatabaseManager, free_limit: int
) -> RoundInsightsResponse:
    user = await db.users.get_user(user_id)
    return RoundInsightsResponse.from_record(record, visible_message_count(user, free_limit))


@router.get("/rounds/{round_id}", response_model=RoundInsightsResponse)
async def get_round_insights(
    round_id: UUID,
    user_id: UUID = Query(...),
    db: DatabaseManager = Depends(get_db),
    service: PostRoundInsightService = Depends(get_insight_service),
    free_limit: int = Depends(get_free_message_limit),
):
    try:
        record = await service.get_insights(str(user_id), str(round_id))
        return await _respond(record, str(user_id), db, free_limit)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    except Exception as e:
        logger.exception("Failed to load insights for round %s", round_id)
        raise HTTPException(500, f"Error fetching insights: {e}")


@router.post("/rounds/{round_id}/regenerate", response_model=RoundInsightsResponse)
async def regenerate_round_insights(
    round_id: UUID,
    user_id: UUID = Query(...),
    bump_variant: bool = Query(True),
    db: DatabaseManager = Depends(get_db),
    service: PostRoundInsightService = Depends(get_insight_service),
    free_limit: int = Depends(get_free_message_limit),
):
    try:
        record = await service.regenerate_insights(
            str(user_id), str(round_id), bump_variant=bump_variant
        )
        return await _respond(record, str(user_id), db, free_limit)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    except Exception as e:
        logger.exception("Failed to regenerate insights for round %s", round_id)
        raise HTTPException(500, f"Error generating insights: {e}")
