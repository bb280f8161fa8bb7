"""Orchestrates post-round insight generation around the pure engine.

Reads are served from the stored record when one exists. Concurrent requests
for the same round share a single in-flight task, so the engine runs and the
upsert happens once per burst.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from database.db_manager import DatabaseManager
from insights import build_round_facts, generate_post_round_insights, resolve_variant_offset, round_ordinal
from insights.config import DEFAULT_TUNING, MODEL_USED, SelectionTuning
from insights.onboarding import is_onboarding_round
from models import PersistedInsightRecord, User

logger = logging.getLogger(__name__)

DEFAULT_FREE_MESSAGE_LIMIT = 1

# (user_id, round_id, regenerate)
InFlightKey = Tuple[str, str, bool]


def visible_message_count(user: Optional[User], free_limit: int = DEFAULT_FREE_MESSAGE_LIMIT) -> int:
    """How many of the three messages a viewer may see."""
    if user is not None and user.is_premium:
        return 3
    return max(0, min(3, free_limit))


class PostRoundInsightService:
    """Load, generate and persist the three post-round messages for a round."""

    def __init__(self, db: DatabaseManager, tuning: SelectionTuning = DEFAULT_TUNING):
        self._db = db
        self._tuning = tuning
        self._in_flight: Dict[InFlightKey, asyncio.Task] = {}

    @property
    def in_flight_count(self) -> int:
        return len(self._in_flight)

    async def get_insights(self, user_id: str, round_id: str) -> PersistedInsightRecord:
        """Stored insights for the round, generating them on first request."""
        return await self._coalesce(user_id, round_id, regenerate=False, bump_variant=False)

    async def regenerate_insights(
        self, user_id: str, round_id: str, *, bump_variant: bool = True
    ) -> PersistedInsightRecord:
        """Recompute the insights. ``bump_variant`` asks for fresh phrasing.

        Onboarding rounds keep their offset, so their copy does not change.
        """
        return await self._coalesce(user_id, round_id, regenerate=True, bump_variant=bump_variant)

    # ================================================================
    # Private helpers
    # ================================================================

    async def _coalesce(
        self, user_id: str, round_id: str, *, regenerate: bool, bump_variant: bool
    ) -> PersistedInsightRecord:
        key = (str(user_id), str(round_id), regenerate)
        task = self._in_flight.get(key)
        if task is not None:
            logger.info("Joining in-flight insight generation for round %s", round_id)
            return await asyncio.shield(task)

        task = asyncio.ensure_future(
            self._load_or_generate(user_id, round_id, regenerate=regenerate, bump_variant=bump_variant)
        )
        self._in_flight[key] = task
        task.add_done_callback(lambda _: self._in_flight.pop(key, None))
        return await asyncio.shield(task)

    async def _load_or_generate(
        self, user_id: str, round_id: str, *, regenerate: bool, bump_variant: bool
    ) -> PersistedInsightRecord:
        # Raises NotFoundError for rounds the user does not own
        round_ = await self._db.rounds.get_round_for_user(round_id, user_id)
        existing = await self._db.insights.get_insights(round_id)

        if existing is not None and not regenerate:
            logger.info("Insight cache hit for round %s", round_id)
            return existing

        history = await self._db.rounds.get_rounds_for_user(user_id)
        round_number, previous = round_ordinal(history, round_id)
        if round_number is None:
            round_number = len(history) + 1
        onboarding = is_onboarding_round(round_number)

        variant_offset = resolve_variant_offset(
            existing.model_dump() if existing is not None else None,
            force_regenerate=regenerate,
            bump_variant=bump_variant and not onboarding,
        )

        facts = build_round_facts(round_, history)
        result = generate_post_round_insights(
            facts,
            round_number=round_number,
            previous_score=previous.score if previous is not None else None,
            total_rounds=len(history),
            round_id=str(round_id),
            variant_offset=variant_offset,
            tuning=self._tuning,
        )

        record = PersistedInsightRecord(
            round_id=str(round_id),
            user_id=str(user_id),
            messages=result.texts,
            levels=result.levels,
            outcomes=result.outcomes,
            variant_offset=variant_offset,
            generated_at=datetime.now(timezone.utc),
            model_used=MODEL_USED,
            onboarding=onboarding,
            trace=result.trace,
        )
        logger.info(
            "Generated insights for round %s (round #%s, offset %d, regenerate=%s): %s",
            round_id, round_number, variant_offset, regenerate, record.outcomes,
        )
        return await self._db.insights.upsert_insights(record)
