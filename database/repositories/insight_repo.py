"""Persistence for post-round insights (users.round_insights)."""

import asyncpg
from typing import Optional
from uuid import UUID

from models import PersistedInsightRecord
from database.converters import insight_record_from_row, insight_record_to_row
from database.exceptions import IntegrityError


class InsightRepositoryDB:
    """One insight record per round, replaced on regeneration."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_insights(self, round_id: str) -> Optional[PersistedInsightRecord]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM users.round_insights WHERE round_id = $1", UUID(round_id)
            )
            return insight_record_from_row(row) if row else None

    # ================================================================
    # Upsert
    # ================================================================

    async def upsert_insights(self, record: PersistedInsightRecord) -> PersistedInsightRecord:
        """Insert or replace the record for ``record.round_id``."""
        data = insight_record_to_row(record)
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    """INSERT INTO users.round_insights (
                           round_id, user_id, messages, levels, outcomes,
                           variant_offset, generated_at, model_used, onboarding, trace
                       )
                       VALUES ($1, $2, $3::jsonb, $4::jsonb, $5::jsonb,
                               $6, COALESCE($7, NOW()), $8, $9, $10::jsonb)
                       ON CONFLICT (round_id) DO UPDATE SET
                           messages = EXCLUDED.messages,
                           levels = EXCLUDED.levels,
                           outcomes = EXCLUDED.outcomes,
                           variant_offset = EXCLUDED.variant_offset,
                           generated_at = EXCLUDED.generated_at,
                           model_used = EXCLUDED.model_used,
                           onboarding = EXCLUDED.onboarding,
                           trace = EXCLUDED.trace
                       RETURNING *""",
                    data["round_id"], data["user_id"],
                    data["messages"], data["levels"], data["outcomes"],
                    data["variant_offset"], data["generated_at"], data["model_used"],
                    data["onboarding"], data["trace"],
                )
                return insight_record_from_row(row)
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(f"Round {record.round_id} does not exist: {e}") from e
