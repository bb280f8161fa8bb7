"""Reads from users.rounds for insight generation."""

import asyncpg
from typing import List
from uuid import UUID

from models import Round
from database.converters import round_from_row
from database.exceptions import NotFoundError


class RoundRepositoryDB:
    """Async reads for logged rounds."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Read
    # ================================================================

    async def get_round_for_user(self, round_id: str, user_id: str) -> Round:
        """Get a round owned by ``user_id``.

        Raises NotFoundError when the round does not exist or belongs to
        someone else, so callers cannot probe other users' round ids.
        """
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM users.rounds WHERE id = $1 AND user_id = $2",
                UUID(round_id), UUID(user_id),
            )
            if not row:
                raise NotFoundError(f"Round {round_id} not found")
            return round_from_row(row)

    async def get_rounds_for_user(self, user_id: str) -> List[Round]:
        """All of a user's rounds, oldest first (date, created_at, id)."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT * FROM users.rounds
                   WHERE user_id = $1
                   ORDER BY round_date ASC NULLS LAST, created_at ASC NULLS LAST, id ASC""",
                UUID(user_id),
            )
            return [round_from_row(r) for r in rows]
