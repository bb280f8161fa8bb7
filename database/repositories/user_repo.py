"""Reads from the users.users table."""

import asyncpg
from typing import Optional
from uuid import UUID

from models import User
from database.converters import user_from_row


class UserRepositoryDB:
    """Async reads for users and their subscription tier."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM users.users WHERE id = $1", UUID(user_id)
            )
            return user_from_row(row) if row else None
