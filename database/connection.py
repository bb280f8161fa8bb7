"""asyncpg pool for the insights service, configured from the environment."""

import logging
import os
from pathlib import Path
from typing import Optional

import asyncpg
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


class DatabaseSettings(BaseModel):
    """Connection settings. ``dsn`` wins over the individual fields."""
    dsn: Optional[str] = None
    host: str = "localhost"
    port: int = 5432
    database: str = "golf_insights"
    user: str = "postgres"
    password: str = ""
    min_size: int = Field(2, ge=1)
    max_size: int = Field(10, ge=1)

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """DATABASE_URL, or PGHOST / PGPORT / PGDATABASE / PGUSER / PGPASSWORD."""
        env = os.environ
        return cls(
            dsn=env.get("DATABASE_URL") or None,
            host=env.get("PGHOST", "localhost"),
            port=int(env.get("PGPORT", "5432")),
            database=env.get("PGDATABASE", "golf_insights"),
            user=env.get("PGUSER", "postgres"),
            password=env.get("PGPASSWORD", ""),
            min_size=int(env.get("DB_POOL_MIN", "2")),
            max_size=int(env.get("DB_POOL_MAX", "10")),
        )

    def pool_kwargs(self) -> dict:
        if self.dsn:
            return {"dsn": self.dsn, "min_size": self.min_size, "max_size": self.max_size}
        return self.model_dump(exclude={"dsn"})


class DatabasePool:
    """Owns the asyncpg pool from app startup to shutdown."""

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    async def initialize(self, settings: Optional[DatabaseSettings] = None) -> None:
        """Create the pool once. Later calls are no-ops."""
        if self._pool is not None:
            return
        settings = settings or DatabaseSettings.from_env()
        self._pool = await asyncpg.create_pool(**settings.pool_kwargs())
        logger.info(
            "Database pool ready (min=%d, max=%d)", settings.min_size, settings.max_size
        )

    async def apply_schema(self, path: Path = SCHEMA_PATH) -> None:
        """Create the users, rounds and round_insights tables if missing."""
        async with self.pool.acquire() as conn:
            await conn.execute(path.read_text())
        logger.info("Applied schema from %s", path.name)

    async def close(self) -> None:
        if self._pool:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed")

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("Database pool not initialized; await db.initialize() first")
        return self._pool

    async def health_check(self) -> bool:
        """True when a pooled connection answers SELECT 1."""
        try:
            async with self.pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
        except (RuntimeError, OSError, asyncpg.PostgresError) as e:
            logger.warning("Database health check failed: %s", e)
            return False
        return True


db = DatabasePool()
