import asyncpg

from database.repositories import InsightRepositoryDB, RoundRepositoryDB, UserRepositoryDB


class DatabaseManager:
    """Bundles the repositories that share one asyncpg pool.

    Stored on ``app.state`` at startup and handed to routes through
    ``api.dependencies.get_db``.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self.pool = pool
        self.users = UserRepositoryDB(pool)
        self.rounds = RoundRepositoryDB(pool)
        self.insights = InsightRepositoryDB(pool)
