from database.connection import DatabasePool, DatabaseSettings, db
from database.db_manager import DatabaseManager
from database.repositories import InsightRepositoryDB, RoundRepositoryDB, UserRepositoryDB
from database.exceptions import DatabaseError, NotFoundError, IntegrityError

__all__ = [
    "DatabasePool",
    "DatabaseSettings",
    "db",
    "DatabaseManager",
    "InsightRepositoryDB",
    "RoundRepositoryDB",
    "UserRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "IntegrityError",
]
