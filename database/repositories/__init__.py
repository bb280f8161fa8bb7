from .user_repo import UserRepositoryDB
from .round_repo import RoundRepositoryDB
from .insight_repo import InsightRepositoryDB

__all__ = ["UserRepositoryDB", "RoundRepositoryDB", "InsightRepositoryDB"]
