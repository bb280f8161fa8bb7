"""Errors raised by the persistence layer.

Repositories translate driver errors into these, so the service and the API
never depend on asyncpg exception types.
"""


class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Entity missing, or owned by a different user."""


class IntegrityError(DatabaseError):
    """Foreign key or check constraint violation."""
