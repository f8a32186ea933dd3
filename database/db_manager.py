import asyncpg

from database.repositories import RoundRepositoryDB


class DatabaseManager:
    """Bundles the repositories that share one connection pool."""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool
        self.rounds = RoundRepositoryDB(pool)
