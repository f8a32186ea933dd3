from .round_repo import RoundRepositoryDB

__all__ = ["RoundRepositoryDB"]
