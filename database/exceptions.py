class DatabaseError(Exception):
    """Base for all database errors."""


class DataFetchError(DatabaseError):
    """Data source unavailable, query rejected, or rows could not be read."""


class NotFoundError(DatabaseError):
    """Entity not found."""
