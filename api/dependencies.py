from fastapi import Request

from config import Settings
from database.db_manager import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency that provides the settings the app was built with."""
    return request.app.state.settings
