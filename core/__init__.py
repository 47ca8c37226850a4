"""
Recipe Service Core Module
Central configuration and utilities
"""

from .config import settings, get_settings
from .database import Base, get_db, get_db_session, init_db, close_db
from .exceptions import RecipeNotFoundError

__all__ = [
    "settings",
    "get_settings",
    "Base",
    "get_db",
    "get_db_session",
    "init_db",
    "close_db",
    "RecipeNotFoundError",
]
