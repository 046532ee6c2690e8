"""Core app configuration, database and security primitives."""

from app.core.config import get_settings, settings
from app.core.database import Database, create_database, get_db

__all__ = ["Database", "create_database", "get_db", "get_settings", "settings"]
