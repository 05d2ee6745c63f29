"""
Songbird Server - Database Module

This module exports the global db_manager and settings_store instances for
use across the application.
"""

from managers.database_manager import DatabaseManager
from managers.settings_store import SettingsStore

# Global instances
# Initialized in server.py lifespan handler
db_manager: DatabaseManager = None
settings_store: SettingsStore = None
