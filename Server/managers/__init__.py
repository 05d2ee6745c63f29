"""
Songbird Server - Managers Package

This package contains the database manager and the settings store adapter.
"""

from managers.database_manager import DatabaseManager
from managers.settings_store import SettingsStore

__all__ = ['DatabaseManager', 'SettingsStore']
