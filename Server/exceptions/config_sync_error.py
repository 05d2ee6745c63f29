"""
Songbird Server - Config Sync Error Exception

Base exception class for configuration and settings errors.
"""


class ConfigSyncError(Exception):
    """Base exception for configuration synchronization errors."""
    pass
