"""
Songbird Server - Store Error Exception

Exception raised when the settings database fails.
"""

from exceptions.config_sync_error import ConfigSyncError


class StoreError(ConfigSyncError):
    """Exception for settings database errors (connection, constraints, I/O)."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause
