"""
Songbird Server - Config Parse Error Exception

Exception raised when a configuration document is malformed.
"""

from exceptions.config_sync_error import ConfigSyncError


class ConfigParseError(ConfigSyncError):
    """Exception for malformed configuration documents."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause
