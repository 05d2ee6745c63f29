"""
Songbird Server - Invalid Path Error Exception

Exception raised when a mount point source cannot be normalized.
"""

from exceptions.config_sync_error import ConfigSyncError


class InvalidPathError(ConfigSyncError):
    """Exception for mount directory paths that are not valid native paths."""

    def __init__(self, path: str):
        super().__init__(f"Bad mount directory path: {path!r}")
        self.path = path
