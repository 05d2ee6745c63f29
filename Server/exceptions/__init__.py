"""
Songbird Server - Exceptions Package

Contains the exception classes raised by configuration parsing and
settings synchronization.
"""

from exceptions.config_sync_error import ConfigSyncError
from exceptions.config_parse_error import ConfigParseError
from exceptions.invalid_path_error import InvalidPathError
from exceptions.store_error import StoreError

__all__ = [
    'ConfigSyncError',
    'ConfigParseError',
    'InvalidPathError',
    'StoreError',
]
