"""
Songbird Server - Database Models Package

This package contains all SQLAlchemy database model definitions.
All models share a common declarative base.
"""

# Import Base first
from models.database.base import Base

from models.database.misc_settings import MiscSettings
from models.database.mount_point import MountPoint
from models.database.user import User
from models.database.ddns_config import DDNSConfig

__all__ = [
    'Base',
    'MiscSettings',
    'MountPoint',
    'User',
    'DDNSConfig',
]
