"""
Songbird Server - Config Models Package

This package contains the Pydantic models for the configuration document
and the per-field update variant used when applying it.
"""

from models.config.config_document import Config, ConfigMountPoint, ConfigUser, ConfigDDNS
from models.config.field_update import FieldUpdate, UpdateKind

__all__ = [
    'Config',
    'ConfigMountPoint',
    'ConfigUser',
    'ConfigDDNS',
    'FieldUpdate',
    'UpdateKind',
]
