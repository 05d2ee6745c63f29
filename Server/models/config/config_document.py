"""
Songbird Server - Config Document Models

Pydantic models for the configuration document imported from (and exported
to) JSON or TOML files. Every top-level field is optional: a missing field
means "leave the stored value alone".
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from models.config.field_update import FieldUpdate
from path_utils import CleanPathString


class ConfigMountPoint(BaseModel):
    """A named mount directory exposed to clients"""
    source: str
    name: str


class ConfigUser(BaseModel):
    """A user account; password is plain text and never exported"""
    name: str
    password: str


class ConfigDDNS(BaseModel):
    """Dynamic DNS credentials"""
    host: str
    username: str
    password: str


class Config(BaseModel):
    """Configuration document"""
    album_art_pattern: Optional[str] = None
    # Stored in a 32-bit INTEGER column
    reindex_interval_seconds: Optional[int] = Field(default=None, ge=-2**31, le=2**31 - 1)
    mount_points: Optional[List[ConfigMountPoint]] = None
    users: Optional[List[ConfigUser]] = None
    dynamic_dns_settings: Optional[ConfigDDNS] = None

    def CleanPaths(self) -> None:
        """
        Rewrite every mount point source as a native path

        Raises:
            InvalidPathError: If any source is not a valid path. No source is
                modified in that case.
        """
        if self.mount_points is None:
            return
        cleaned = [CleanPathString(mount_point.source) for mount_point in self.mount_points]
        for mount_point, source in zip(self.mount_points, cleaned):
            mount_point.source = source

    def GetUpdate(self, field_name: str) -> FieldUpdate:
        """Get the update variant (unset / clear / set) for a top-level field"""
        if field_name not in type(self).model_fields:
            raise KeyError(field_name)
        return FieldUpdate.FromValue(getattr(self, field_name))
