"""
Songbird Server - Settings Store

Typed read and write primitives over the settings tables. This layer applies
no merge policy: every method is a single locked transaction against one
table, and database failures surface as StoreError.
"""

import logging
from typing import Callable, List, Optional, Tuple

from managers.database_manager import DatabaseManager
from models.config import ConfigMountPoint, ConfigUser, ConfigDDNS
from models.database import MiscSettings, MountPoint, User, DDNSConfig

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Reads and writes the four settings collections: misc settings row,
    mount points, users and the DDNS row
    """

    def __init__(self, db_manager: DatabaseManager,
                 issue_user: Callable[[str, str], User] = DatabaseManager.NewUser):
        """
        Args:
            db_manager: Owner of the database connection and lock
            issue_user: Turns a plain text name and password into a storable
                User row; hashing happens there, never in this class
        """
        self.db_manager = db_manager
        self.issue_user = issue_user

    @property
    def lock(self):
        return self.db_manager.lock

    # ==================== Reads ====================

    def GetMiscSettings(self) -> MiscSettings:
        with self.db_manager.LockedSession() as session:
            return session.query(MiscSettings).one()

    def GetIndexSettings(self) -> Tuple[str, int]:
        """
        Returns:
            tuple: (album_art_pattern, sleep_duration_seconds)
        """
        with self.db_manager.LockedSession() as session:
            art_pattern, sleep_duration = session.query(
                MiscSettings.index_album_art_pattern,
                MiscSettings.index_sleep_duration_seconds
            ).one()
            return art_pattern, sleep_duration

    def GetMountPoints(self) -> List[ConfigMountPoint]:
        with self.db_manager.LockedSession() as session:
            rows = session.query(MountPoint.source, MountPoint.name).order_by(MountPoint.id).all()
            return [ConfigMountPoint(source=source, name=name) for source, name in rows]

    def GetUserNames(self) -> List[str]:
        with self.db_manager.LockedSession() as session:
            return [name for (name,) in session.query(User.name).order_by(User.id).all()]

    def GetDDNSConfig(self) -> ConfigDDNS:
        with self.db_manager.LockedSession() as session:
            host, username, password = session.query(
                DDNSConfig.host, DDNSConfig.username, DDNSConfig.password
            ).one()
            return ConfigDDNS(host=host, username=username, password=password)

    # ==================== Writes ====================

    def ReplaceMountPoints(self, mount_points: List[ConfigMountPoint]) -> None:
        """Delete every mount point, then insert the given ones in order"""
        with self.db_manager.LockedSession() as session:
            session.query(MountPoint).delete()
            session.add_all([
                MountPoint(source=mount_point.source, name=mount_point.name)
                for mount_point in mount_points
            ])
        logger.debug(f"Replaced mount points ({len(mount_points)} rows)")

    def ClearMountPoints(self) -> None:
        with self.db_manager.LockedSession() as session:
            session.query(MountPoint).delete()
        logger.debug("Cleared mount points")

    def ReplaceUsers(self, users: List[ConfigUser]) -> None:
        """Delete every user, then insert the given ones in order"""
        with self.db_manager.LockedSession() as session:
            session.query(User).delete()
            session.add_all([
                self.issue_user(config_user.name, config_user.password)
                for config_user in users
            ])
        logger.debug(f"Replaced users ({len(users)} rows)")

    def ClearUsers(self) -> None:
        with self.db_manager.LockedSession() as session:
            session.query(User).delete()
        logger.debug("Cleared users")

    def UpdateIndexSettings(self, sleep_duration: Optional[int] = None,
                            album_art_pattern: Optional[str] = None) -> None:
        """Update the given indexing columns; None leaves a column unchanged"""
        values = {}
        if sleep_duration is not None:
            values[MiscSettings.index_sleep_duration_seconds] = sleep_duration
        if album_art_pattern is not None:
            values[MiscSettings.index_album_art_pattern] = album_art_pattern
        if not values:
            return

        with self.db_manager.LockedSession() as session:
            session.query(MiscSettings).update(values, synchronize_session=False)
        logger.debug(f"Updated index settings: {', '.join(column.key for column in values)}")

    def UpdateDDNSConfig(self, host: str, username: str, password: str) -> None:
        with self.db_manager.LockedSession() as session:
            session.query(DDNSConfig).update({
                DDNSConfig.host: host,
                DDNSConfig.username: username,
                DDNSConfig.password: password
            }, synchronize_session=False)
        logger.debug(f"Updated DDNS settings for host '{host}'")
