"""
Songbird Server - Configuration Synchronization

Reconciles a configuration document with the settings stored in the database:
- Read: build a document from the stored settings
- Amend: apply the fields present in a document, leave the others alone
- Overwrite: like Amend, but mount points and users end up exactly as the
  document lists them (empty when it omits them)

Each store step takes the database lock on its own. A failure in a later step
leaves the earlier steps committed; callers that need the whole document
applied atomically must serialize calls themselves.
"""

import logging

from managers.settings_store import SettingsStore
from models.config import Config, ConfigUser, UpdateKind

logger = logging.getLogger(__name__)


def Read(store: SettingsStore) -> Config:
    """
    Build a configuration document from the stored settings
    Passwords are never exported: every user's password is empty.

    Args:
        store: Settings store

    Returns:
        Config: Document with every field set

    Raises:
        StoreError: If any of the reads fails
    """
    # Hold the lock across all reads so the document is one consistent snapshot
    with store.lock:
        album_art_pattern, sleep_duration = store.GetIndexSettings()
        mount_points = store.GetMountPoints()
        user_names = store.GetUserNames()
        ddns = store.GetDDNSConfig()

    return Config(
        album_art_pattern=album_art_pattern,
        reindex_interval_seconds=sleep_duration,
        mount_points=mount_points,
        users=[ConfigUser(name=name, password="") for name in user_names],
        dynamic_dns_settings=ddns
    )


def Reset(store: SettingsStore) -> None:
    """Delete all mount points and all users"""
    store.ClearMountPoints()
    store.ClearUsers()
    logger.info("Cleared mount points and users")


def Overwrite(store: SettingsStore, new_config: Config) -> None:
    """
    Replace mount points and users with the document's, then amend the rest

    Args:
        store: Settings store
        new_config: Configuration document

    Raises:
        StoreError: If a store step fails (earlier steps stay committed)
    """
    logger.info("Overwriting stored configuration")
    Reset(store)
    Amend(store, new_config)


def Amend(store: SettingsStore, new_config: Config) -> None:
    """
    Apply the fields present in the document to the store

    Steps run in a fixed order: mount points, users, indexing settings,
    DDNS settings. List fields are replaced wholesale when present; an empty
    list clears the table.

    Args:
        store: Settings store
        new_config: Configuration document

    Raises:
        StoreError: If a store step fails (earlier steps stay committed)
    """
    mount_points = new_config.GetUpdate("mount_points")
    if mount_points.kind is UpdateKind.CLEAR:
        store.ClearMountPoints()
        logger.info("Cleared mount points")
    elif mount_points.kind is UpdateKind.SET:
        store.ReplaceMountPoints(mount_points.value)
        logger.info(f"Replaced mount points: {', '.join(m.name for m in mount_points.value)}")

    users = new_config.GetUpdate("users")
    if users.kind is UpdateKind.CLEAR:
        store.ClearUsers()
        logger.info("Cleared users")
    elif users.kind is UpdateKind.SET:
        store.ReplaceUsers(users.value)
        logger.info(f"Replaced users: {', '.join(u.name for u in users.value)}")

    sleep_duration = new_config.GetUpdate("reindex_interval_seconds")
    album_art_pattern = new_config.GetUpdate("album_art_pattern")
    if not (sleep_duration.IsUnset() and album_art_pattern.IsUnset()):
        store.UpdateIndexSettings(
            sleep_duration=sleep_duration.value,
            album_art_pattern=album_art_pattern.value
        )
        logger.info("Updated indexing settings")

    ddns = new_config.GetUpdate("dynamic_dns_settings")
    if ddns.kind is UpdateKind.SET:
        store.UpdateDDNSConfig(ddns.value.host, ddns.value.username, ddns.value.password)
        logger.info(f"Updated DDNS settings for host '{ddns.value.host}'")
