"""
Tests for the settings store primitives
"""

import sys
import threading
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exceptions import StoreError
from managers.database_manager import (
    DatabaseManager, DEFAULT_INDEX_ALBUM_ART_PATTERN, DEFAULT_INDEX_SLEEP_DURATION_SECONDS
)
from managers.settings_store import SettingsStore
from models.config import ConfigMountPoint, ConfigUser, ConfigDDNS
from models.database import User


def test_initialize_database_defaults(store):
    assert store.GetIndexSettings() == (DEFAULT_INDEX_ALBUM_ART_PATTERN, DEFAULT_INDEX_SLEEP_DURATION_SECONDS)
    assert store.GetMountPoints() == []
    assert store.GetUserNames() == []
    assert store.GetDDNSConfig() == ConfigDDNS(host="", username="", password="")
    assert len(store.GetMiscSettings().auth_secret) > 0


def test_initialize_database_keeps_existing_rows(db_manager, store):
    secret = store.GetMiscSettings().auth_secret
    store.UpdateIndexSettings(sleep_duration=42)

    db_manager.InitializeDatabase()

    assert store.GetMiscSettings().auth_secret == secret
    assert store.GetIndexSettings()[1] == 42


def test_replace_mount_points_keeps_order(store):
    store.ReplaceMountPoints([
        ConfigMountPoint(source="/b", name="second"),
        ConfigMountPoint(source="/a", name="first"),
    ])
    store.ReplaceMountPoints([
        ConfigMountPoint(source="/c", name="third"),
        ConfigMountPoint(source="/d", name="fourth"),
    ])

    assert store.GetMountPoints() == [
        ConfigMountPoint(source="/c", name="third"),
        ConfigMountPoint(source="/d", name="fourth"),
    ]


def test_replace_mount_points_is_one_transaction(store):
    """A failed insert leaves the previous rows in place"""
    store.ReplaceMountPoints([ConfigMountPoint(source="/music", name="music")])

    with pytest.raises(StoreError) as exc_info:
        store.ReplaceMountPoints([
            ConfigMountPoint(source="/a", name="dup"),
            ConfigMountPoint(source="/b", name="dup"),
        ])

    assert exc_info.value.cause is not None
    assert store.GetMountPoints() == [ConfigMountPoint(source="/music", name="music")]


def test_clear_mount_points_and_users(store):
    store.ReplaceMountPoints([ConfigMountPoint(source="/music", name="music")])
    store.ReplaceUsers([ConfigUser(name="teddy", password="x")])

    store.ClearMountPoints()
    store.ClearUsers()

    assert store.GetMountPoints() == []
    assert store.GetUserNames() == []


def test_replace_users_uses_credential_issuer(db_manager):
    issued = []

    def IssueUser(name, password):
        issued.append((name, password))
        return User(name=name, password_hash="hash-" + password)

    store = SettingsStore(db_manager, issue_user=IssueUser)
    store.ReplaceUsers([ConfigUser(name="teddy", password="bear"), ConfigUser(name="kermit", password="frog")])

    assert issued == [("teddy", "bear"), ("kermit", "frog")]
    assert store.GetUserNames() == ["teddy", "kermit"]

    session = db_manager.GetSession()
    try:
        hashes = {user.name: user.password_hash for user in session.query(User).all()}
    finally:
        session.close()
    assert hashes == {"teddy": "hash-bear", "kermit": "hash-frog"}


def test_default_credential_issuer_hashes_with_bcrypt(db_manager):
    store = SettingsStore(db_manager)
    store.ReplaceUsers([ConfigUser(name="teddy", password="bear")])

    session = db_manager.GetSession()
    try:
        user = session.query(User).one()
    finally:
        session.close()

    assert user.password_hash != "bear"
    assert DatabaseManager.VerifyPassword("bear", user.password_hash)
    assert not DatabaseManager.VerifyPassword("wolf", user.password_hash)


def test_update_index_settings_partial(store):
    store.UpdateIndexSettings(album_art_pattern="cover.jpg")
    assert store.GetIndexSettings() == ("cover.jpg", DEFAULT_INDEX_SLEEP_DURATION_SECONDS)

    store.UpdateIndexSettings(sleep_duration=60)
    assert store.GetIndexSettings() == ("cover.jpg", 60)

    store.UpdateIndexSettings()
    assert store.GetIndexSettings() == ("cover.jpg", 60)


def test_update_ddns_config(store):
    store.UpdateDDNSConfig("bear.ydns.eu", "teddy", "honey")
    assert store.GetDDNSConfig() == ConfigDDNS(host="bear.ydns.eu", username="teddy", password="honey")


def test_read_without_tables_raises_store_error(tmp_path):
    db_manager = DatabaseManager(str(tmp_path / "empty.db"))
    try:
        store = SettingsStore(db_manager)
        with pytest.raises(StoreError):
            store.GetMountPoints()
        with pytest.raises(StoreError):
            store.GetDDNSConfig()
    finally:
        db_manager.Dispose()


def test_lock_released_after_error(db_manager, store):
    with pytest.raises(StoreError):
        store.ReplaceMountPoints([
            ConfigMountPoint(source="/a", name="dup"),
            ConfigMountPoint(source="/b", name="dup"),
        ])

    acquired = []

    def TryLock():
        got_lock = db_manager.lock.acquire(timeout=5)
        acquired.append(got_lock)
        if got_lock:
            db_manager.lock.release()

    worker = threading.Thread(target=TryLock)
    worker.start()
    worker.join()

    assert acquired == [True]
