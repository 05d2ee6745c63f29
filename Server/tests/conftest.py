"""
Shared fixtures for Songbird Server tests
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from managers.database_manager import DatabaseManager
from managers.settings_store import SettingsStore
from models.database import User


def FastIssueUser(name: str, password: str) -> User:
    """Credential issuer for tests that don't exercise bcrypt"""
    return User(name=name, password_hash=f"plain:{password}")


@pytest.fixture
def db_manager(tmp_path):
    manager = DatabaseManager(str(tmp_path / "songbird.db"))
    manager.InitializeDatabase()
    yield manager
    manager.Dispose()


@pytest.fixture
def store(db_manager):
    return SettingsStore(db_manager, issue_user=FastIssueUser)
