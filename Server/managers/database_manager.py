"""
Songbird Server - Database Manager

This module manages the database connection, initialization, and the
process-wide lock that serializes access to it.
"""

import logging
import secrets
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
import bcrypt

from exceptions import StoreError
from models.database import Base, MiscSettings, DDNSConfig, User

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "database/songbird.db"

# Defaults for the single-row settings tables
DEFAULT_INDEX_SLEEP_DURATION_SECONDS = 1800
DEFAULT_INDEX_ALBUM_ART_PATTERN = "Folder.(jpg|png)"


class DatabaseManager:
    """
    Manages database connection, initialization, and locking
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        """
        Initialize database manager

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path

        # Ensure database directory exists
        db_dir = Path(db_path).parent
        if db_dir and str(db_dir) != '.':
            db_dir.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(f"sqlite:///{db_path}", echo=False)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

        # Re-entrant so a caller holding the lock can still run single primitives
        self.lock = threading.RLock()

    def InitializeDatabase(self) -> None:
        """
        Initialize the database with all tables and default data
        Creates tables if they don't exist and populates the single-row
        settings tables on first run.

        Raises:
            StoreError: If the database cannot be initialized
        """
        with self.LockedSession() as session:
            Base.metadata.create_all(bind=self.engine)
            self.PopulateDefaultSettings(session)

    def PopulateDefaultSettings(self, session: Session) -> None:
        """
        Populate default settings rows
        Only adds rows that don't already exist

        Args:
            session: SQLAlchemy session
        """
        if session.query(MiscSettings).count() == 0:
            session.add(MiscSettings(
                id=1,
                auth_secret=secrets.token_urlsafe(32),
                index_sleep_duration_seconds=DEFAULT_INDEX_SLEEP_DURATION_SECONDS,
                index_album_art_pattern=DEFAULT_INDEX_ALBUM_ART_PATTERN
            ))
            logger.info("Added default misc settings")

        if session.query(DDNSConfig).count() == 0:
            session.add(DDNSConfig(id=1, host="", username="", password=""))
            logger.info("Added default DDNS settings")

    @contextmanager
    def LockedSession(self) -> Iterator[Session]:
        """
        Open a session while holding the database lock

        The session is committed when the block exits normally and rolled
        back otherwise. The lock is released on every exit path.

        Yields:
            Session: SQLAlchemy session

        Raises:
            StoreError: If any database operation in the block fails
        """
        with self.lock:
            session = self.SessionLocal()
            try:
                yield session
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Database error: {str(e)}")
                raise StoreError(f"Database error: {str(e)}", cause=e) from e
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

    def GetSession(self) -> Session:
        """
        Get a new database session without taking the lock
        For maintenance scripts and tests; application code uses LockedSession.

        Returns:
            Session: SQLAlchemy session
        """
        return self.SessionLocal()

    @staticmethod
    def HashPassword(password: str) -> str:
        """
        Hash a password using bcrypt
        Truncates to 72 bytes to comply with bcrypt's maximum password length

        Args:
            password: Plain text password

        Returns:
            str: Hashed password (as string)
        """
        password_bytes = password.encode('utf-8')[:72]
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt())
        return hashed.decode('utf-8')

    @staticmethod
    def VerifyPassword(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a hash

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored password hash (as string)

        Returns:
            bool: True if password matches, False otherwise
        """
        password_bytes = plain_password.encode('utf-8')[:72]
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))

    @staticmethod
    def NewUser(name: str, password: str) -> User:
        """
        Create a storable user record from plain text credentials

        Args:
            name: User name
            password: Plain text password

        Returns:
            User: Unsaved user row holding the bcrypt hash
        """
        return User(name=name, password_hash=DatabaseManager.HashPassword(password))

    def Dispose(self) -> None:
        """Close all pooled connections"""
        self.engine.dispose()
