"""
Songbird Server - Main FastAPI Application

This module contains the FastAPI application serving the configuration
endpoints. On startup it initializes the settings database and, when a
config file is given, makes the database match it.
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
import uvicorn

import config_sync
import database
from config_codec import ParseConfigFile
from managers.database_manager import DatabaseManager, DEFAULT_DB_PATH
from managers.settings_store import SettingsStore

logger = logging.getLogger(__name__)

# Config file applied with Overwrite at startup (set from the command line)
startup_config_path: Optional[Path] = None


def SetupLogging(log_level: str = "INFO") -> None:
    """
    Configure logging to write to both console and a daily log file
    """
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)

    log_filename = logs_dir / f"songbird-server-{datetime.now().strftime('%Y-%m-%d')}.log"

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            # Max 10MB per file, keep 10 backup files
            RotatingFileHandler(
                log_filename,
                maxBytes=10 * 1024 * 1024,
                backupCount=10,
                encoding='utf-8'
            )
        ]
    )


# ==================== Lifespan Events ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler for startup and shutdown
    Manages database initialization and cleanup
    """
    logger.info("Songbird Server starting up...")

    if database.db_manager is None:
        database.db_manager = DatabaseManager()
    database.db_manager.InitializeDatabase()
    database.settings_store = SettingsStore(database.db_manager)
    logger.info("Database initialized successfully")

    if startup_config_path is not None:
        config = ParseConfigFile(startup_config_path)
        config_sync.Overwrite(database.settings_store, config)
        logger.info(f"Applied config file {startup_config_path}")

    logger.info("Server startup complete")

    yield

    logger.info("Songbird Server shutting down...")
    database.db_manager.Dispose()
    logger.info("Shutdown complete")


# ==================== FastAPI Application ====================

app = FastAPI(
    title="Songbird Server",
    description="Music streaming server configuration API",
    version="1.0.0",
    lifespan=lifespan
)

from routes import settings

app.include_router(settings.router)


# ==================== Main Entry Point ====================

def ParseArguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Songbird Server")
    parser.add_argument("-c", "--config", type=Path, help="Config file (.toml or .json) applied at startup")
    parser.add_argument("-d", "--database", default=DEFAULT_DB_PATH, help="Path to the SQLite database")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("-p", "--port", type=int, default=5050)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = ParseArguments()
    SetupLogging(args.log_level)

    database.db_manager = DatabaseManager(args.database)
    startup_config_path = args.config

    logger.info("Starting Songbird Server...")

    # Pass the app object (not "server:app") so the globals set above are used
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        reload=False,
        log_level=args.log_level.lower()
    )
