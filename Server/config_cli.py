#!/usr/bin/env python3
"""
Songbird Server - Configuration CLI

Imports configuration files into the settings database and exports the
stored settings back to a file, without starting the server.

Usage:
    python config_cli.py init
    python config_cli.py import songbird.toml [--overwrite]
    python config_cli.py export --format toml --output songbird.toml
"""

import argparse
import logging
import sys
from pathlib import Path

import config_sync
from config_codec import ConfigFormat, ParseConfigFile, SerializeConfig
from exceptions import ConfigParseError, InvalidPathError, StoreError
from managers.database_manager import DatabaseManager, DEFAULT_DB_PATH
from managers.settings_store import SettingsStore

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2
EXIT_STORE_ERROR = 3


def setup_cli_logging(log_level: str) -> None:
    """
    Setup logging for CLI mode
    Logs go to stderr so exported documents can be piped from stdout.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Songbird configuration import/export")
    parser.add_argument("-d", "--database", default=DEFAULT_DB_PATH, help="Path to the SQLite database")
    parser.add_argument("--log-level", default="WARNING")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create the database with default settings")

    import_parser = subparsers.add_parser("import", help="Apply a config file to the database")
    import_parser.add_argument("config_file", type=Path)
    import_parser.add_argument(
        "--overwrite", action="store_true",
        help="Replace all mount points and users, even those the file omits"
    )

    export_parser = subparsers.add_parser("export", help="Write the stored settings as a config file")
    export_parser.add_argument("-f", "--format", choices=[f.value for f in ConfigFormat], default=ConfigFormat.JSON.value)
    export_parser.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")

    return parser


def run_import(store: SettingsStore, config_file: Path, overwrite: bool) -> None:
    config = ParseConfigFile(config_file)
    if overwrite:
        config_sync.Overwrite(store, config)
    else:
        config_sync.Amend(store, config)
    logger.info(f"Imported {config_file} ({'overwrite' if overwrite else 'amend'})")


def run_export(store: SettingsStore, config_format: str, output: Path = None) -> None:
    content = SerializeConfig(config_sync.Read(store), ConfigFormat(config_format))
    if output is None:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
    else:
        output.write_text(content, encoding="utf-8")
        logger.info(f"Exported settings to {output}")


def main(argv=None) -> int:
    """
    Run a CLI command

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = build_parser().parse_args(argv)
    setup_cli_logging(args.log_level)

    db_manager = DatabaseManager(args.database)
    try:
        db_manager.InitializeDatabase()
        store = SettingsStore(db_manager)

        if args.command == "import":
            run_import(store, args.config_file, args.overwrite)
        elif args.command == "export":
            run_export(store, args.format, args.output)

        return EXIT_SUCCESS

    except (ConfigParseError, InvalidPathError) as e:
        logger.error(f"Invalid config file: {str(e)}")
        return EXIT_CONFIG_ERROR
    except StoreError as e:
        logger.error(f"Database error: {str(e)}")
        return EXIT_STORE_ERROR
    except OSError as e:
        logger.error(f"File error: {str(e)}")
        return EXIT_FAILURE
    finally:
        db_manager.Dispose()


if __name__ == "__main__":
    sys.exit(main())
