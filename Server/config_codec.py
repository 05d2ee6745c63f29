"""
Songbird Server - Configuration File Codec

Parses configuration documents from JSON or TOML text and serializes them
back. Mount point paths are cleaned as part of parsing, so a document
returned from here always holds native paths.
"""

import logging
import tomllib
from enum import Enum
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from exceptions import ConfigParseError
from models.config import Config

logger = logging.getLogger(__name__)


class ConfigFormat(str, Enum):
    JSON = "json"
    TOML = "toml"


def ParseConfig(content: str, config_format: ConfigFormat) -> Config:
    """
    Parse a configuration document

    Args:
        content: Document text
        config_format: Text format of the document

    Returns:
        Config: Parsed document with cleaned mount point paths

    Raises:
        ConfigParseError: If the text is malformed or does not match the schema
        InvalidPathError: If a mount point source is not a valid path
    """
    config_format = ConfigFormat(config_format)
    try:
        if config_format is ConfigFormat.TOML:
            config = Config.model_validate(tomllib.loads(content))
        else:
            config = Config.model_validate_json(content)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML config: {str(e)}", cause=e) from e
    except ValidationError as e:
        raise ConfigParseError(f"Invalid {config_format.value.upper()} config: {str(e)}", cause=e) from e

    config.CleanPaths()
    return config


def ParseJson(content: str) -> Config:
    return ParseConfig(content, ConfigFormat.JSON)


def ParseToml(content: str) -> Config:
    return ParseConfig(content, ConfigFormat.TOML)


def FormatForPath(path: Path) -> ConfigFormat:
    """Pick the config format from a file extension (.toml, otherwise JSON)"""
    if Path(path).suffix.lower() == ".toml":
        return ConfigFormat.TOML
    return ConfigFormat.JSON


def ParseConfigFile(path: Path) -> Config:
    """
    Read and parse a configuration file

    Args:
        path: Path to a .toml or .json file

    Returns:
        Config: Parsed document

    Raises:
        OSError: If the file cannot be read
        ConfigParseError: If the file is malformed
        InvalidPathError: If a mount point source is not a valid path
    """
    path = Path(path)
    logger.info(f"Config file path: {path}")
    content = path.read_text(encoding="utf-8")
    return ParseConfig(content, FormatForPath(path))


def SerializeConfig(config: Config, config_format: ConfigFormat) -> str:
    """
    Serialize a configuration document

    Unset fields are omitted rather than written as null, so amending with
    the output never clears anything by accident.

    Args:
        config: Document to serialize
        config_format: Text format to produce

    Returns:
        str: Document text
    """
    if ConfigFormat(config_format) is ConfigFormat.TOML:
        return tomli_w.dumps(config.model_dump(exclude_none=True))
    return config.model_dump_json(exclude_none=True, indent=2)
