"""
Songbird Server - Path Utilities

Normalizes mount directory paths supplied by users on any platform.
A config file written on Windows may use backslashes while the server runs
on Linux (and the other way round), so every separator is rewritten to the
native one before a path is stored.
"""

import os
import re
from pathlib import PurePath

from exceptions import InvalidPathError

# Either separator style, regardless of the platform we run on
SEPARATOR_REGEX = re.compile(r"\\|/")


def CleanPathString(path_string: str) -> str:
    """
    Convert a path written with '/' or '\\' separators into a native path

    Duplicate and trailing separators are collapsed by splitting the path
    into its parts and joining them again.

    Args:
        path_string: Path as typed by the user

    Returns:
        str: Equivalent path using the native separator

    Raises:
        InvalidPathError: If the result cannot be used as a file-system path
    """
    native_string = SEPARATOR_REGEX.sub(lambda _: os.sep, path_string)

    parts = PurePath(native_string).parts
    if not parts:
        # "" stays empty, "." and "./" stay the current directory
        return "." if native_string else ""
    cleaned = str(PurePath(*parts))
    # PurePath drops a leading "." segment; keep it so native paths are unchanged
    if native_string.startswith("." + os.sep):
        cleaned = "." + os.sep + cleaned

    if "\x00" in cleaned:
        raise InvalidPathError(path_string)
    try:
        os.fsencode(cleaned)
    except UnicodeEncodeError as e:
        raise InvalidPathError(path_string) from e

    return cleaned
