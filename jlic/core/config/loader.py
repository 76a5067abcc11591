"""
Manifest loader — finds Cargo.toml and parses it into a ManifestDocument.

The search walks up from the working directory so jlic can be run from
anywhere inside a crate.  Reading is split from locating: ``read_manifest``
takes an open handle and consumes it entirely, closing it before the
parsed value is returned.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import BinaryIO

from jlic.core.errors import FileIOError, ManifestNotFound, ManifestParseError
from jlic.core.models.manifest import ManifestDocument

logger = logging.getLogger(__name__)

# Manifest filename
MANIFEST_FILE = "Cargo.toml"


def find_manifest(start_dir: Path | None = None) -> Path | None:
    """Search for Cargo.toml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to Cargo.toml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None  # filesystem root
        current = parent


def locate_manifest(start_dir: Path | None = None) -> Path:
    """Like ``find_manifest``, but a miss is an error.

    Raises:
        ManifestNotFound: If no directory up to the root holds Cargo.toml.
    """
    path = find_manifest(start_dir)
    if path is None:
        raise ManifestNotFound(f"{MANIFEST_FILE} not found in path")
    logger.debug("Found manifest at %s", path)
    return path


def find_crate_root(start_dir: Path | None = None) -> Path:
    """Absolute path of the directory containing Cargo.toml."""
    return locate_manifest(start_dir).parent


def open_manifest(start_dir: Path | None = None) -> BinaryIO:
    """Open the located Cargo.toml for reading.

    The caller owns the returned handle; ``read_manifest`` closes it.
    """
    path = locate_manifest(start_dir)
    try:
        return path.open("rb")
    except OSError as e:
        raise FileIOError(f"Cannot open {path}: {e}") from e


def read_manifest(handle: BinaryIO) -> ManifestDocument:
    """Read the entire handle and parse it as TOML.

    The handle is closed before parsing, whatever the outcome.

    Raises:
        FileIOError: If the handle can't be read.
        ManifestParseError: If the content isn't valid UTF-8 TOML.
    """
    name = getattr(handle, "name", MANIFEST_FILE)
    try:
        with handle:
            raw = handle.read()
    except OSError as e:
        raise FileIOError(f"Cannot read {name}: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"{name} is not valid UTF-8: {e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"Failed to parse TOML value from {name}: {e}") from e

    return ManifestDocument(data)


def load_manifest(path: Path) -> ManifestDocument:
    """Open ``path`` and parse it.  See ``read_manifest``."""
    logger.debug("Loading manifest from %s", path)
    try:
        handle = path.open("rb")
    except OSError as e:
        raise FileIOError(f"Cannot open {path}: {e}") from e
    return read_manifest(handle)
