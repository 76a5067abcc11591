"""
Manifest update — point ``[package]`` at the generated license file.

Cargo.toml is located and parsed again from disk rather than reusing
the copy read for metadata extraction.  If the file changes on disk
between the two reads, the update acts on the newer content.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jlic.core.config.loader import load_manifest, locate_manifest
from jlic.core.errors import MalformedManifest
from jlic.core.services.fresh_file import write_file

logger = logging.getLogger(__name__)


def update_license_info(filename: str, start_dir: Path | None = None) -> Path:
    """Replace ``license`` with ``license-file = filename`` in Cargo.toml.

    The whole manifest is re-serialized, so comments and original key
    layout are not preserved.

    Args:
        filename: Name of the generated license file (``LICENSE.md`` …).
        start_dir: Where to start looking for Cargo.toml (default: cwd).

    Returns:
        Path of the rewritten manifest.

    Raises:
        LicenseError: Any locate, parse, shape, serialize or write failure.
    """
    manifest_path = locate_manifest(start_dir)
    document = load_manifest(manifest_path)

    try:
        package = document.package
    except MalformedManifest as e:
        raise MalformedManifest(f"Could not update Cargo.toml: {e}") from e

    removed = package.pop("license", None)
    if removed is not None:
        logger.debug("Dropped license = %r", removed)
    package["license-file"] = filename

    content = document.to_toml()
    write_file(manifest_path, content)
    logger.debug("Manifest %s rewritten with license-file = %s", manifest_path, filename)
    return manifest_path
