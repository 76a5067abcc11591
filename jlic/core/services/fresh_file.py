"""
Fresh file writer, used for the license file and for Cargo.toml.

An existing regular file is discarded, never appended to.  Anything
else at the path raises ``PathConflict`` and is left untouched.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import TextIO

from jlic.core.errors import FileIOError, PathConflict

logger = logging.getLogger(__name__)

# One removal, then one re-check that must find the path free
_MAX_ATTEMPTS = 2


def _check_target(path: Path) -> bool:
    """True if a regular file sits at ``path``, False if the path is free."""
    if path.is_file():
        return True
    if path.exists() or path.is_symlink():
        raise PathConflict(
            f"Unable to write! {path} already exists, but it is not a file."
        )
    return False


def fresh_file(path: Path) -> TextIO:
    """Open a brand-new file at ``path`` for writing.

    An existing file is removed first.  The caller closes the handle.

    Raises:
        PathConflict: ``path`` is a directory, dangling symlink or other non-file.
        FileIOError: Removal or creation failed, or the path was re-occupied.
    """
    for _ in range(_MAX_ATTEMPTS):
        if _check_target(path):
            try:
                path.unlink()
            except OSError as e:
                raise FileIOError(f"Cannot remove {path}: {e}") from e
            logger.warning("Old file at %s was removed!", path)
            continue

        try:
            return path.open("x", encoding="utf-8", newline="\n")
        except FileExistsError:
            continue
        except OSError as e:
            raise FileIOError(f"Cannot create {path}: {e}") from e

    raise FileIOError(f"Unable to write! {path} was re-created while being replaced.")


def write_file(path: Path, content: str) -> bool:
    """Write ``content`` to ``path``, replacing any previous file.

    The content goes to a sibling temp file that is renamed over
    ``path``; until the rename the old file stays intact.  A replaced
    file's permission bits carry over.

    Returns:
        True if a previous file was discarded, False if the path was free.
    """
    replaced = _check_target(path)

    tmp = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    try:
        with fresh_file(tmp) as handle:
            handle.write(content)
        if replaced:
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise FileIOError(f"Cannot write {path}: {e}") from e
    except FileIOError:
        tmp.unlink(missing_ok=True)
        raise

    if replaced:
        logger.warning("Old file at %s was removed!", path)
    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)
    return replaced
