"""
Git operations — staging the generated license file.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def run_git(
    *args: str,
    cwd: Path,
    timeout: int = 15,
    check: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run a git command and return the result."""
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        timeout=timeout,
        check=check,
    )


def stage_file(path: Path, cwd: Path) -> bool:
    """``git add`` a single file.

    Returns:
        True if git accepted the file.  A missing git binary, a timeout or
        a non-zero exit (e.g. not a repository) all give False.
    """
    try:
        r = run_git("add", str(path), cwd=cwd)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("git add %s failed to run: %s", path, e)
        return False

    if r.returncode != 0:
        logger.debug("git add %s exited %d: %s", path, r.returncode, r.stderr.strip())
        return False
    return True
