"""
Generate use case — write the license file and optionally update Cargo.toml.

Phases run strictly in order:

    locate → parse → extract → render → write → [update] → stage

Any failure up to and including the write is fatal and reported in
``GenerateResult.error``.  Once the license file is written the run is a
success: update and staging failures only produce warnings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from jlic.core.config.loader import load_manifest, locate_manifest
from jlic.core.errors import LicenseError
from jlic.core.models.package import PackageInfo
from jlic.core.services.fresh_file import write_file
from jlic.core.services.git_ops import stage_file
from jlic.core.services.manifest_ops import update_license_info
from jlic.core.services.metadata import extract_package_info
from jlic.core.services.template import current_year, load_template, render, substitutions

logger = logging.getLogger(__name__)

LICENSE_FILENAME = "LICENSE.md"
PREFIXED_LICENSE_FILENAME = "JLICENSE.md"

# Outcomes of the optional manifest update
UPDATE_UPDATED = "updated"
UPDATE_SKIPPED = "skipped"
UPDATE_FAILED = "failed"


def license_filename(prefix: bool) -> str:
    """``JLICENSE.md`` in prefix mode, ``LICENSE.md`` otherwise."""
    return PREFIXED_LICENSE_FILENAME if prefix else LICENSE_FILENAME


@dataclass
class GenerateResult:
    """Outcome of one jlic run."""

    filename: str = LICENSE_FILENAME
    license_path: Path | None = None
    manifest_path: Path | None = None
    package: PackageInfo | None = None
    year: int | None = None
    replaced: bool = False
    update_status: str = UPDATE_SKIPPED
    update_error: str | None = None
    staged: bool | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        result: dict = {"ok": self.ok, "filename": self.filename}
        if self.error:
            result["error"] = self.error
            return result

        result["license_path"] = str(self.license_path) if self.license_path else None
        result["manifest_path"] = str(self.manifest_path) if self.manifest_path else None
        result["package"] = self.package.model_dump() if self.package else None
        result["year"] = self.year
        result["replaced"] = self.replaced
        result["update"] = {"status": self.update_status, "error": self.update_error}
        result["staged"] = self.staged
        result["warnings"] = self.warnings
        return result


def generate_license(
    start_dir: Path | None = None,
    *,
    prefix: bool = False,
    update: bool = False,
    stage: bool = True,
    year: int | None = None,
) -> GenerateResult:
    """Generate the license file for the crate enclosing ``start_dir``.

    Args:
        start_dir: Directory to search upward from (default: cwd).
        prefix: Write ``JLICENSE.md`` instead of ``LICENSE.md``.
        update: Rewrite ``license``/``license-file`` in Cargo.toml afterwards.
        stage: Run ``git add`` on the written file.
        year: Copyright year (default: current UTC year).

    Returns:
        GenerateResult; ``error`` is set only for fatal failures.
    """
    result = GenerateResult(filename=license_filename(prefix))
    logger.debug("Beginning execution")

    try:
        manifest_path = locate_manifest(start_dir)
        result.manifest_path = manifest_path

        info = extract_package_info(load_manifest(manifest_path))
        result.package = info
        logger.debug("Package metadata found")

        result.year = year if year is not None else current_year()
        logger.info("Publish: %s", result.year)
        logger.info("Package: %s", info.name)
        logger.info("Version: %s", info.version)
        logger.info("Authors: %s", info.authors)

        text = render(load_template(), substitutions(info, result.year))
        logger.debug("Template created")

        crate_root = manifest_path.parent
        license_path = crate_root / result.filename
        result.replaced = write_file(license_path, text + "\n")
        result.license_path = license_path
        logger.debug("Template written to %s", license_path)
    except LicenseError as e:
        result.error = str(e)
        return result

    if result.replaced:
        result.warnings.append(f"Previous {result.filename} was replaced")

    if update:
        try:
            update_license_info(result.filename, start_dir)
        except LicenseError as e:
            result.update_status = UPDATE_FAILED
            result.update_error = str(e)
            logger.warning("License information within Cargo.toml has not been updated: %s", e)
            result.warnings.append(f"Cargo.toml not updated: {e}")
        else:
            result.update_status = UPDATE_UPDATED
            logger.debug("Package license information updated successfully")
    else:
        logger.warning("License information within Cargo.toml has not been updated")

    if stage:
        result.staged = stage_file(license_path, cwd=crate_root)
        if result.staged:
            logger.info("%s staged for git commit", result.filename)
        else:
            logger.warning("File not tracked by git")
            result.warnings.append(f"{result.filename} was not staged for git commit")

    return result
