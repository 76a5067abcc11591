"""
Package metadata extraction — ``[package]`` → PackageInfo.

Pure functions over a ManifestDocument; no file access happens here.
"""

from __future__ import annotations

import logging
from typing import Any

from jlic.core.models.manifest import ManifestDocument, scalar_text
from jlic.core.models.package import UNKNOWN, PackageInfo

logger = logging.getLogger(__name__)


def extract_package_info(document: ManifestDocument) -> PackageInfo:
    """Pull name, version and authors out of ``[package]``.

    Missing fields fall back to ``"Unknown"`` independently of each other.

    Raises:
        MalformedManifest: If the document has no ``[package]`` table.
    """
    package = document.package
    return PackageInfo(
        name=_text_or_unknown(package.get("name")),
        version=_text_or_unknown(package.get("version")),
        authors=format_authors(package.get("authors")),
    )


def dequote(text: str) -> str:
    """Trim double quotes from both ends of a value."""
    return text.strip('"')


def format_authors(value: Any) -> str:
    """Format the ``authors`` array into a single display string.

    ``["A"]`` → ``"A"``, ``["A", "B"]`` → ``"A and B"``,
    ``["A", "B", "C"]`` → ``"A, B and C"``.  Anything that isn't a
    non-empty array gives ``"Unknown"``.
    """
    if not isinstance(value, list) or not value:
        return UNKNOWN

    names = [dequote(scalar_text(author)) for author in value]
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def _text_or_unknown(value: Any) -> str:
    if value is None:
        return UNKNOWN
    return dequote(scalar_text(value))
