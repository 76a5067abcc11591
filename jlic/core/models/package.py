"""
Package metadata model — the values substituted into the license template.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Placeholder for any field Cargo.toml does not provide
UNKNOWN = "Unknown"


class PackageInfo(BaseModel):
    """Relevant package information, read from ``[package]``.

    Attributes:
        name:    Crate name, dequoted.
        version: Crate version, dequoted.
        authors: Display-ready author prose (``"A, B and C"``), never a list.
    """

    model_config = ConfigDict(frozen=True)

    name: str = UNKNOWN
    version: str = UNKNOWN
    authors: str = UNKNOWN
