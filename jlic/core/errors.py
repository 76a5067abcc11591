"""
Error types raised by the core.  All derive from ``LicenseError``.
"""

from __future__ import annotations


class LicenseError(Exception):
    """Base class for all jlic failures."""


class ManifestNotFound(LicenseError):
    """No Cargo.toml between the working directory and the filesystem root."""


class ManifestParseError(LicenseError):
    """Cargo.toml exists but is not valid TOML."""


class MalformedManifest(LicenseError):
    """``[package]`` is missing or not a table."""


class PathConflict(LicenseError):
    """Something other than a regular file sits at the write target."""


class FileIOError(LicenseError):
    """Reading, creating, removing or writing a file failed."""


class SerializationError(LicenseError):
    """The manifest could not be encoded back to TOML."""
