"""
Manifest document — a typed view over a parsed Cargo.toml.

``tomllib`` hands back plain dicts and lists.  ``ManifestDocument`` wraps
that tree so that lookups which need a specific shape (a table, a
string) fail with a ``MalformedManifest`` instead of an ``AttributeError``
three calls later.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any

import tomli_w

from jlic.core.errors import MalformedManifest, SerializationError


class ManifestDocument:
    """A parsed manifest: tables, arrays and scalars.

    Each operation that needs the manifest builds its own instance from
    disk; instances are never shared between phases.
    """

    def __init__(self, data: dict[str, Any]) -> None:
        if not isinstance(data, dict):
            raise MalformedManifest(
                f"Expected a TOML table at the top level, got {type(data).__name__}"
            )
        self._data = data

    @property
    def data(self) -> dict[str, Any]:
        """The underlying mutable tree."""
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Return a top-level value, or ``default`` if absent."""
        return self._data.get(key, default)

    def table(self, key: str) -> dict[str, Any]:
        """Return the top-level table ``key``.

        Raises:
            MalformedManifest: If ``key`` is missing or is not a table.
        """
        value = self._data.get(key)
        if value is None:
            raise MalformedManifest(f"Cargo.toml has no [{key}] table")
        if not isinstance(value, dict):
            raise MalformedManifest(
                f"Expected [{key}] to be a table, got {_type_name(value)}"
            )
        return value

    @property
    def package(self) -> dict[str, Any]:
        """The ``[package]`` table (mutable)."""
        return self.table("package")

    def to_toml(self) -> str:
        """Serialize the whole document back to human-readable TOML.

        Raises:
            SerializationError: If the tree holds something TOML can't encode.
        """
        try:
            return tomli_w.dumps(self._data, indent=4)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize Cargo.toml: {e}") from e

    def __repr__(self) -> str:
        return f"ManifestDocument(keys={sorted(self._data)})"


def scalar_text(value: Any) -> str:
    """Textual form of a TOML value.

    Strings come back verbatim; booleans use TOML spelling; everything
    else goes through ``str``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (_dt.datetime, _dt.date, _dt.time)):
        return value.isoformat()
    return str(value)


def _type_name(value: Any) -> str:
    if isinstance(value, list):
        return "an array"
    if isinstance(value, str):
        return "a string"
    return type(value).__name__
