"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest


DEMO_MANIFEST = textwrap.dedent("""\
    [package]
    name = "demo"
    version = "0.1.0"
    authors = ["Ann Lee", "Bo Kim"]
    edition = "2021"
    license = "MIT"

    [dependencies]
    serde = "1.0"
""")


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Return a helper that writes Cargo.toml into a directory (default: tmp_path)."""

    def _write(content: str = DEMO_MANIFEST, directory: Path | None = None) -> Path:
        target = (directory or tmp_path) / "Cargo.toml"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def demo_crate(write_manifest, tmp_path: Path) -> Path:
    """A crate root holding the demo Cargo.toml."""
    write_manifest()
    return tmp_path
