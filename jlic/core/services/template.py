"""
License template rendering.

The template is plain text with four fixed ``{{key}}`` placeholders.
Substitution is a single literal pass; tokens that aren't in the map
are left as they are.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

from jlic.core.models.package import PackageInfo

_TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "data" / "templates" / "LICENSE.md"

# Keys every substitution map must carry
PLACEHOLDERS = ("name", "version", "year", "authors")


def load_template() -> str:
    """Return the bundled license template text."""
    return _TEMPLATE_PATH.read_text(encoding="utf-8")


def current_year() -> int:
    return datetime.now(timezone.utc).year


def substitutions(info: PackageInfo, year: int | str) -> dict[str, str]:
    """Build the placeholder map for ``render``."""
    return {
        "name": info.name,
        "version": info.version,
        "year": str(year),
        "authors": info.authors,
    }


def render(template: str, values: dict[str, str]) -> str:
    """Replace each ``{{key}}`` in ``template`` with ``values[key]``.

    All keys are matched in one scan, so a value containing ``{{...}}``
    is written out literally rather than substituted again.

    Raises:
        KeyError: If ``values`` lacks one of the four placeholders.
    """
    missing = [key for key in PLACEHOLDERS if key not in values]
    if missing:
        raise KeyError(f"Missing template values: {', '.join(missing)}")

    pattern = re.compile(
        r"\{\{(" + "|".join(re.escape(key) for key in values) + r")\}\}"
    )
    return pattern.sub(lambda m: values[m.group(1)], template)
