"""
Domain models — the parsed manifest and the metadata pulled out of it.
"""

from jlic.core.models.manifest import ManifestDocument
from jlic.core.models.package import UNKNOWN, PackageInfo

__all__ = [
    "ManifestDocument",
    "PackageInfo",
    "UNKNOWN",
]
