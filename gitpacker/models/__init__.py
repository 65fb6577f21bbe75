"""Data models for GitPacker."""

from gitpacker.models.pack import (
    DEFAULT_CONFIG_FILENAME,
    ZIP_FILE_SUFFIX,
    CloneSpec,
    PackConfig,
)
from gitpacker.models.result import CloneResult, PackResult

__all__ = [
    # Pack config
    "CloneSpec",
    "PackConfig",
    "DEFAULT_CONFIG_FILENAME",
    "ZIP_FILE_SUFFIX",
    # Run results
    "CloneResult",
    "PackResult",
]
