"""GitPacker - Batch-clone git repositories and bundle them into a zip archive."""

from gitpacker.models.pack import CloneSpec, PackConfig
from gitpacker.packer import GitPacker

__version__ = "0.1.0"
__all__ = ["GitPacker", "PackConfig", "CloneSpec"]
