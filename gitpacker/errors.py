"""Error types raised while loading, cloning and archiving."""

from __future__ import annotations


class GitPackerError(Exception):
    """Base class for all GitPacker errors."""

    exit_code = 1


class ConfigError(GitPackerError):
    """Configuration stage failed; no clone work can proceed."""

    exit_code = 1


class ConfigReadError(ConfigError):
    """The configuration file is missing or unreadable."""


class ConfigParseError(ConfigError):
    """The configuration file is not well-formed JSON or does not match the schema."""


class InvalidRootPathError(ConfigError):
    """The root clone directory is an absolute path."""


class CloneStageError(GitPackerError):
    """A single repository could not be cloned as configured."""

    exit_code = 2

    def __init__(self, message: str, clone_directory: str | None = None) -> None:
        super().__init__(message)
        self.clone_directory = clone_directory


class CloneError(CloneStageError):
    """Fetching the repository failed (network, protocol or bad URL)."""


class CommitResolutionError(CloneStageError):
    """HEAD of the freshly cloned repository could not be resolved."""


class CheckoutError(CloneStageError):
    """The pinned commit could not be checked out."""


class MetadataRemovalError(CloneStageError):
    """The .git directory could not be deleted."""


class ArchiveError(GitPackerError):
    """Archive stage failed."""

    exit_code = 3


class MissingArchiveFilenameError(ArchiveError):
    """Archiving is enabled but no archive filename is configured."""


class ArchiveIOError(ArchiveError):
    """Creating, reading or writing failed while building the archive."""
