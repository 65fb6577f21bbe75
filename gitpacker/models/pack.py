"""Pack configuration models."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, field_validator

from gitpacker.errors import ConfigParseError, ConfigReadError, InvalidRootPathError

DEFAULT_CONFIG_FILENAME = "pack.json"
ZIP_FILE_SUFFIX = ".zip"


class CloneSpec(BaseModel):
    """One git repository to clone."""

    clone_directory: StrictStr = Field(
        default="", description="Directory to clone into, relative to the root clone directory"
    )
    git_url: StrictStr = Field(default="", description="URL of the repository to clone")
    commit: StrictStr = Field(default="", description="Full commit hash to check out after cloning")
    shallow: StrictBool = Field(default=False, description="Delete .git after cloning/checkout")

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("clone_directory", "git_url", "commit", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def is_pinned(self) -> bool:
        return bool(self.commit)


class PackConfig(BaseModel):
    """Root configuration for a GitPacker run.

    Repositories are cloned in the order they are declared in ``repos``.
    """

    root_clone_directory: StrictStr = Field(
        default="", description="Top level directory all repos are cloned into"
    )
    repos: list[CloneSpec] = Field(default_factory=list)
    archive: StrictBool = Field(
        default=False, description="Bundle the root clone directory into a single zip file"
    )
    archive_filename: StrictStr = Field(
        default="", description="Zip file name; .zip is appended if absent"
    )

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("root_clone_directory", "archive_filename", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("repos", mode="before")
    @classmethod
    def _none_as_no_repos(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def archive_path(self) -> str:
        """Archive filename with the .zip suffix ensured."""
        filename = self.archive_filename
        if filename and not filename.endswith(ZIP_FILE_SUFFIX):
            filename += ZIP_FILE_SUFFIX
        return filename

    def clone_path(self, spec: CloneSpec) -> str:
        """Get the destination directory for a repository."""
        if self.root_clone_directory:
            return f"{self.root_clone_directory}/{spec.clone_directory}"
        return spec.clone_directory

    def validate_root(self) -> None:
        """Reject an absolute root clone directory."""
        root = self.root_clone_directory
        if root.startswith("/") or Path(root).is_absolute():
            raise InvalidRootPathError(
                f"root_clone_directory {root} can not be an absolute path / begin with /"
            )

    @classmethod
    def from_json(cls, path: str | Path) -> "PackConfig":
        """Load pack configuration from a JSON file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigReadError(f"Error reading GitPacker config from {path}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise ConfigParseError(f"Error parsing GitPacker config from {path}: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigParseError(f"Invalid GitPacker config in {path}: {e}") from e
