"""Run result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from gitpacker.models.pack import CloneSpec


class CloneResult(BaseModel):
    """Outcome of cloning a single repository."""

    spec: CloneSpec
    path: str = Field(..., description="Directory the repository was cloned into")
    commit: str | None = Field(default=None, description="Commit checked out after cloning")
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PackResult(BaseModel):
    """Summary of a full GitPacker run."""

    clones: list[CloneResult] = Field(default_factory=list)
    archive_path: str | None = Field(default=None, description="Zip file written, if any")

    @property
    def failed_clones(self) -> list[CloneResult]:
        return [c for c in self.clones if not c.ok]

    @property
    def failed(self) -> bool:
        return bool(self.failed_clones)
