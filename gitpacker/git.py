"""Git cloner for a single repository."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from gitpacker.errors import (
    CheckoutError,
    CloneError,
    CommitResolutionError,
    MetadataRemovalError,
)
from gitpacker.models.pack import CloneSpec

logger = logging.getLogger(__name__)

GIT_METADATA_DIR = ".git"


class GitCloner:
    """Clones repositories with the ``git`` executable.

    Each call blocks until git exits. Nothing is retried.
    """

    def __init__(self, git_executable: str = "git", cwd: Path | None = None) -> None:
        self.git_executable = git_executable
        self.cwd = cwd

    def clone(self, spec: CloneSpec, destination: str | Path) -> str | None:
        """Clone ``spec`` into ``destination``.

        Checks out the pinned commit if one is configured, then strips
        ``.git`` when the spec is shallow. Returns the pinned commit hash,
        or None when the default branch tip was kept.
        """
        dest = self._resolve(destination)
        name = spec.clone_directory

        try:
            self._run_command([self.git_executable, "clone", "--", spec.git_url, str(dest)])
        except (subprocess.CalledProcessError, OSError) as e:
            raise CloneError(
                f"git clone {spec.git_url} into {destination} failed: {_describe(e)}",
                clone_directory=name,
            ) from e

        # Only checkout a specific commit if one is pinned,
        # otherwise the default branch tip is kept
        if not spec.is_pinned:
            if spec.shallow:
                self.strip_metadata(dest, name)
            return None

        logger.info("git show-ref --head HEAD")
        head = self._head(dest, name)
        logger.info(head)

        logger.info(f"git checkout {spec.commit}")
        try:
            self._run_command(
                [self.git_executable, "checkout", "--detach", spec.commit, "--"],
                cwd=dest,
            )
        except (subprocess.CalledProcessError, OSError) as e:
            raise CheckoutError(
                f"git checkout {spec.commit} in {destination} failed: {_describe(e)}",
                clone_directory=name,
            ) from e

        # Must come after the checkout; git needs its metadata to move to the commit
        if spec.shallow:
            self.strip_metadata(dest, name)

        return spec.commit

    def strip_metadata(self, repo_path: Path, name: str | None = None) -> None:
        """Delete the .git directory of a working copy."""
        git_dir = repo_path / GIT_METADATA_DIR
        if not git_dir.exists():
            return
        logger.debug(f"Removing {git_dir}")
        try:
            shutil.rmtree(git_dir)
        except OSError as e:
            raise MetadataRemovalError(
                f"Removing {git_dir} failed: {e}", clone_directory=name
            ) from e

    def _head(self, repo_path: Path, name: str | None = None) -> str:
        try:
            result = self._run_command(
                [self.git_executable, "rev-parse", "HEAD"], cwd=repo_path
            )
        except (subprocess.CalledProcessError, OSError) as e:
            raise CommitResolutionError(
                f"Resolving HEAD in {repo_path} failed: {_describe(e)}",
                clone_directory=name,
            ) from e
        return result.stdout.strip()

    def _resolve(self, path: str | Path) -> Path:
        path = Path(path)
        if self.cwd is not None and not path.is_absolute():
            return self.cwd / path
        return path

    def _run_command(
        self, cmd: list[str], cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        """Run a git command and wait for it to exit."""
        logger.debug(" ".join(cmd))
        env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
        return subprocess.run(
            cmd,
            cwd=cwd if cwd is not None else self.cwd,
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )


def _describe(error: Exception) -> str:
    if isinstance(error, subprocess.CalledProcessError):
        stderr = (error.stderr or "").strip()
        return stderr or f"exit status {error.returncode}"
    return str(error)
