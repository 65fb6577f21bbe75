"""Main GitPacker class - clones all configured repositories and archives them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from gitpacker.archive import zip_directory
from gitpacker.errors import CloneStageError, MissingArchiveFilenameError
from gitpacker.git import GitCloner
from gitpacker.models.pack import PackConfig
from gitpacker.models.result import CloneResult, PackResult

logger = logging.getLogger(__name__)


class GitPacker:
    """Runs one pack: clone every repo in order, then optionally zip the tree."""

    def __init__(
        self,
        config: PackConfig,
        work_dir: str | Path | None = None,
        cloner: GitCloner | None = None,
    ) -> None:
        self.config = config
        self.work_dir = Path(work_dir) if work_dir else Path.cwd()
        self.cloner = cloner or GitCloner(cwd=self.work_dir)

    def run(
        self,
        progress_callback: Callable[[CloneResult, int, int], None] | None = None,
    ) -> PackResult:
        """Clone all repositories and build the archive if enabled.

        Args:
            progress_callback: Optional callback(result, index, total) called after each repo

        Returns:
            PackResult with one CloneResult per repo and the archive path, if written

        Raises:
            InvalidRootPathError: root clone directory is absolute, nothing is cloned
            ArchiveError: all clones succeeded but the archive could not be written
        """
        self.config.validate_root()

        result = PackResult(clones=self.clone_all(progress_callback))
        if result.failed:
            for failure in result.failed_clones:
                logger.error(f"Cloning error {failure.error}")
            return result

        # If specified, compress all cloned repositories into a single zip file
        if self.config.archive:
            result.archive_path = self.archive()
        return result

    def clone_all(
        self,
        progress_callback: Callable[[CloneResult, int, int], None] | None = None,
    ) -> list[CloneResult]:
        """Clone every configured repo one at a time, recording failures.

        Clones run serially; some hosts (e.g. GitHub) limit open
        connections per IP.
        """
        results: list[CloneResult] = []
        total = len(self.config.repos)

        for index, spec in enumerate(self.config.repos, start=1):
            path = self.config.clone_path(spec)
            logger.info(f"Cloning {spec.git_url} into {path}")
            try:
                commit = self.cloner.clone(spec, path)
                clone_result = CloneResult(spec=spec, path=path, commit=commit)
            except CloneStageError as e:
                clone_result = CloneResult(
                    spec=spec, path=path, error=str(e), error_type=type(e).__name__
                )
            results.append(clone_result)

            if progress_callback:
                progress_callback(clone_result, index, total)

        return results

    def archive(self) -> str:
        """Zip the root clone directory. Returns the archive path."""
        if not self.config.archive_filename:
            raise MissingArchiveFilenameError("Must specify archive_filename if archive is true.")

        archive_path = self.config.archive_path
        root = self.config.root_clone_directory
        directory = self.work_dir / root if root else self.work_dir
        zip_directory(directory, self.work_dir / archive_path, base_dir=self.work_dir)
        return archive_path
