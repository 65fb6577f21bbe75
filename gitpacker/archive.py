"""Zip archive builder for the cloned tree."""

from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path

from gitpacker.errors import ArchiveIOError

logger = logging.getLogger(__name__)


def zip_directory(
    directory: str | Path,
    zip_path: str | Path,
    base_dir: str | Path | None = None,
) -> int:
    """Write every regular file under ``directory`` into a zip file.

    Entry names are relative to ``base_dir`` (the parent of ``directory``
    by default), so they include the directory's own path segment.
    Directories get no entries of their own. An existing zip file is
    overwritten; a partially written one is left in place on failure.

    Returns the number of files written.
    """
    directory = Path(directory)
    zip_path = Path(zip_path)
    base_dir = Path(base_dir) if base_dir is not None else directory.parent

    if not directory.is_dir():
        raise ArchiveIOError(f"Cannot archive {directory}: not a directory")

    count = 0
    try:
        with zipfile.ZipFile(
            zip_path, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False
        ) as zf:
            output = zip_path.resolve()

            def raise_walk_error(error: OSError) -> None:
                raise error

            for dirpath, dirnames, filenames in os.walk(directory, onerror=raise_walk_error):
                dirnames.sort()
                for filename in sorted(filenames):
                    file_path = Path(dirpath) / filename
                    logger.debug(f"Crawling: {file_path}")
                    if not file_path.is_file():
                        logger.warning(f"Skipping {file_path}: not a regular file")
                        continue
                    if file_path.resolve() == output:
                        continue

                    arcname = Path(os.path.relpath(file_path, base_dir)).as_posix()
                    zf.write(file_path, arcname=arcname)
                    count += 1
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        raise ArchiveIOError(f"Error zipping directory {directory} to {zip_path}: {e}") from e

    logger.info(f"Wrote {count} files to {zip_path}")
    return count
