"""Tests for the gitpacker command."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from gitpacker.cli import (
    EXIT_ARCHIVE_ERROR,
    EXIT_CLONE_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OK,
    main,
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_pack(data: dict, filename: str = "pack.json") -> None:
    Path(filename).write_text(json.dumps(data))


class TestExitCodes:
    """Each failure class maps to its own exit code."""

    def test_exit_codes_are_distinct(self):
        assert len({EXIT_OK, EXIT_CONFIG_ERROR, EXIT_CLONE_ERROR, EXIT_ARCHIVE_ERROR}) == 4

    def test_missing_config(self, runner: CliRunner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, [])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "pack.json" in result.output

    def test_malformed_config(self, runner: CliRunner):
        with runner.isolated_filesystem():
            Path("pack.json").write_text("{not json")
            result = runner.invoke(main, [])

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_absolute_root(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_pack({"root_clone_directory": "/abs", "repos": [{"git_url": "u"}]})
            result = runner.invoke(main, [])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "absolute" in result.output

    def test_clone_failure(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_pack(
                {
                    "root_clone_directory": "out",
                    "repos": [{"clone_directory": "bad", "git_url": "no-such-repo-dir"}],
                    "archive": True,
                    "archive_filename": "bundle",
                }
            )
            result = runner.invoke(main, [])
            archive_exists = Path("bundle.zip").exists()

        assert result.exit_code == EXIT_CLONE_ERROR
        assert "Skipping archive" in result.output
        assert not archive_exists

    def test_missing_archive_filename(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_pack({"root_clone_directory": "out", "archive": True})
            result = runner.invoke(main, [])

        assert result.exit_code == EXIT_ARCHIVE_ERROR
        assert "archive_filename" in result.output

    def test_nothing_to_do(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_pack({"repos": []})
            result = runner.invoke(main, [])

        assert result.exit_code == EXIT_OK


class TestConfigLocation:
    """The config file can be chosen with --config or GITPACKER_CONFIG."""

    def test_config_option(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_pack({"root_clone_directory": "/abs"}, filename="other.json")
            result = runner.invoke(main, ["--config", "other.json"])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "absolute" in result.output

    def test_config_envvar(self, runner: CliRunner):
        with runner.isolated_filesystem():
            write_pack({"repos": []}, filename="env.json")
            result = runner.invoke(main, [], env={"GITPACKER_CONFIG": "env.json"})

        assert result.exit_code == EXIT_OK


@pytest.mark.integration
class TestRun:
    """End-to-end runs against a local repository."""

    def test_clone_and_archive(self, runner: CliRunner, source_repo):
        with runner.isolated_filesystem():
            write_pack(
                {
                    "root_clone_directory": "out",
                    "repos": [
                        {
                            "clone_directory": "project",
                            "git_url": source_repo.url,
                            "commit": source_repo.first_commit,
                            "shallow": True,
                        }
                    ],
                    "archive": True,
                    "archive_filename": "bundle",
                }
            )
            result = runner.invoke(main, [])
            with zipfile.ZipFile("bundle.zip") as zf:
                readme = zf.read("out/project/README.md")

        assert result.exit_code == EXIT_OK, result.output
        assert readme == b"v1\n"
