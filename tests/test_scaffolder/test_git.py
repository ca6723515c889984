"""Tests for the optional git initialisation (docsetup.scaffolder.git)."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from docsetup.scaffolder.git import init_repository, is_git_repository

pytestmark = pytest.mark.unit

GIT = "docsetup.scaffolder.git"


def _completed(returncode: int = 0, stderr: str = "") -> MagicMock:
    proc = MagicMock()
    proc.returncode = returncode
    proc.stderr = stderr
    return proc


class TestIsGitRepository:
    def test_detects_dot_git(self, tmp_path):
        assert is_git_repository(tmp_path) is False
        (tmp_path / ".git").mkdir()
        assert is_git_repository(tmp_path) is True


class TestInitRepository:
    def test_success(self, tmp_path):
        with patch(f"{GIT}.shutil.which", return_value="/usr/bin/git"), \
                patch(f"{GIT}.subprocess.run", return_value=_completed()) as run:
            assert init_repository(tmp_path) is True
        assert run.call_args.args[0] == ["git", "init"]
        assert run.call_args.kwargs["cwd"] == str(tmp_path)

    def test_git_missing(self, tmp_path, console_text):
        with patch(f"{GIT}.shutil.which", return_value=None), \
                patch(f"{GIT}.subprocess.run") as run:
            assert init_repository(tmp_path) is False
        run.assert_not_called()
        assert "git not found" in console_text()

    def test_nonzero_exit_is_warning(self, tmp_path, console_text):
        with patch(f"{GIT}.shutil.which", return_value="/usr/bin/git"), \
                patch(f"{GIT}.subprocess.run", return_value=_completed(128, "fatal: boom\n")):
            assert init_repository(tmp_path) is False
        assert "fatal: boom" in console_text()

    def test_timeout_is_warning(self, tmp_path):
        with patch(f"{GIT}.shutil.which", return_value="/usr/bin/git"), \
                patch(f"{GIT}.subprocess.run", side_effect=subprocess.TimeoutExpired("git", 30)):
            assert init_repository(tmp_path) is False
