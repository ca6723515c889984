"""Integration tests for the full scaffold flow.

These tests run the real CLI against a temporary directory and verify the
generated tree, re-run behaviour and (when git is installed) repository
initialisation.  No network access is required.
"""

from __future__ import annotations

import json
import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from docsetup.cli import run


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file() and ".git" not in p.relative_to(root).parts
    }


@pytest.mark.integration
class TestScaffoldFlow:
    """End-to-end checks of a scaffolded project directory."""

    def test_full_tree(self, project_dir: Path) -> None:
        assert run(["my-app", "nextjs", "--dir", str(project_dir), "--yes", "--no-git"]) == 0

        files = set(_snapshot(project_dir))
        assert files == {
            "AGENTS.md",
            "README.md",
            ".env",
            ".env.example",
            ".gitignore",
            ".claude/config.json",
            ".claude/commands/security-audit.md",
            ".claude/commands/pre-merge.md",
            ".claude/commands/document-feature.md",
            ".claude/commands/import-docs.md",
            ".claude/commands/permissions.md",
        }
        assert (project_dir / ".claude" / "skills").is_dir()

        config = json.loads((project_dir / ".claude" / "config.json").read_text(encoding="utf-8"))
        assert config["documentation"]["autoImport"] is True
        assert "frontend-design" in [p["name"] for p in config["plugins"]]

    def test_rerun_is_stable(self, project_dir: Path) -> None:
        args = ["my-app", "fullstack", "--dir", str(project_dir), "--yes", "--no-git"]
        assert run(args) == 0
        first = _snapshot(project_dir)
        assert run(args) == 0
        assert _snapshot(project_dir) == first

    def test_switching_stack_keeps_user_files(self, project_dir: Path) -> None:
        assert run(["my-app", "nextjs", "--dir", str(project_dir), "--yes", "--no-git"]) == 0
        readme = (project_dir / "README.md").read_text(encoding="utf-8")

        assert run(["my-app", "fastapi", "--dir", str(project_dir), "--yes", "--no-git"]) == 0

        assert (project_dir / "README.md").read_text(encoding="utf-8") == readme
        assert "**Framework:** nextjs" in readme
        agents = (project_dir / "AGENTS.md").read_text(encoding="utf-8")
        assert "**Framework:** fastapi" in agents
        assert "Frontend Design" not in agents

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_git_init(self, project_dir: Path) -> None:
        assert run(["my-app", "express", "--dir", str(project_dir), "--yes", "--git"]) == 0
        assert (project_dir / ".git").is_dir()

    def test_python_module_entry_point(self, project_dir: Path) -> None:
        proc = subprocess.run(
            [sys.executable, "-m", "docsetup", "demo", "custom", "--dir", str(project_dir),
             "--yes", "--no-git"],
            capture_output=True,
            text=True,
            timeout=60,
            env={**os.environ, "PYTHONIOENCODING": "utf-8"},
        )
        assert proc.returncode == 0, proc.stderr
        assert "# Project: demo" in (project_dir / "AGENTS.md").read_text(encoding="utf-8")
