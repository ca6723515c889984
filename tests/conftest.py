"""Shared pytest fixtures for the docsetup test suite.

Provides reusable fixtures for:
- Temporary target directories
- ProjectConfig factories per stack
- Non-interactive Settings pointing at the packaged templates
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

import pytest

from docsetup.config import Settings
from docsetup.scaffolder import ProjectConfig, ProjectGenerator, Stack


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty directory to scaffold into (auto-cleanup)."""
    target = tmp_path / "my-app"
    target.mkdir()
    return target


@pytest.fixture
def blocked_dir(tmp_path: Path) -> Path:
    """A path that cannot be used as a directory because it is a regular file.

    Works even when the suite runs as root, where permission bits are ignored.
    """
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied\n", encoding="utf-8")
    return blocker


# ---------------------------------------------------------------------------
# Config / generator factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    def _make(name: str = "my-app", stack: Stack | str = Stack.NEXTJS) -> ProjectConfig:
        return ProjectConfig(name=name, stack=Stack(stack))
    return _make


@pytest.fixture
def run_generator(make_config) -> Callable[..., object]:
    """Generate into a directory and return the ``ScaffoldResult``."""
    def _run(target: Path, name: str = "my-app", stack: Stack | str = Stack.NEXTJS):
        return ProjectGenerator(make_config(name, stack)).generate(target)
    return _run


@pytest.fixture
def settings(project_dir: Path, tmp_path: Path) -> Settings:
    """Non-interactive settings targeting ``project_dir``."""
    return Settings(
        target_dir=project_dir,
        interactive=False,
        init_git=False,
        cache_dir=tmp_path / "cache",
    )


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


@pytest.fixture
def console_text(capsys) -> Callable[[], str]:
    """Read captured stdout with ANSI styling removed."""
    def _read() -> str:
        return _ANSI.sub("", capsys.readouterr().out)
    return _read
