"""Optional ``git init`` of the scaffolded directory.

Git problems never fail a scaffold run: they are reported as warnings and
the function returns ``False``.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from docsetup.utils import print_success, print_warning

GIT_TIMEOUT = 30


def is_git_repository(path: str | Path) -> bool:
    return (Path(path) / ".git").exists()


def init_repository(path: str | Path) -> bool:
    """Run ``git init`` in *path*.

    Returns:
        ``True`` if a repository was initialised, ``False`` if git is missing
        or the command failed.
    """
    if shutil.which("git") is None:
        print_warning("git not found on PATH, skipping repository initialisation")
        return False

    try:
        result = subprocess.run(
            ["git", "init"],
            cwd=str(path),
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        print_warning(f"git init failed: {exc}")
        return False

    if result.returncode != 0:
        print_warning(f"git init failed (exit {result.returncode}): {result.stderr.strip()}")
        return False

    print_success("Initialized git repository")
    return True
