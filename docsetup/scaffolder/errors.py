"""Exceptions raised by the scaffolder.

Both concrete errors are fatal: the CLI reports them and exits nonzero.
Nothing written before the failure is rolled back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ScaffoldError(Exception):
    """Base class for fatal scaffolding failures."""


class ScaffoldEnvironmentError(ScaffoldError):
    """Raised when templates can neither be found locally nor downloaded."""

    def __init__(self, message: str, url: str = "", stderr: str = ""):
        self.url = url
        self.stderr = stderr
        super().__init__(message)


class WriteError(ScaffoldError):
    """Raised when a target path cannot be created, read or written."""

    def __init__(self, path: Path, reason: Optional[BaseException] = None):
        self.path = Path(path)
        self.reason = reason
        detail = f": {reason.strerror or reason}" if isinstance(reason, OSError) else ""
        if reason is not None and not detail:
            detail = f": {reason}"
        super().__init__(f"Cannot write {self.path}{detail}")
