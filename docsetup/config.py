"""docsetup configuration.

Typed run settings for the scaffolder. Settings use Pydantic v2 models so they
can be validated at construction time and loaded from JSON or environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

DEFAULT_DOCS_REPO = "https://github.com/causius0/documentation"
DEFAULT_DOCS_RAW = "https://raw.githubusercontent.com/causius0/documentation/main"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    return None


class Settings(BaseModel):
    """Settings for a single ``docsetup`` run.

    Instances are created once by the CLI entry point (from flags, the
    environment or a JSON file) and passed to the template-source resolver,
    the generator and the git step.
    """

    docs_repo: str = Field(
        default=DEFAULT_DOCS_REPO,
        description="Documentation repository linked from generated files",
    )
    docs_raw: str = Field(
        default=DEFAULT_DOCS_RAW,
        description="Raw-content base URL templates are downloaded from",
    )
    target_dir: Path = Field(default=Path("."))
    templates_dir: Optional[Path] = Field(
        default=None, description="Local template directory overriding the packaged one"
    )
    remote: bool = Field(default=False, description="Always download templates")
    cache_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()) / "docsetup-templates",
        description="Where downloaded templates are stored",
    )
    interactive: bool = Field(default=True)
    init_git: Optional[bool] = Field(
        default=None, description="True/False to force, None to ask (interactive only)"
    )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def templates_url(self) -> str:
        """Base URL of the downloadable template tree."""
        return f"{self.docs_raw.rstrip('/')}/templates"

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load settings from a JSON file.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Settings`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            DOCSETUP_DOCS_REPO, DOCSETUP_DOCS_RAW, DOCSETUP_TARGET_DIR,
            DOCSETUP_TEMPLATES_DIR, DOCSETUP_CACHE_DIR, DOCSETUP_INIT_GIT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DOCSETUP_DOCS_REPO"):
            kwargs["docs_repo"] = os.environ["DOCSETUP_DOCS_REPO"]
        if os.environ.get("DOCSETUP_DOCS_RAW"):
            kwargs["docs_raw"] = os.environ["DOCSETUP_DOCS_RAW"]
        if os.environ.get("DOCSETUP_TARGET_DIR"):
            kwargs["target_dir"] = Path(os.environ["DOCSETUP_TARGET_DIR"])
        if os.environ.get("DOCSETUP_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["DOCSETUP_TEMPLATES_DIR"])
        if os.environ.get("DOCSETUP_CACHE_DIR"):
            kwargs["cache_dir"] = Path(os.environ["DOCSETUP_CACHE_DIR"])
        if os.environ.get("DOCSETUP_INIT_GIT"):
            kwargs["init_git"] = _parse_bool(os.environ["DOCSETUP_INIT_GIT"])
        return cls(**kwargs)
