"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and writes the ordered ``FILE_SPECS`` table into a
target directory: ``AGENTS.md``, the ``.claude/`` configuration and slash
commands, env files, ``.gitignore`` and a README.  The run is a single pass
with no rollback; re-running is safe because user-owned files are only
written when absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from docsetup.utils import ensure_dir, print_header, print_info, print_success, print_warning

from .errors import WriteError
from .filespecs import DIRECTORIES, FILE_SPECS, FileSpec, WritePolicy
from .models import ProjectConfig
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class WriteOutcome(str, Enum):
    """What happened to a single output file."""
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass
class FileResult:
    path: str
    outcome: WriteOutcome


@dataclass
class ScaffoldResult:
    """Outcome of a generator run, in table order."""

    root: Path
    files: list[FileResult] = field(default_factory=list)

    def outcome_for(self, path: str) -> Optional[WriteOutcome]:
        for item in self.files:
            if item.path == path:
                return item.outcome
        return None

    @property
    def skipped(self) -> list[str]:
        return [f.path for f in self.files if f.outcome is WriteOutcome.SKIPPED]

    @property
    def written(self) -> list[str]:
        return [
            f.path
            for f in self.files
            if f.outcome not in (WriteOutcome.SKIPPED, WriteOutcome.UNCHANGED)
        ]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes the scaffold for one ``ProjectConfig``.

    The generator owns no state beyond its inputs: the same config, renderer
    and file table always produce the same bytes for every always-write file.
    """

    def __init__(
        self,
        config: ProjectConfig,
        renderer: Optional[TemplateRenderer] = None,
        specs: tuple[FileSpec, ...] = FILE_SPECS,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.specs = specs

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path) -> ScaffoldResult:
        """Write every file in the table into *output_dir*.

        Args:
            output_dir: The project directory itself (files are written
                directly into it, not into a subdirectory).  Created if
                missing.

        Returns:
            A ``ScaffoldResult`` listing each file's outcome.

        Raises:
            WriteError: On the first path that cannot be created or written.
                Files written before the failure stay on disk.
        """
        root = Path(output_dir)

        print_header("Setting up .claude/ directory")
        self._create_directories(root)

        print_header("Writing project files")
        result = ScaffoldResult(root=root)
        for spec in self.specs:
            result.files.append(self.write_spec(root, spec))
        return result

    def write_spec(self, root: Path, spec: FileSpec) -> FileResult:
        """Apply one ``FileSpec`` under *root* according to its policy."""
        target = root / spec.path
        exists = target.exists()

        if spec.policy is WritePolicy.SKIP_IF_EXISTS and exists:
            print_warning(f"{spec.path} already exists, skipping")
            return FileResult(spec.path, WriteOutcome.SKIPPED)

        if spec.policy is WritePolicy.UPDATE:
            return self._update(target, spec, exists)

        content = spec.produce(self.config, self.renderer)
        _write_text(target, content)
        if exists:
            print_success(f"Regenerated {spec.path}")
            return FileResult(spec.path, WriteOutcome.OVERWRITTEN)

        print_success(f"Created {spec.path}")
        if spec.note:
            print_warning(spec.note)
        return FileResult(spec.path, WriteOutcome.CREATED)

    # -- Internals ---------------------------------------------------------

    def _create_directories(self, root: Path) -> None:
        _mkdir(root)
        for directory in DIRECTORIES:
            _mkdir(root / directory)
            print_success(f"Created {directory}/")

    def _update(self, target: Path, spec: FileSpec, exists: bool) -> FileResult:
        if spec.update is None:
            raise ValueError(f"FileSpec for {spec.path} has no update function")

        existing = _read_text(target) if exists else ""
        text, notes = spec.update(existing)
        if exists and text == existing:
            print_info(f"{spec.path} already up to date")
            return FileResult(spec.path, WriteOutcome.UNCHANGED)

        _write_text(target, text)
        for note in notes:
            print_success(note)
        outcome = WriteOutcome.UPDATED if exists else WriteOutcome.CREATED
        return FileResult(spec.path, outcome)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------

def _mkdir(path: Path) -> None:
    try:
        ensure_dir(path)
    except OSError as exc:
        raise WriteError(path, exc) from exc


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, exc) from exc


def _write_text(path: Path, content: str) -> None:
    _mkdir(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, exc) from exc
