"""Declarative table of files the scaffolder writes.

Each ``FileSpec`` names one output path, how its content is produced and what
happens when the path already exists.  ``FILE_SPECS`` is processed in order
by ``ProjectGenerator``; nothing here touches the file system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .models import ClaudeConfig, ProjectConfig
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------

class WritePolicy(str, Enum):
    """What to do when the target file already exists."""
    SKIP_IF_EXISTS = "skip-if-exists"
    ALWAYS_WRITE = "always-write"
    UPDATE = "update"


Producer = Callable[[ProjectConfig], str]
Updater = Callable[[str], tuple[str, list[str]]]


@dataclass(frozen=True)
class FileSpec:
    """One output file.

    Content comes from exactly one of: ``producer`` (a plain function of the
    project config), ``template`` rendered with variable substitution, or
    ``template`` copied verbatim when ``static`` is set.  ``UPDATE`` specs
    use ``update`` instead, which receives the current file text.
    """

    path: str
    policy: WritePolicy = WritePolicy.ALWAYS_WRITE
    template: Optional[str] = None
    static: bool = False
    producer: Optional[Producer] = None
    update: Optional[Updater] = None
    note: str = ""

    def produce(self, config: ProjectConfig, renderer: TemplateRenderer) -> str:
        if self.producer is not None:
            return self.producer(config)
        if self.template is None:
            raise ValueError(f"FileSpec for {self.path} has no content source")
        if self.static:
            return renderer.read_static(self.template)
        return renderer.render(self.template, template_context(config))


# ---------------------------------------------------------------------------
# Content producers
# ---------------------------------------------------------------------------

_PLUGIN_DOC_LINES: dict[str, str] = {
    "superpowers": (
        "- **Superpowers** - Use /brainstorming, /verification-before-completion, "
        "/finishing-a-development-branch"
    ),
    "frontend-design": "- **Frontend Design** - Use for UI components",
    "episodic-memory": "- **Episodic Memory** - Recall past decisions",
    "feature-dev": "- **Feature Dev** - Complex feature development",
}


def plugin_list_markdown(config: ProjectConfig) -> str:
    """Markdown bullet list of the plugins recommended for *config*'s stack."""
    return "\n".join(_PLUGIN_DOC_LINES[name] for name in config.plugins)


def template_context(config: ProjectConfig) -> dict[str, Any]:
    """Substitution variables available to every rendered template."""
    return {
        "project_name": config.name,
        "stack": config.stack.value,
        "docs_repo": config.docs_repo,
        "plugin_list": plugin_list_markdown(config),
    }


def claude_config_json(config: ProjectConfig) -> str:
    return ClaudeConfig.for_project(config).to_json()


def update_gitignore(existing: str) -> tuple[str, list[str]]:
    """Ensure ``.env`` is ignored and ``.claude`` is not.

    Returns the new text and a list of human-readable notes describing the
    edits.  When no edit is needed the input is returned unchanged.
    """
    lines = existing.splitlines()
    notes: list[str] = []

    if ".env" not in lines:
        lines.append(".env")
        notes.append("Added .env to .gitignore")

    kept = [line for line in lines if not line.startswith(".claude")]
    if len(kept) != len(lines):
        notes.append("Removed .claude from .gitignore (we want it versioned)")

    if not notes:
        return existing, notes
    return "\n".join(kept) + "\n", notes


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

COMMAND_NAMES: tuple[str, ...] = (
    "security-audit",
    "pre-merge",
    "document-feature",
    "import-docs",
    "permissions",
)

DIRECTORIES: tuple[str, ...] = (".claude/commands", ".claude/skills")

FILE_SPECS: tuple[FileSpec, ...] = (
    FileSpec("AGENTS.md", template="AGENTS.md.j2"),
    *(
        FileSpec(f".claude/commands/{name}.md", template=f"commands/{name}.md.j2", static=True)
        for name in COMMAND_NAMES
    ),
    FileSpec(".claude/config.json", producer=claude_config_json),
    FileSpec(".gitignore", policy=WritePolicy.UPDATE, update=update_gitignore),
    FileSpec(".env.example", template="env.example.j2", static=True),
    FileSpec(
        ".env",
        policy=WritePolicy.SKIP_IF_EXISTS,
        template="env.example.j2",
        static=True,
        note="Remember to fill in your actual values in .env",
    ),
    FileSpec("README.md", policy=WritePolicy.SKIP_IF_EXISTS, template="README.md.j2"),
)


def required_templates(specs: tuple[FileSpec, ...] = FILE_SPECS) -> list[str]:
    """Template names referenced by *specs*, deduplicated, in table order."""
    names: list[str] = []
    for spec in specs:
        if spec.template and spec.template not in names:
            names.append(spec.template)
    return names
