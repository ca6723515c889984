"""Pydantic v2 models for the docsetup scaffolder.

Defines the tech-stack enumeration, the immutable ``ProjectConfig`` resolved
once per run, and the schema of the generated ``.claude/config.json``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docsetup.config import DEFAULT_DOCS_REPO


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Stack(str, Enum):
    """Tech-stack profile selecting which conditional content is emitted.

    Member order is the order of the interactive menu (choices 1-6).
    """
    NEXTJS = "nextjs"
    REACT_VITE = "react-vite"
    EXPRESS = "express"
    FASTAPI = "fastapi"
    FULLSTACK = "fullstack"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _STACK_LABELS[self]

    @property
    def is_ui(self) -> bool:
        """Whether the stack has a frontend and gets the UI plugin."""
        return self in UI_STACKS

    @classmethod
    def default(cls) -> "Stack":
        return cls.NEXTJS

    @classmethod
    def menu(cls) -> list[tuple[int, "Stack"]]:
        """Return ``(choice_number, stack)`` pairs for the interactive menu."""
        return list(enumerate(cls, start=1))

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Stack"]:
        """Parse a stack identifier or menu number.

        Returns ``None`` when *value* is empty or not recognised; callers
        decide how to fall back.
        """
        if value is None:
            return None
        cleaned = value.strip().lower()
        if not cleaned:
            return None
        if cleaned.isdecimal():
            for number, stack in cls.menu():
                if number == int(cleaned):
                    return stack
            return None
        try:
            return cls(cleaned)
        except ValueError:
            return None


_STACK_LABELS: dict[Stack, str] = {
    Stack.NEXTJS: "Next.js (React + TypeScript + Tailwind)",
    Stack.REACT_VITE: "React + Vite (TypeScript + Tailwind)",
    Stack.EXPRESS: "Express (Node.js + TypeScript)",
    Stack.FASTAPI: "FastAPI (Python)",
    Stack.FULLSTACK: "Full-stack (Next.js + API)",
    Stack.CUSTOM: "Other/Custom",
}

UI_STACKS: frozenset[Stack] = frozenset({Stack.NEXTJS, Stack.REACT_VITE, Stack.FULLSTACK})


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------

class PluginEntry(BaseModel):
    """A Claude Code plugin reference in ``.claude/config.json``."""
    name: str
    source: str
    enabled: bool = True


BASE_PLUGINS: tuple[PluginEntry, ...] = (
    PluginEntry(name="superpowers", source="superpowers-marketplace"),
    PluginEntry(name="episodic-memory", source="superpowers-marketplace"),
    PluginEntry(name="feature-dev", source="claude-code-plugins"),
)

UI_PLUGIN = PluginEntry(name="frontend-design", source="claude-code-plugins")


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Immutable description of the project being scaffolded."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name shown in generated docs")
    stack: Stack = Field(default=Stack.NEXTJS)
    docs_repo: str = Field(default=DEFAULT_DOCS_REPO)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        return value

    @property
    def ui(self) -> bool:
        return self.stack.is_ui

    @property
    def plugin_entries(self) -> list[PluginEntry]:
        """Plugins written to ``.claude/config.json``, in file order."""
        entries = list(BASE_PLUGINS)
        if self.ui:
            entries.append(UI_PLUGIN)
        return entries

    @property
    def plugins(self) -> list[str]:
        """Recommended plugin names, in the order they are announced."""
        names = [p.name for p in BASE_PLUGINS]
        if self.ui:
            names.insert(1, UI_PLUGIN.name)
        return names


# ---------------------------------------------------------------------------
# .claude/config.json schema
# ---------------------------------------------------------------------------

class McpServer(BaseModel):
    enabled: bool = True


class DocumentationRef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    repository: str
    auto_import: bool = Field(default=True, alias="autoImport")


class ClaudeConfig(BaseModel):
    """Shape of the generated ``.claude/config.json``."""

    model_config = ConfigDict(populate_by_name=True)

    plugins: list[PluginEntry]
    mcp_servers: dict[str, McpServer] = Field(
        default_factory=lambda: {"filesystem": McpServer(), "github": McpServer()},
        alias="mcpServers",
    )
    documentation: DocumentationRef

    @classmethod
    def for_project(cls, config: ProjectConfig) -> "ClaudeConfig":
        return cls(
            plugins=config.plugin_entries,
            documentation=DocumentationRef(repository=config.docs_repo),
        )

    def to_json(self) -> str:
        """Serialise with aliases, 2-space indent and a trailing newline."""
        return self.model_dump_json(indent=2, by_alias=True) + "\n"
