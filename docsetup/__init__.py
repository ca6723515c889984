"""docsetup -- scaffold AGENTS.md, Claude Code config and env files into a project."""

__version__ = "0.1.0"
