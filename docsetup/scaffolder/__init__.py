"""docsetup scaffolder -- writes agent-facing project boilerplate.

Takes a ``ProjectConfig`` (project name + tech stack) and writes the ordered
``FILE_SPECS`` table into a directory: ``AGENTS.md``, ``.claude/`` config and
slash commands, env files, ``.gitignore`` and a README.

Quick usage::

    from docsetup.scaffolder import ProjectConfig, ProjectGenerator, Stack

    config = ProjectConfig(name="my-app", stack=Stack.EXPRESS)
    result = ProjectGenerator(config).generate("/path/to/my-app")
"""

from docsetup.scaffolder.errors import ScaffoldEnvironmentError, ScaffoldError, WriteError
from docsetup.scaffolder.filespecs import FILE_SPECS, FileSpec, WritePolicy
from docsetup.scaffolder.generator import (
    FileResult,
    ProjectGenerator,
    ScaffoldResult,
    WriteOutcome,
)
from docsetup.scaffolder.models import ProjectConfig, Stack
from docsetup.scaffolder.sources import TemplateSource, resolve_template_source
from docsetup.scaffolder.templates import TemplateRenderer

__all__ = [
    "FILE_SPECS",
    "FileResult",
    "FileSpec",
    "ProjectConfig",
    "ProjectGenerator",
    "ScaffoldEnvironmentError",
    "ScaffoldError",
    "ScaffoldResult",
    "Stack",
    "TemplateRenderer",
    "TemplateSource",
    "WriteError",
    "WriteOutcome",
    "WritePolicy",
    "resolve_template_source",
]
