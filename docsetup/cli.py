"""Command-line entry point for ``docsetup``.

Resolves the project name and tech stack (prompting when interactive),
locates templates, runs the generator, optionally initialises git and prints
the next steps.  Fatal scaffolding errors exit with status 1.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import TemplateNotFound
from pydantic import ValidationError
from rich.prompt import Confirm, Prompt

from docsetup import __version__
from docsetup.config import Settings
from docsetup.scaffolder import (
    ProjectConfig,
    ProjectGenerator,
    ScaffoldEnvironmentError,
    ScaffoldResult,
    Stack,
    TemplateRenderer,
    TemplateSource,
    WriteError,
    resolve_template_source,
)
from docsetup.scaffolder.filespecs import COMMAND_NAMES, required_templates
from docsetup.scaffolder.git import init_repository, is_git_repository
from docsetup.utils import (
    console,
    default_project_name,
    print_error,
    print_header,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
)

_COMMAND_DESCRIPTIONS: dict[str, str] = {
    "permissions": "Auto-approve safe operations (use at session start)",
    "security-audit": "Run OWASP Top 10 security tests",
    "pre-merge": "Complete pre-merge checklist",
    "document-feature": "Add comprehensive docs",
    "import-docs": "Update documentation standards",
}

_AGENTS: tuple[tuple[str, str], ...] = (
    ("build-validator", "Validate builds before commit"),
    ("code-architect", "Design architecture before implementing"),
    ("code-simplifier", "Simplify over-engineered code"),
)

_START_DEVELOPING: tuple[str, ...] = (
    "Run /permissions at start of each session",
    "Use /brainstorming before new features",
    "Use code-architect agent for complex features",
    "Follow coding-standards.md (extensive comments)",
    "Use build-validator agent before commits",
    "Run /pre-merge before creating PRs",
    "Use /verification-before-completion before merging",
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    stacks = ", ".join(s.value for s in Stack)
    parser = argparse.ArgumentParser(
        prog="docsetup",
        description="Scaffold AGENTS.md, Claude Code config and env files into a project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  docsetup my-app nextjs\n"
            "  docsetup my-api express --yes\n"
            "  docsetup                      # interactive mode\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", default=None, help="Project name")
    parser.add_argument(
        "stack", nargs="?", default=None, help=f"Tech stack ({stacks}) or menu number 1-6"
    )
    parser.add_argument(
        "--dir", "-C",
        dest="target_dir",
        default=None,
        help="Directory to scaffold into (default: current directory)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Never prompt; use defaults for anything not given",
    )
    parser.add_argument("--templates-dir", default=None, help="Use templates from this directory")
    parser.add_argument(
        "--remote",
        action="store_true",
        help="Download templates from the documentation repository",
    )
    parser.add_argument("--git", dest="init_git", action="store_true", help="Run git init without asking")
    parser.add_argument("--no-git", dest="init_git", action="store_false", help="Skip git init")
    parser.set_defaults(init_git=None)
    parser.add_argument("--config", default=None, help="Load settings from a JSON file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_settings(args: argparse.Namespace, stdin_isatty: Optional[bool] = None) -> Settings:
    """Merge settings from ``--config`` (or the environment) with CLI flags."""
    base = Settings.load(Path(args.config)) if args.config else Settings.from_env()

    if stdin_isatty is None:
        stdin_isatty = sys.stdin.isatty()

    updates: dict[str, object] = {"interactive": base.interactive and stdin_isatty and not args.yes}
    if args.target_dir:
        updates["target_dir"] = Path(args.target_dir)
    if args.templates_dir:
        updates["templates_dir"] = Path(args.templates_dir)
    if args.remote:
        updates["remote"] = True
    if args.init_git is not None:
        updates["init_git"] = args.init_git
    return base.model_copy(update=updates)


# ---------------------------------------------------------------------------
# Project resolution
# ---------------------------------------------------------------------------


def _prompt_stack() -> Stack:
    console.print()
    console.print("Select tech stack:")
    for number, stack in Stack.menu():
        console.print(f"  {number}) {stack.label}")
    console.print()
    choice = Prompt.ask("Choice [1-6]", console=console, default="", show_default=False)
    stack = Stack.parse(choice)
    if stack is None:
        stack = Stack.default()
        print_warning(f"Invalid choice '{choice}', defaulting to {stack.value}")
    return stack


def resolve_project_config(
    name: Optional[str], stack_value: Optional[str], settings: Settings
) -> ProjectConfig:
    """Turn raw CLI input into a validated ``ProjectConfig``.

    Missing values are prompted for when interactive.  An unknown stack never
    aborts the run: it falls back to the default with a warning.
    """
    project_name = sanitize_name(name or "")
    if not project_name:
        fallback = default_project_name(settings.target_dir)
        if settings.interactive:
            answer = Prompt.ask("Project name", console=console, default=fallback)
            project_name = sanitize_name(answer) or fallback
        else:
            project_name = fallback

    stack = Stack.parse(stack_value)
    if stack_value and stack is None:
        print_warning(f"Unknown tech stack '{stack_value}'")
    if stack is None:
        if settings.interactive:
            stack = _prompt_stack()
        else:
            stack = Stack.default()
            if stack_value:
                print_warning(f"Defaulting to {stack.value}")
            else:
                print_info(f"No tech stack given, using {stack.value}")

    return ProjectConfig(name=project_name, stack=stack, docs_repo=settings.docs_repo)


# ---------------------------------------------------------------------------
# Post-generation steps
# ---------------------------------------------------------------------------


def describe_template_source(source: TemplateSource) -> str:
    """One-line description of where this run's templates come from."""
    if source.kind == "remote":
        return f"Using templates downloaded with {source.tool} into {source.directory}"
    return f"Using local templates from {source.directory}"


def setup_git(settings: Settings) -> bool:
    """Initialise a git repository in the target if wanted.

    Returns ``True`` only when ``git init`` actually ran successfully.
    """
    print_header("Git Setup")
    target = settings.target_dir
    if is_git_repository(target):
        print_info("Git repository already initialized")
        return False

    wanted = settings.init_git
    if wanted is None:
        wanted = settings.interactive and Confirm.ask(
            "Initialize git repository?", console=console, default=True
        )
    if not wanted:
        print_info("Skipping git initialisation")
        return False
    return init_repository(target)


def print_next_steps(config: ProjectConfig, result: ScaffoldResult) -> None:
    print_header("Setup Complete!")
    print_summary_table(
        {item.path: item.outcome.value for item in result.files}, title="Files"
    )
    console.print(
        f"{len(result.written)} file(s) written, {len(result.skipped)} left untouched"
        f" in {result.root}"
    )
    console.print()
    console.print("Next steps:")
    console.print()
    console.print("1. Install Claude Code plugins:")
    console.print("   • Open Claude Code")
    console.print("   • Settings > Plugins")
    console.print("   • Install: Superpowers, Episodic Memory, Feature Dev")
    if config.ui:
        console.print("   • Install: Frontend Design (for UI work)")
    console.print()
    console.print("2. Review generated files:")
    console.print("   • AGENTS.md - Project-specific AI agent instructions")
    console.print("   • .claude/commands/ - Custom slash commands")
    console.print("   • .claude/config.json - Claude Code configuration")
    console.print("   • .env.example - Environment variables template")
    console.print()
    console.print("3. Available slash commands:")
    for name in ("permissions", *(n for n in COMMAND_NAMES if n != "permissions")):
        console.print(f"   • /{name} - {_COMMAND_DESCRIPTIONS[name]}")
    console.print()
    console.print("4. Essential agents to use:")
    for name, description in _AGENTS:
        console.print(f"   • {name} - {description}")
    console.print()
    console.print("5. Start developing:")
    for step in _START_DEVELOPING:
        console.print(f"   • {step}")
    console.print()
    console.print(f"Recommended plugins: {', '.join(config.plugins)}")
    console.print(f"Documentation: {config.docs_repo}")
    console.print()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
    except (OSError, ValidationError) as exc:
        parser.error(f"cannot load settings: {exc}")

    print_header("Documentation Setup")
    console.print("Setting up project with coding standards from:")
    console.print(settings.docs_repo)

    try:
        print_header("Project Setup")
        config = resolve_project_config(args.project_name, args.stack, settings)
        print_success(f"Project: {config.name}")
        print_success(f"Tech stack: {config.stack.value}")

        source = resolve_template_source(settings, required_templates())
        print_info(describe_template_source(source))
        generator = ProjectGenerator(config, TemplateRenderer(source.directory))
        result = generator.generate(settings.target_dir)
        setup_git(settings)
    except ScaffoldEnvironmentError as exc:
        print_error(str(exc))
        if exc.stderr:
            console.print(exc.stderr, markup=False)
        return 1
    except WriteError as exc:
        print_error(str(exc))
        return 1
    except TemplateNotFound as exc:
        print_error(f"Template not found: {exc.name}")
        return 1
    except KeyboardInterrupt:
        print_error("Aborted")
        return 130

    print_next_steps(config, result)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``docsetup`` and ``python -m docsetup``."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
