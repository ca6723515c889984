"""Unit tests for console and path helpers (docsetup.utils)."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsetup.utils import (
    default_project_name,
    ensure_dir,
    print_error,
    print_header,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
)

pytestmark = pytest.mark.unit


class TestDefaultProjectName:
    def test_uses_directory_name(self, tmp_path):
        target = tmp_path / "my-app"
        target.mkdir()
        assert default_project_name(target) == "my-app"

    def test_resolves_dot(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert default_project_name(".") == tmp_path.resolve().name

    def test_root_falls_back(self):
        assert default_project_name(Path("/")) == "project"


class TestSanitizeName:
    def test_collapses_whitespace(self):
        assert sanitize_name("  My   App ") == "My App"

    def test_empty(self):
        assert sanitize_name("   ") == ""


class TestEnsureDir:
    def test_creates_nested(self, tmp_path):
        path = ensure_dir(tmp_path / "a" / "b")
        assert path.is_dir()

    def test_existing_ok(self, tmp_path):
        assert ensure_dir(tmp_path) == tmp_path


class TestPrintHelpers:
    def test_status_lines(self, console_text):
        print_success("done")
        print_info("note")
        print_warning("careful")
        print_error("broken")
        out = console_text()
        assert "✓ done" in out
        assert "ℹ note" in out
        assert "⚠ careful" in out
        assert "✗ broken" in out

    def test_markup_in_message_is_literal(self, console_text):
        print_error("[Errno 13] [bold]not styled[/bold]")
        out = console_text()
        assert "[bold]not styled[/bold]" in out

    def test_header_and_table(self, console_text):
        print_header("Project Setup")
        print_summary_table({"AGENTS.md": "created"}, title="Files")
        out = console_text()
        assert "Project Setup" in out
        assert "AGENTS.md" in out
        assert "created" in out
