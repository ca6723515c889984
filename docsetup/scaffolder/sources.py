"""Template source resolution.

Templates normally ship inside the package.  When a local template tree is
unavailable (or a refresh from the documentation repository is requested)
they are downloaded with whichever of ``curl`` or ``wget`` is installed.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from docsetup.config import Settings
from docsetup.utils import ensure_dir, print_info, print_success

from .errors import ScaffoldEnvironmentError, WriteError
from .templates import DEFAULT_TEMPLATE_DIR

DOWNLOAD_TOOLS: tuple[str, ...] = ("curl", "wget")
DOWNLOAD_TIMEOUT = 60


@dataclass
class TemplateSource:
    """Where templates are loaded from for this run."""

    directory: Path
    kind: str  # "local" or "remote"
    tool: Optional[str] = None


# ---------------------------------------------------------------------------
# Download mechanism
# ---------------------------------------------------------------------------


def find_download_tool() -> Optional[str]:
    """Return the first available download tool on PATH, or ``None``."""
    for tool in DOWNLOAD_TOOLS:
        if shutil.which(tool):
            return tool
    return None


def _download_command(tool: str, url: str, output: Path) -> list[str]:
    if tool == "curl":
        return ["curl", "-fsSL", url, "-o", str(output)]
    return ["wget", "-q", url, "-O", str(output)]


def download_file(url: str, output: Path, tool: str) -> None:
    """Download *url* to *output* with *tool*.

    Raises:
        ScaffoldEnvironmentError: If the tool exits non-zero or times out.
        WriteError: If the cache directory cannot be created.
    """
    try:
        ensure_dir(output.parent)
    except OSError as exc:
        raise WriteError(output.parent, exc) from exc
    cmd = _download_command(tool, url, output)
    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, timeout=DOWNLOAD_TIMEOUT
        )
    except subprocess.TimeoutExpired:
        raise ScaffoldEnvironmentError(
            f"Download timed out after {DOWNLOAD_TIMEOUT}s: {url}", url=url
        )
    if result.returncode != 0:
        raise ScaffoldEnvironmentError(
            f"Failed to download {url} with {tool} (exit {result.returncode})",
            url=url,
            stderr=result.stderr.strip(),
        )


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_template_source(
    settings: Settings,
    template_names: Iterable[str],
    packaged_dir: Path = DEFAULT_TEMPLATE_DIR,
) -> TemplateSource:
    """Pick the template directory for this run.

    Order: an explicit ``settings.templates_dir``; the packaged templates
    (unless ``settings.remote``); otherwise download every template in
    *template_names* into ``settings.cache_dir``.

    Raises:
        ScaffoldEnvironmentError: If an explicit template directory is missing,
            or a download is needed and neither curl nor wget is installed.
    """
    if settings.templates_dir is not None:
        if not settings.templates_dir.is_dir():
            raise ScaffoldEnvironmentError(
                f"Template directory not found: {settings.templates_dir}"
            )
        return TemplateSource(directory=settings.templates_dir, kind="local")

    if not settings.remote and packaged_dir.is_dir():
        return TemplateSource(directory=packaged_dir, kind="local")

    tool = find_download_tool()
    if tool is None:
        raise ScaffoldEnvironmentError(
            "Neither curl nor wget found. Please install curl or wget."
        )

    print_info(f"Downloading templates from {settings.templates_url} (via {tool})")
    for name in template_names:
        download_file(f"{settings.templates_url}/{name}", settings.cache_dir / name, tool)
    print_success(f"Templates cached in {settings.cache_dir}")
    return TemplateSource(directory=settings.cache_dir, kind="remote", tool=tool)
