"""Batch module for rendering markdown files to sanitized HTML."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

from safemark.api import render
from safemark.progress import DocumentReport, RenderReporter

MARKDOWN_SUFFIXES = (".md", ".markdown", ".txt")


def discover_files(source: Path) -> list[Path]:
    """
    discovers markdown files from source path.

    Args:
        source: path to a markdown file or a directory of them

    Returns:
        list of paths to markdown files

    Raises:
        FileNotFoundError: if source doesn't exist
    """
    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    if source.is_file():
        return [source] if source.suffix.lower() in MARKDOWN_SUFFIXES else []

    if source.is_dir():
        return sorted(
            path
            for path in source.iterdir()
            if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES
        )

    return []


def render_files(
    source: Path,
    destination: Optional[Path] = None,
    skip_markdown: bool = False,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    renders markdown files to sanitized HTML.

    Args:
        source: markdown file or directory
        destination: directory for ``<stem>.html`` files; stdout when None
        skip_markdown: sanitize the files as HTML without markdown parsing
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure)
    """
    return asyncio.run(
        _render_files(source, destination, skip_markdown, quiet, progress)
    )


async def _render_files(
    source: Path,
    destination: Optional[Path],
    skip_markdown: bool,
    quiet: bool,
    progress: bool,
) -> int:
    """renders each discovered file in turn."""
    with RenderReporter(quiet=quiet, show_progress=progress) as reporter:
        files = discover_files(source)
        if not files:
            reporter.log_info(f"No markdown files found in {source}")
            return 0

        reporter.log_info(f"Found {len(files)} document(s) to render")
        reporter.begin(len(files))

        if destination is not None:
            destination.mkdir(parents=True, exist_ok=True)

        for file_path in files:
            reporter.record(await _render_file(file_path, destination, skip_markdown))

        reporter.finish()

        if reporter.failed > 0:
            return 1
        return 0


async def _render_file(
    file_path: Path,
    destination: Optional[Path],
    skip_markdown: bool,
) -> DocumentReport:
    """
    renders a single file.

    Args:
        file_path: markdown file
        destination: output directory, or None for stdout
        skip_markdown: sanitize only

    Returns:
        report with input and output sizes, or the error
    """
    report = DocumentReport(name=file_path.name, source_bytes=0)
    try:
        content = file_path.read_text(encoding="utf-8")
        report.source_bytes = len(content.encode("utf-8"))
        html = await render(content, skip_markdown=skip_markdown)

        if destination is None:
            sys.stdout.write(html + "\n")
        else:
            target = destination / f"{file_path.stem}.html"
            target.write_text(html, encoding="utf-8")

        report.html_bytes = len(html.encode("utf-8"))

    except Exception as e:
        report.error = str(e)

    return report
