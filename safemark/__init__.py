"""Render untrusted markdown into HTML that is safe to embed."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from safemark.api import render, render_sync
from safemark.batch import render_files

__all__ = ["main", "render", "render_sync"]

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for safemark CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(
        description="Render untrusted markdown to sanitized HTML"
    )
    parser.add_argument(
        "source",
        help="markdown file, directory of markdown files, or - for stdin",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        default=None,
        help="output directory for .html files (default: stdout)",
    )
    parser.add_argument(
        "--skip-markdown",
        action="store_true",
        help="treat input as HTML and only sanitize it",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    try:
        if args.source == "-":
            html = asyncio.run(render(sys.stdin.read(), args.skip_markdown))
            sys.stdout.write(html + "\n")
            return 0

        # validates source path exists
        source_path = Path(args.source)
        if not source_path.exists():
            logger.error("Source not found: %s", args.source)
            return 2

        return render_files(
            source=source_path,
            destination=Path(args.destination) if args.destination else None,
            skip_markdown=args.skip_markdown,
            quiet=args.quiet,
            progress=args.progress,
        )
    except Exception as e:
        logger.error("Fatal error: %s", e)
        return 2
