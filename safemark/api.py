"""Entry point rendering untrusted markdown to embeddable HTML."""

import asyncio
import logging

from safemark.html.sanitizer import HTML_PROFILE, sanitize
from safemark.pipeline import default_processor

logger = logging.getLogger(__name__)


async def render(content: str, skip_markdown: bool = False) -> str:
    """
    Render user-supplied markdown into sanitized HTML.

    The parse/transform pipeline runs in a worker thread; that is the only
    point where this coroutine suspends. Every code path ends in the
    sanitizer, so the result can be injected into a page as-is.

    Args:
        content: Untrusted markdown (or HTML when skip_markdown is set)
        skip_markdown: Treat content as raw HTML and only sanitize it

    Returns:
        Sanitized HTML string

    Raises:
        MarkdownParseError: If the markdown parser fails on the input
    """
    if skip_markdown:
        return sanitize(content, HTML_PROFILE)

    processor = default_processor()
    html = await asyncio.to_thread(processor.process, content)
    logger.debug("Rendered %d character(s) before sanitizing", len(html))
    return sanitize(html, HTML_PROFILE)


def render_sync(content: str, skip_markdown: bool = False) -> str:
    """
    Blocking variant of render() for callers without an event loop.

    Args:
        content: Untrusted markdown (or HTML when skip_markdown is set)
        skip_markdown: Treat content as raw HTML and only sanitize it

    Returns:
        Sanitized HTML string
    """
    if skip_markdown:
        return sanitize(content, HTML_PROFILE)
    return sanitize(default_processor().process(content), HTML_PROFILE)
