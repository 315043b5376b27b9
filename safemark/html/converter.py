"""Conversion of the markdown syntax tree into an HTML tree."""

import html as html_lib
import logging
from typing import Any, Callable

from bs4 import BeautifulSoup

from safemark.core.models import (
    Blockquote,
    Code,
    Heading,
    Html,
    InlineCode,
    List,
    ListItem,
    Node,
    Paragraph,
    Parent,
    Text,
    to_text,
)

logger = logging.getLogger(__name__)

INLINE_TAGS = {"strong": "strong", "emphasis": "em", "delete": "del"}


class HtmlConverter:  # pylint: disable=too-few-public-methods
    """renders syntax tree nodes to HTML markup."""

    def __init__(self, allow_raw_html: bool = True) -> None:
        self.allow_raw_html = allow_raw_html
        self._renderers: dict[str, Callable[[Any], str]] = {
            "root": self._render_root,
            "paragraph": self._render_paragraph,
            "heading": self._render_heading,
            "blockquote": self._render_blockquote,
            "list": self._render_list,
            "listItem": self._render_list_item,
            "thematicBreak": lambda _node: "<hr>",
            "code": self._render_code,
            "inlineCode": self._render_inline_code,
            "break": lambda _node: "<br>\n",
            "text": self._render_text,
            "html": self._render_html,
        }

    def render(self, node: Node) -> str:
        """
        renders a node and its descendants to HTML markup.

        nodes without a renderer (links, images, unknown types) degrade to
        their escaped text content.

        Args:
            node: node to render

        Returns:
            HTML markup
        """
        if node.type in INLINE_TAGS and isinstance(node, Parent):
            tag = INLINE_TAGS[node.type]
            return f"<{tag}>{self._render_inline(node)}</{tag}>"

        renderer = self._renderers.get(node.type)
        if renderer is None:
            return html_lib.escape(to_text(node), quote=False)
        return renderer(node)

    def _render_inline(self, node: Parent) -> str:
        return "".join(self.render(child) for child in node.children)

    def _render_blocks(self, node: Parent) -> str:
        return "\n".join(self.render(child) for child in node.children)

    def _render_root(self, node: Parent) -> str:
        return self._render_blocks(node)

    def _render_paragraph(self, node: Paragraph) -> str:
        return f"<p>{self._render_inline(node)}</p>"

    def _render_heading(self, node: Heading) -> str:
        depth = min(max(node.depth, 1), 6)
        return f"<h{depth}>{self._render_inline(node)}</h{depth}>"

    def _render_blockquote(self, node: Blockquote) -> str:
        return f"<blockquote>\n{self._render_blocks(node)}\n</blockquote>"

    def _render_list(self, node: List) -> str:
        if not node.ordered:
            return f"<ul>\n{self._render_blocks(node)}\n</ul>"
        start = f' start="{node.start}"' if node.start not in (None, 1) else ""
        return f"<ol{start}>\n{self._render_blocks(node)}\n</ol>"

    def _render_list_item(self, node: ListItem) -> str:
        # tight items render their paragraphs without <p>
        parts = [
            (
                self._render_inline(child)
                if isinstance(child, Paragraph) and not node.spread
                else self.render(child)
            )
            for child in node.children
        ]
        if len(parts) == 1 and not node.spread:
            return f"<li>{parts[0]}</li>"
        body = "\n".join(parts)
        return f"<li>\n{body}\n</li>" if body else "<li></li>"

    def _render_code(self, node: Code) -> str:
        class_attr = (
            f' class="language-{html_lib.escape(node.lang)}"' if node.lang else ""
        )
        code = html_lib.escape(node.value, quote=False)
        return f"<pre><code{class_attr}>{code}</code></pre>"

    def _render_inline_code(self, node: InlineCode) -> str:
        return f"<code>{html_lib.escape(node.value, quote=False)}</code>"

    def _render_text(self, node: Text) -> str:
        return html_lib.escape(node.value, quote=False)

    def _render_html(self, node: Html) -> str:
        if self.allow_raw_html:
            return node.value
        return html_lib.escape(node.value, quote=False)


def to_markup(root: Node, allow_raw_html: bool = True) -> str:
    """
    renders a syntax tree to HTML markup.

    Args:
        root: syntax tree root
        allow_raw_html: emit raw HTML nodes verbatim instead of escaping them

    Returns:
        HTML markup string
    """
    return HtmlConverter(allow_raw_html=allow_raw_html).render(root)


def convert(root: Node, allow_raw_html: bool = True) -> BeautifulSoup:
    """
    converts a syntax tree into an HTML tree.

    the markup is re-parsed so raw HTML fragments, which the parser tokenizes
    as separate open and close tags, become real elements in the tree.

    Args:
        root: syntax tree root
        allow_raw_html: merge raw HTML nodes into the tree as markup

    Returns:
        parsed HTML tree
    """
    markup = to_markup(root, allow_raw_html=allow_raw_html)
    logger.debug("Converted tree to %d character(s) of markup", len(markup))
    return BeautifulSoup(markup, "html.parser")


def stringify(tree: BeautifulSoup) -> str:
    """serializes an HTML tree to a string."""
    return str(tree)
