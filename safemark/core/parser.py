"""Parser turning markdown text into the safemark syntax tree."""

import logging
from typing import Any, Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from safemark.core.models import (
    Blockquote,
    Break,
    Code,
    Definition,
    Delete,
    Emphasis,
    Heading,
    Html,
    Image,
    ImageReference,
    InlineCode,
    Link,
    LinkReference,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Strong,
    Text,
    ThematicBreak,
    Unknown,
    to_text,
)
from safemark.core.references import references_plugin
from safemark.errors import MarkdownParseError

logger = logging.getLogger(__name__)


def create_parser() -> MarkdownIt:
    """
    Create the markdown-it parser used for rendering.

    CommonMark with raw HTML tokens, strikethrough and reference tracking.
    Tables stay disabled.

    Returns:
        Configured MarkdownIt instance
    """
    md = MarkdownIt("commonmark", {"html": True})
    md.enable("strikethrough")
    md.use(references_plugin)
    return md


def parse_markdown(text: str, md: Optional[MarkdownIt] = None) -> Root:
    """
    Parse markdown text into a syntax tree.

    Args:
        text: Markdown source
        md: Parser to use (defaults to a fresh create_parser())

    Returns:
        Root node of the markdown syntax tree

    Raises:
        MarkdownParseError: If the parser fails on the input
    """
    md = md or create_parser()
    try:
        tokens = md.parse(text, {})
    except Exception as e:
        raise MarkdownParseError(f"Failed to parse markdown: {e}") from e

    root = Root(children=_convert_children(SyntaxTreeNode(tokens)))
    logger.debug(
        "Parsed %d token(s) into %d block(s)", len(tokens), len(root.children)
    )
    return root


def _convert_children(node: SyntaxTreeNode) -> list[Node]:
    """Convert children of a tree node, flattening inline containers."""
    result: list[Node] = []
    for child in node.children:
        result.extend(_convert(child))
    return result


def _convert(node: SyntaxTreeNode) -> list[Node]:
    """Convert one markdown-it tree node into zero or more syntax tree nodes."""
    node_type = node.type

    if node_type == "inline":
        return _convert_children(node)
    if node_type == "text":
        return [Text(value=node.content)]
    if node_type == "softbreak":
        return [Text(value="\n")]
    if node_type == "hardbreak":
        return [Break()]
    if node_type == "paragraph":
        return [Paragraph(children=_convert_children(node))]
    if node_type == "heading":
        return [Heading(depth=int(node.tag[1:]), children=_convert_children(node))]
    if node_type == "blockquote":
        return [Blockquote(children=_convert_children(node))]
    if node_type in ("bullet_list", "ordered_list"):
        return [_convert_list(node)]
    if node_type == "list_item":
        return [ListItem(spread=_is_spread(node), children=_convert_children(node))]
    if node_type == "hr":
        return [ThematicBreak()]
    if node_type == "fence":
        lang = node.info.strip().split(maxsplit=1)[0] if node.info.strip() else None
        return [Code(value=node.content, lang=lang)]
    if node_type == "code_block":
        return [Code(value=node.content)]
    if node_type == "code_inline":
        return [InlineCode(value=node.content)]
    if node_type == "strong":
        return [Strong(children=_convert_children(node))]
    if node_type == "em":
        return [Emphasis(children=_convert_children(node))]
    if node_type == "s":
        return [Delete(children=_convert_children(node))]
    if node_type in ("html_block", "html_inline"):
        return [Html(value=node.content.rstrip("\n"))]
    if node_type == "link":
        return [_convert_link(node)]
    if node_type == "image":
        return [_convert_image(node)]
    if node_type == "definition":
        return [_convert_definition(node.meta)]

    return [
        Unknown(
            origin=node_type,
            value=node.content if node.token is not None else "",
            children=_convert_children(node),
        )
    ]


def _convert_list(node: SyntaxTreeNode) -> List:
    """Convert bullet/ordered lists."""
    items = _convert_children(node)
    ordered = node.type == "ordered_list"
    start = int(node.attrs.get("start", 1)) if ordered else None
    spread = any(isinstance(item, ListItem) and item.spread for item in items)
    return List(ordered=ordered, start=start, spread=spread, children=items)


def _is_spread(node: SyntaxTreeNode) -> bool:
    """checks whether a list item renders loose (visible paragraphs)."""
    return any(
        child.type == "paragraph" and not child.hidden for child in node.children
    )


def _reference_meta(node: SyntaxTreeNode) -> Optional[dict[str, Any]]:
    """returns reference metadata recorded by the reference plugin, if any."""
    meta = node.meta or {}
    reference = meta.get("reference")
    return reference if isinstance(reference, dict) else None


def _convert_link(node: SyntaxTreeNode) -> Node:
    """Convert a link into Link or LinkReference."""
    children = _convert_children(node)
    reference = _reference_meta(node)
    if reference is not None:
        return LinkReference(
            identifier=reference["identifier"],
            label=reference.get("label"),
            children=children,
        )

    title = node.attrs.get("title")
    return Link(
        url=str(node.attrs.get("href", "")),
        title=str(title) if title else None,
        children=children,
    )


def _convert_image(node: SyntaxTreeNode) -> Node:
    """Convert an image into Image or ImageReference."""
    alt = "".join(to_text(child) for child in _convert_children(node))
    reference = _reference_meta(node)
    if reference is not None:
        return ImageReference(
            identifier=reference["identifier"],
            label=reference.get("label"),
            alt=alt,
        )

    title = node.attrs.get("title")
    return Image(
        url=str(node.attrs.get("src", "")),
        title=str(title) if title else None,
        alt=alt,
    )


def _convert_definition(meta: dict[str, Any]) -> Definition:
    """Convert a definition token emitted by the reference plugin."""
    return Definition(
        identifier=meta.get("identifier", ""),
        label=meta.get("label"),
        url=meta.get("url", ""),
        title=meta.get("title"),
    )
