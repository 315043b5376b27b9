"""Markdown syntax tree nodes (mdast-style tagged variants)."""

from dataclasses import dataclass, field
from typing import ClassVar, Optional


@dataclass
class Node:
    """base class for all tree nodes."""

    type: ClassVar[str] = "node"


@dataclass
class Parent(Node):
    """node holding child nodes."""

    children: list[Node] = field(default_factory=list)


@dataclass
class Root(Parent):
    """document root."""

    type: ClassVar[str] = "root"


@dataclass
class Paragraph(Parent):
    """paragraph block."""

    type: ClassVar[str] = "paragraph"


@dataclass
class Heading(Parent):
    """ATX or setext heading."""

    type: ClassVar[str] = "heading"
    depth: int = 1


@dataclass
class Blockquote(Parent):
    """block quote."""

    type: ClassVar[str] = "blockquote"


@dataclass
class List(Parent):
    """ordered or bullet list."""

    type: ClassVar[str] = "list"
    ordered: bool = False
    start: Optional[int] = None
    spread: bool = False


@dataclass
class ListItem(Parent):
    """single list item."""

    type: ClassVar[str] = "listItem"
    spread: bool = False


@dataclass
class ThematicBreak(Node):
    """horizontal rule."""

    type: ClassVar[str] = "thematicBreak"


@dataclass
class Code(Node):
    """fenced or indented code block."""

    type: ClassVar[str] = "code"
    value: str = ""
    lang: Optional[str] = None


@dataclass
class InlineCode(Node):
    """inline code span."""

    type: ClassVar[str] = "inlineCode"
    value: str = ""


@dataclass
class Strong(Parent):
    """strong emphasis."""

    type: ClassVar[str] = "strong"


@dataclass
class Emphasis(Parent):
    """emphasis."""

    type: ClassVar[str] = "emphasis"


@dataclass
class Delete(Parent):
    """strikethrough."""

    type: ClassVar[str] = "delete"


@dataclass
class Break(Node):
    """hard line break."""

    type: ClassVar[str] = "break"


@dataclass
class Text(Node):
    """plain text; value is rendered verbatim after HTML escaping."""

    type: ClassVar[str] = "text"
    value: str = ""


@dataclass
class Html(Node):
    """raw HTML fragment as tokenized by the parser."""

    type: ClassVar[str] = "html"
    value: str = ""


@dataclass
class Link(Parent):
    """inline link."""

    type: ClassVar[str] = "link"
    url: str = ""
    title: Optional[str] = None


@dataclass
class Image(Node):
    """inline image."""

    type: ClassVar[str] = "image"
    url: str = ""
    title: Optional[str] = None
    alt: Optional[str] = None


@dataclass
class LinkReference(Parent):
    """link resolved through a reference definition."""

    type: ClassVar[str] = "linkReference"
    identifier: str = ""
    label: Optional[str] = None


@dataclass
class ImageReference(Node):
    """image resolved through a reference definition."""

    type: ClassVar[str] = "imageReference"
    identifier: str = ""
    label: Optional[str] = None
    alt: Optional[str] = None


@dataclass
class Definition(Node):
    """link reference definition, e.g. ``[foo]: http://bar``."""

    type: ClassVar[str] = "definition"
    identifier: str = ""
    label: Optional[str] = None
    url: str = ""
    title: Optional[str] = None


@dataclass
class Unknown(Parent):
    """any parser node without a dedicated variant."""

    type: ClassVar[str] = "unknown"
    origin: str = ""
    value: str = ""


def to_text(node: Node) -> str:
    """
    extracts the plain textual content of a node.

    Args:
        node: any tree node

    Returns:
        concatenated text of the node and its descendants
    """
    if isinstance(node, (Text, Html, Code, InlineCode)):
        return node.value
    if isinstance(node, (Image, ImageReference)):
        return node.alt or ""
    if isinstance(node, Unknown) and not node.children:
        return node.value
    if isinstance(node, Parent):
        return "".join(to_text(child) for child in node.children)
    return ""
