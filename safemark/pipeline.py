"""markdown to HTML processing pipeline built from ordered tree stages."""

import logging
import re
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Optional, Protocol

from bs4 import BeautifulSoup

from safemark.core.models import Break, Node, Parent, Root, Text, to_text
from safemark.core.parser import create_parser, parse_markdown
from safemark.html.converter import convert, stringify
from safemark.rewriters import RewriterRegistry, registry

# imported for their side effect of registering the built-in rewriters
from safemark.rewriters import html, links, references  # noqa: F401

logger = logging.getLogger(__name__)

# node types left as-is (their children are still rewritten)
KEEP_TYPES = frozenset(
    {
        "blockquote",
        "list",
        "listItem",
        "strong",
        "emphasis",
        "delete",
        "thematicBreak",
        "heading",
        "inlineCode",
        "code",
    }
)

# node types replaced by their registered rewriter
REMOVE_TYPES = (
    "image",
    "link",
    "imageReference",
    "linkReference",
    "definition",
    "html",
)

# containers and text that neither list needs to mention
PASSTHROUGH_TYPES = frozenset({"root", "paragraph", "text"})

NEWLINE_PATTERN = re.compile(r"[\t ]*(?:\r?\n|\r)")


class Stage(Protocol):  # pylint: disable=too-few-public-methods
    """protocol for syntax tree transforms."""

    name: str

    def transform(self, tree: Root) -> Root:
        """transforms a syntax tree."""


class RewriteStage:  # pylint: disable=too-few-public-methods
    """demotes unsupported nodes to text using the rewriter registry."""

    name = "rewrite"

    def __init__(
        self,
        keep: frozenset[str] = KEEP_TYPES,
        remove: tuple[str, ...] = REMOVE_TYPES,
        rewriters: RewriterRegistry = registry,
    ) -> None:
        missing = set(remove) - rewriters.types()
        if missing:
            raise ValueError(f"No rewriter registered for: {sorted(missing)}")
        self.keep = keep
        self.remove = frozenset(remove)
        self.rewriters = rewriters

    def transform(self, tree: Root) -> Root:
        """rewrites the tree top-down; the root itself always passes."""
        tree.children = [self._rewrite(child) for child in tree.children]
        return tree

    def _rewrite(self, node: Node) -> Node:
        if node.type in self.remove:
            result = self.rewriters.rewrite(node) or node
        elif node.type in self.keep or node.type in PASSTHROUGH_TYPES:
            result = node
        elif node.type == "break":
            result = Text(value="\n")
        else:
            # anything unlisted degrades to its text content
            result = Text(value=to_text(node))

        if isinstance(result, Parent):
            result.children = [self._rewrite(child) for child in result.children]
        return result


class HardBreakStage:  # pylint: disable=too-few-public-methods
    """turns every line ending inside text into a hard break."""

    name = "hard-breaks"

    def transform(self, tree: Root) -> Root:
        """splits text nodes on newlines, inserting break nodes."""
        self._split(tree)
        return tree

    def _split(self, node: Parent) -> None:
        children: list[Node] = []
        for child in node.children:
            if isinstance(child, Text) and NEWLINE_PATTERN.search(child.value):
                lines = NEWLINE_PATTERN.split(child.value)
                for i, line in enumerate(lines):
                    if i:
                        children.append(Break())
                    if line:
                        children.append(Text(value=line))
                continue
            if isinstance(child, Parent):
                self._split(child)
            children.append(child)
        node.children = children


@dataclass
class Processor:
    """parse, transform, convert and stringify markdown in one pass."""

    parse: Callable[[str], Root]
    stages: list[Stage] = field(default_factory=list)
    to_tree: Callable[[Root], BeautifulSoup] = convert
    to_string: Callable[[BeautifulSoup], str] = stringify

    def process(self, text: str) -> str:
        """
        renders markdown to (unsanitized) HTML.

        Args:
            text: markdown source

        Returns:
            serialized HTML; must still go through the sanitizer

        Raises:
            MarkdownParseError: if the parser fails
        """
        tree = self.parse(text)
        for stage in self.stages:
            logger.debug("Running stage: %s", stage.name)
            tree = stage.transform(tree)
        return self.to_string(self.to_tree(tree))


def default_processor(rewriters: Optional[RewriterRegistry] = None) -> Processor:
    """
    builds the standard pipeline: rewrite, hard breaks, raw-HTML-aware
    conversion, serialization.

    Args:
        rewriters: registry to use (defaults to the global registry)

    Returns:
        new Processor with its own parser instance
    """
    return Processor(
        parse=partial(parse_markdown, md=create_parser()),
        stages=[RewriteStage(rewriters=rewriters or registry), HardBreakStage()],
        to_tree=partial(convert, allow_raw_html=True),
    )
