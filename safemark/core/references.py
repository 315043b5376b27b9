"""markdown-it plugin that keeps reference links and definitions visible.

markdown-it resolves ``[text][ref]`` links silently and drops the
``[ref]: url`` definitions from the token stream. The rewrite stage needs both,
so this plugin wraps the stock rules:

- the block ``reference`` rule additionally emits a ``definition`` token
- the inline ``link`` and ``image`` rules tag tokens resolved through a
  reference with ``meta["reference"]``
"""

import logging
import re
from typing import Any, Callable, Optional

from markdown_it import MarkdownIt
from markdown_it.common.utils import normalizeReference
from markdown_it.helpers import parseLinkDestination, parseLinkLabel, parseLinkTitle
from markdown_it.rules_block import StateBlock
from markdown_it.rules_block import reference as reference_rule
from markdown_it.rules_inline import StateInline
from markdown_it.rules_inline import image as image_rule
from markdown_it.rules_inline import link as link_rule

logger = logging.getLogger(__name__)

DEFINITION_LABEL = re.compile(r"\[((?:\\.|[^\\\]])*)\]:")


def definition_block(
    state: StateBlock, start_line: int, end_line: int, silent: bool
) -> bool:
    """parses a reference definition and pushes a ``definition`` token."""
    if not reference_rule(state, start_line, end_line, silent):
        return False
    if silent:
        return True

    source = state.getLines(start_line, state.line, state.blkIndent, False).lstrip()
    match = DEFINITION_LABEL.match(source)
    if not match:
        return True

    label = match.group(1)
    url, title = _destination_and_title(state, source, match.end())

    token = state.push("definition", "", 0)
    token.map = [start_line, state.line]
    token.meta = {
        "identifier": normalizeReference(label).lower(),
        "label": label,
        "url": url,
        "title": title,
    }
    return True


def _skip_whitespace(source: str, pos: int) -> int:
    while pos < len(source) and source[pos] in " \t\n":
        pos += 1
    return pos


def _destination_and_title(
    state: StateBlock, source: str, pos: int
) -> tuple[str, Optional[str]]:
    """
    re-reads the destination and title of the definition in ``source``.

    env only remembers the first definition of a label, so every definition
    is read back from its own lines.

    Args:
        state: block state of the running parse
        source: lines consumed by the reference rule
        pos: offset just past ``[label]:``

    Returns:
        normalized URL and title (None when absent)
    """
    maximum = len(source)
    destination = parseLinkDestination(source, _skip_whitespace(source, pos), maximum)
    if not destination.ok:
        return "", None
    url = state.md.normalizeLink(destination.str)

    title_start = _skip_whitespace(source, destination.pos)
    if title_start == destination.pos or title_start >= maximum:
        return url, None
    title = parseLinkTitle(source, title_start, maximum)
    if not title.ok:
        return url, None
    return url, title.str or None


def _reference_label(state: StateInline, label_start: int, label_end: int) -> str:
    """returns the reference label used by a link that was just parsed."""
    rest = state.src[label_end + 1 : state.pos]
    if len(rest) > 2 and rest.startswith("[") and rest.endswith("]"):
        return rest[1:-1]
    return state.src[label_start:label_end]


def _track_reference(
    rule: Callable[[StateInline, bool], bool], token_type: str, is_image: bool
) -> Callable[[StateInline, bool], bool]:
    """wraps an inline link/image rule to record reference resolution."""

    def tracked(state: StateInline, silent: bool) -> bool:
        start = state.pos
        first_token = len(state.tokens)
        if not rule(state, silent):
            return False
        if silent:
            return True

        bracket = start + 1 if is_image else start
        label_end = parseLinkLabel(state, bracket, not is_image)
        if label_end < 0:
            return True
        # inline form: [text](url "title")
        if state.pos > label_end + 1 and state.src[label_end + 1] == "(":
            return True

        token = _find_token(state.tokens[first_token:], token_type)
        if token is None:
            return True

        label = _reference_label(state, bracket + 1, label_end)
        token.meta["reference"] = {
            "identifier": normalizeReference(label).lower(),
            "label": label,
        }
        return True

    return tracked


def _find_token(tokens: list[Any], token_type: str) -> Optional[Any]:
    """returns the first token of the given type."""
    for token in tokens:
        if token.type == token_type:
            return token
    return None


def references_plugin(md: MarkdownIt) -> None:
    """
    installs the reference-tracking rules on a MarkdownIt instance.

    Args:
        md: parser to extend
    """
    md.block.ruler.at("reference", definition_block)
    md.inline.ruler.at("link", _track_reference(link_rule, "link_open", False))
    md.inline.ruler.at("image", _track_reference(image_rule, "image", True))
    logger.debug("reference tracking installed")
