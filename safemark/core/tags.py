"""disallowed HTML tag classification for raw HTML fragments."""

import string
from typing import Optional

# interactive, scripting, embedding, structural and metadata tags
DISALLOWED_TAGS = frozenset(
    {
        "a",
        "audio",
        "base",
        "body",
        "button",
        "canvas",
        "datalist",
        "dialog",
        "details",
        "figure",
        "figcaption",
        "footer",
        "form",
        "head",
        "header",
        "html",
        "iframe",
        "img",
        "input",
        "link",
        "map",
        "meta",
        "nav",
        "object",
        "picture",
        "script",
        "select",
        "source",
        "style",
        "svg",
        "table",
        "tbody",
        "td",
        "template",
        "textarea",
        "tfoot",
        "th",
        "thead",
        "title",
        "tr",
        "track",
        "video",
    }
)

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def _scan_name(fragment: str, prefix: str) -> Optional[str]:
    """returns the name run following the first `prefix` that has one."""
    start = fragment.find(prefix)
    while start != -1:
        pos = end = start + len(prefix)
        while end < len(fragment) and fragment[end] in _NAME_CHARS:
            end += 1
        if end > pos:
            return fragment[pos:end]
        start = fragment.find(prefix, start + 1)
    return None


def opening_tag_name(fragment: str) -> Optional[str]:
    """
    extracts the opening tag name from an HTML fragment.

    Args:
        fragment: raw HTML fragment, e.g. ``<em class="x">``

    Returns:
        tag name as written, or None when no ``<name`` is present
    """
    return _scan_name(fragment, "<")


def closing_tag_name(fragment: str) -> Optional[str]:
    """
    extracts the closing tag name from an HTML fragment.

    Args:
        fragment: raw HTML fragment, e.g. ``</em>``

    Returns:
        tag name as written, or None when no ``</name`` is present
    """
    return _scan_name(fragment, "</")


def is_disallowed(fragment: str) -> bool:
    """
    checks whether a raw HTML fragment opens or closes a disallowed tag.

    fragments without an extractable tag name are treated as allowed and left
    to the final sanitizer.

    Args:
        fragment: raw HTML fragment

    Returns:
        True if the opening or closing tag name is in DISALLOWED_TAGS
    """
    for name in (opening_tag_name(fragment), closing_tag_name(fragment)):
        if name and name.lower() in DISALLOWED_TAGS:
            return True
    return False
