"""link and image rewriters."""

from typing import Union

from safemark.core.models import Image, Link, Text
from safemark.rewriters import rewriter
from safemark.rewriters.utils.text import child_text


def link_to_text(node: Union[Link, Image], is_image: bool = False) -> Text:
    """
    converts a link or image into literal markdown text.

    Args:
        node: link or image node
        is_image: whether the node is an image

    Returns:
        text node with ``![label](url)`` (images) or ``[label](url)`` (links)
    """
    label = child_text(node.children) if isinstance(node, Link) else node.alt or ""

    value = f"![{label}]({node.url})"
    if node.title:
        value = value.replace("](", f' "{node.title}"](', 1)

    return Text(value=value if is_image else value[1:])


@rewriter("link")
class LinkRewriter:  # pylint: disable=too-few-public-methods
    """demotes links to literal text."""

    def rewrite(self, node: Link) -> Text:
        """converts a link to ``[label](url)`` text."""
        return link_to_text(node)


@rewriter("image")
class ImageRewriter:  # pylint: disable=too-few-public-methods
    """demotes images to literal text."""

    def rewrite(self, node: Image) -> Text:
        """converts an image to ``![alt](url)`` text."""
        return link_to_text(node, is_image=True)
