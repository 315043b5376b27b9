"""reference and definition rewriters."""

from typing import Union

from safemark.core.models import Definition, ImageReference, LinkReference, Text
from safemark.rewriters import rewriter
from safemark.rewriters.utils.text import child_text


def reference_to_text(
    node: Union[LinkReference, ImageReference], is_image: bool = False
) -> Text:
    """
    converts a link or image reference into literal markdown text.

    the reference is not resolved; a matching definition need not exist.

    Args:
        node: link reference or image reference node
        is_image: whether the node is an image reference

    Returns:
        text node with ``![text][ref]`` (images) or ``[text][ref]`` (links)
    """
    if isinstance(node, LinkReference) and node.children:
        text = child_text(node.children)
    else:
        text = getattr(node, "alt", None) or ""

    value = f"![{text}][{node.label or node.identifier}]"
    return Text(value=value if is_image else value[1:])


@rewriter("linkReference")
class LinkReferenceRewriter:  # pylint: disable=too-few-public-methods
    """demotes link references to literal text."""

    def rewrite(self, node: LinkReference) -> Text:
        """converts a link reference to ``[text][ref]`` text."""
        return reference_to_text(node)


@rewriter("imageReference")
class ImageReferenceRewriter:  # pylint: disable=too-few-public-methods
    """demotes image references to literal text."""

    def rewrite(self, node: ImageReference) -> Text:
        """converts an image reference to ``![alt][ref]`` text."""
        return reference_to_text(node, is_image=True)


@rewriter("definition")
class DefinitionRewriter:  # pylint: disable=too-few-public-methods
    """emits definitions as literal footer text."""

    def rewrite(self, node: Definition) -> Text:
        """converts a definition to ``[ref]: url`` text; the title is dropped."""
        return Text(value=f"[{node.label or node.identifier}]: {node.url}\n")
