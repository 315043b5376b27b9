"""text helpers shared by rewriters."""

from safemark.core.models import Node, Text


def child_text(children: list[Node]) -> str:
    """
    joins the values of text-typed children.

    nested inline markup (emphasis, code, ...) is skipped rather than
    reconstructed.

    Args:
        children: inline children of a link or reference

    Returns:
        text values joined with ", "
    """
    return ", ".join(child.value for child in children if isinstance(child, Text))
