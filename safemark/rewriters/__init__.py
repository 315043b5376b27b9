"""rewriter registry and base types for node demotion."""

from typing import Callable, Optional, Protocol, TypeVar, Union

from safemark.core.models import Node


class Rewriter(Protocol):  # pylint: disable=too-few-public-methods
    """protocol for node rewriters."""

    node_type: Union[str, list[str]]

    def rewrite(self, node: Node) -> Node:
        """converts a node, usually into inert text."""


class RewriterRegistry:
    """registry mapping node types to rewriters."""

    def __init__(self) -> None:
        self._rewriters: dict[str, Rewriter] = {}

    def register(self, rewriter_instance: Rewriter) -> None:
        """registers a rewriter for its node type(s)."""
        types = (
            rewriter_instance.node_type
            if isinstance(rewriter_instance.node_type, list)
            else [rewriter_instance.node_type]
        )
        for t in types:
            self._rewriters[t] = rewriter_instance

    def get(self, node_type: str) -> Optional[Rewriter]:
        """returns the rewriter registered for a node type, if any."""
        return self._rewriters.get(node_type)

    def types(self) -> frozenset[str]:
        """returns all registered node types."""
        return frozenset(self._rewriters)

    def rewrite(self, node: Node) -> Optional[Node]:
        """
        rewrites a node using the appropriate rewriter.

        Args:
            node: node to rewrite

        Returns:
            rewritten node, or None if no rewriter handles the node type
        """
        rewriter_instance = self._rewriters.get(node.type)
        if not rewriter_instance:
            return None
        return rewriter_instance.rewrite(node)


# global registry
registry = RewriterRegistry()

T = TypeVar("T")


def rewriter(
    node_type: Union[str, list[str]],
    target_registry: RewriterRegistry = registry,
) -> Callable[[type[T]], type[T]]:
    """
    decorator to register a node rewriter.

    Args:
        node_type: node type string or list of strings
        target_registry: registry to register with (defaults to global)

    Returns:
        decorator function
    """

    def decorator(cls: type[T]) -> type[T]:
        cls.node_type = node_type  # type: ignore[attr-defined]
        target_registry.register(cls())  # type: ignore[arg-type]
        return cls

    return decorator
