"""tests for rewriter registry."""

from safemark.core.models import Node, Text
from safemark.pipeline import REMOVE_TYPES
from safemark.rewriters import RewriterRegistry, registry, rewriter


def test_rewriter_decorator_registers_class() -> None:
    """@rewriter decorator registers rewriter class."""
    test_registry = RewriterRegistry()

    @rewriter("test_type", target_registry=test_registry)
    class TestRewriter:  # pylint: disable=unused-variable,too-few-public-methods
        """test rewriter for registration."""

        def rewrite(self, _node: Node) -> Node:
            """rewrites test node."""
            return Text(value="test")

    assert "test_type" in test_registry.types()


def test_rewriter_decorator_with_multiple_types() -> None:
    """@rewriter decorator registers multiple node types."""
    test_registry = RewriterRegistry()

    @rewriter(["type_a", "type_b"], target_registry=test_registry)
    class MultiRewriter:  # pylint: disable=unused-variable,too-few-public-methods
        """rewriter for multiple node types."""

        def rewrite(self, _node: Node) -> Node:
            """rewrites multi-type node."""
            return Text(value="multi")

    assert test_registry.get("type_a") is test_registry.get("type_b")


def test_registry_rewrite_dispatches_on_node_type() -> None:
    """registry.rewrite dispatches to the rewriter for node.type."""
    test_registry = RewriterRegistry()

    @rewriter("text", target_registry=test_registry)
    class UpperRewriter:  # pylint: disable=unused-variable,too-few-public-methods
        """upper-cases text."""

        def rewrite(self, node: Text) -> Node:
            """rewrites text node."""
            return Text(value=node.value.upper())

    assert test_registry.rewrite(Text(value="hi")) == Text(value="HI")


def test_registry_returns_none_for_unknown_type() -> None:
    """registry.rewrite returns None for unregistered node types."""
    assert RewriterRegistry().rewrite(Text(value="x")) is None


def test_global_registry_covers_remove_types() -> None:
    """built-in rewriters are registered for every removed node type."""
    assert set(REMOVE_TYPES) <= registry.types()
