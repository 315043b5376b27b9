"""tests for reference and definition rewriters."""

from safemark.core.models import Definition, ImageReference, LinkReference, Text
from safemark.rewriters.references import (
    DefinitionRewriter,
    ImageReferenceRewriter,
    LinkReferenceRewriter,
)


def test_link_reference_uses_label() -> None:
    """link references render as [text][label]."""
    node = LinkReference(identifier="ref", label="Ref", children=[Text(value="hi")])
    assert LinkReferenceRewriter().rewrite(node) == Text(value="[hi][Ref]")


def test_link_reference_falls_back_to_identifier() -> None:
    """identifier is used when label is missing."""
    node = LinkReference(identifier="ref", children=[Text(value="hi")])
    assert LinkReferenceRewriter().rewrite(node).value == "[hi][ref]"


def test_image_reference_uses_alt() -> None:
    """image references keep the ! marker and use alt."""
    node = ImageReference(identifier="logo", label="logo", alt="Logo")
    assert ImageReferenceRewriter().rewrite(node).value == "![Logo][logo]"


def test_definition_emits_footer_line() -> None:
    """definitions render as [label]: url with a trailing newline."""
    node = Definition(identifier="foo", label="Foo", url="http://bar")
    assert DefinitionRewriter().rewrite(node) == Text(value="[Foo]: http://bar\n")


def test_definition_drops_title() -> None:
    """the definition title is not emitted."""
    node = Definition(identifier="foo", url="http://bar", title="Bar")
    assert DefinitionRewriter().rewrite(node).value == "[foo]: http://bar\n"
