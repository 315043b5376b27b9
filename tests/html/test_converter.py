"""tests for syntax tree to HTML conversion."""

from safemark.core.models import (
    Blockquote,
    Break,
    Code,
    Delete,
    Heading,
    Html,
    Image,
    InlineCode,
    List,
    ListItem,
    Paragraph,
    Root,
    Text,
)
from safemark.html.converter import convert, stringify, to_markup


def test_escapes_text() -> None:
    """text nodes are HTML-escaped."""
    root = Root(children=[Paragraph(children=[Text(value="<b> & \"q\"")])])
    assert to_markup(root) == '<p>&lt;b&gt; &amp; "q"</p>'


def test_raw_html_passes_through() -> None:
    """html nodes are emitted verbatim by default."""
    root = Root(
        children=[
            Paragraph(
                children=[Html(value="<em>"), Text(value="x"), Html(value="</em>")]
            )
        ]
    )
    assert to_markup(root) == "<p><em>x</em></p>"


def test_raw_html_escaped_when_disallowed() -> None:
    """allow_raw_html=False escapes html nodes."""
    root = Root(children=[Paragraph(children=[Html(value="<em>")])])
    assert to_markup(root, allow_raw_html=False) == "<p>&lt;em&gt;</p>"


def test_renders_block_structure() -> None:
    """headings, quotes and code map to their elements."""
    root = Root(
        children=[
            Heading(depth=2, children=[Text(value="T")]),
            Blockquote(children=[Paragraph(children=[Text(value="q")])]),
            Code(value="a < b\n", lang="py"),
        ]
    )
    assert to_markup(root) == (
        "<h2>T</h2>\n"
        "<blockquote>\n<p>q</p>\n</blockquote>\n"
        '<pre><code class="language-py">a &lt; b\n</code></pre>'
    )


def test_tight_list_unwraps_paragraphs() -> None:
    """tight list items render inline content directly."""
    root = Root(
        children=[
            List(
                children=[
                    ListItem(children=[Paragraph(children=[Text(value="a")])]),
                    ListItem(children=[Paragraph(children=[Text(value="b")])]),
                ]
            )
        ]
    )
    assert to_markup(root) == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>"


def test_ordered_list_start() -> None:
    """ordered lists carry a start attribute when not 1."""
    root = Root(
        children=[
            List(
                ordered=True,
                start=3,
                children=[ListItem(children=[Paragraph(children=[Text(value="a")])])],
            )
        ]
    )
    assert to_markup(root) == '<ol start="3">\n<li>a</li>\n</ol>'


def test_inline_elements() -> None:
    """inline code, delete and breaks map to elements."""
    root = Root(
        children=[
            Paragraph(
                children=[
                    InlineCode(value="<x>"),
                    Delete(children=[Text(value="d")]),
                    Break(),
                ]
            )
        ]
    )
    assert to_markup(root) == "<p><code>&lt;x&gt;</code><del>d</del><br>\n</p>"


def test_images_never_become_elements() -> None:
    """leftover image nodes degrade to escaped text."""
    root = Root(children=[Paragraph(children=[Image(url="u", alt="<pic>")])])
    assert to_markup(root) == "<p>&lt;pic&gt;</p>"


def test_convert_merges_split_raw_tags() -> None:
    """open and close fragments become one element in the tree."""
    root = Root(
        children=[
            Paragraph(
                children=[Html(value="<kbd>"), Text(value="k"), Html(value="</kbd>")]
            )
        ]
    )
    tree = convert(root)
    kbd = tree.find("kbd")
    assert kbd is not None
    assert kbd.get_text() == "k"


def test_stringify_keeps_escaped_text_escaped() -> None:
    """escaped markup does not come back to life after re-parsing."""
    root = Root(children=[Text(value="<script>x</script>")])
    assert stringify(convert(root)) == "&lt;script&gt;x&lt;/script&gt;"
