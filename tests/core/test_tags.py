"""tests for disallowed tag classification."""

from safemark.core.tags import (
    DISALLOWED_TAGS,
    closing_tag_name,
    is_disallowed,
    opening_tag_name,
)


def test_disallowed_tags_is_immutable() -> None:
    """DISALLOWED_TAGS is a frozenset of lower-cased names."""
    assert isinstance(DISALLOWED_TAGS, frozenset)
    assert all(tag == tag.lower() for tag in DISALLOWED_TAGS)
    assert "script" in DISALLOWED_TAGS
    assert "em" not in DISALLOWED_TAGS


def test_opening_tag_name_extracts_name() -> None:
    """extracts the name after <."""
    assert opening_tag_name('<em class="x">') == "em"
    assert opening_tag_name("<br/>") == "br"


def test_opening_tag_name_skips_closing_tags() -> None:
    """a closing tag has no opening name."""
    assert opening_tag_name("</em>") is None


def test_closing_tag_name_extracts_name() -> None:
    """extracts the name after </."""
    assert closing_tag_name("</Script>") == "Script"
    assert closing_tag_name("<em>") is None


def test_name_stops_at_non_word_character() -> None:
    """name is the leading alphanumeric/underscore run."""
    assert opening_tag_name("<my-tag>") == "my"
    assert opening_tag_name("<h1>") == "h1"


def test_is_disallowed_matches_case_insensitively() -> None:
    """script tags are disallowed in any case, open or close."""
    assert is_disallowed("<script>") is True
    assert is_disallowed("</script>") is True
    assert is_disallowed("<SCRIPT src=x>") is True


def test_is_disallowed_allows_other_tags() -> None:
    """tags outside the set are allowed."""
    for fragment in ("<em>", "</strong>", "<kbd>", "<sup>"):
        assert is_disallowed(fragment) is False


def test_fragment_without_tag_name_is_allowed() -> None:
    """fragments without an extractable name are not disallowed."""
    for fragment in ("", "<!-- comment -->", "<>", "plain text"):
        assert is_disallowed(fragment) is False


def test_finds_tag_after_leading_content() -> None:
    """the first tag name anywhere in the fragment is used."""
    assert is_disallowed("  <iframe src=x>") is True
