"""Final HTML sanitization backed by nh3 (ammonia)."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

import nh3

from safemark.errors import UnknownProfileError


@dataclass(frozen=True)
class SanitizerProfile:
    """named allow-list configuration for the sanitizer."""

    name: str
    tags: frozenset[str]
    # None keeps ammonia's default per-tag attributes
    attributes: Optional[Mapping[str, frozenset[str]]] = None
    url_schemes: frozenset[str] = field(
        default_factory=lambda: frozenset({"http", "https", "mailto"})
    )
    strip_comments: bool = True
    link_rel: Optional[str] = "noopener noreferrer"


# generic HTML document profile: common structural and text tags, no scripting
HTML_PROFILE = SanitizerProfile(name="html", tags=frozenset(nh3.ALLOWED_TAGS))

# text only: every tag is removed, content kept
TEXT_PROFILE = SanitizerProfile(name="text", tags=frozenset())

PROFILES: dict[str, SanitizerProfile] = {
    profile.name: profile for profile in (HTML_PROFILE, TEXT_PROFILE)
}


def get_profile(name: str) -> SanitizerProfile:
    """
    looks up a sanitizer profile by name.

    Args:
        name: profile name, e.g. "html"

    Returns:
        the registered profile

    Raises:
        UnknownProfileError: if no profile has that name
    """
    try:
        return PROFILES[name]
    except KeyError as e:
        raise UnknownProfileError(f"Unknown sanitizer profile: {name}") from e


def sanitize(html: str, profile: SanitizerProfile = HTML_PROFILE) -> str:
    """
    removes every tag, attribute and URL scheme outside the profile.

    this is the only step whose output is safe to embed as HTML.

    Args:
        html: HTML string from an untrusted source
        profile: allow-list to apply

    Returns:
        sanitized HTML
    """
    attributes = (
        {tag: set(names) for tag, names in profile.attributes.items()}
        if profile.attributes is not None
        else None
    )
    return nh3.clean(
        html,
        tags=set(profile.tags),
        attributes=attributes,
        url_schemes=set(profile.url_schemes),
        strip_comments=profile.strip_comments,
        link_rel=profile.link_rel,
    )
