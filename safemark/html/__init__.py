"""HTML tree conversion, serialization and sanitization."""

from safemark.html.converter import convert, stringify, to_markup
from safemark.html.sanitizer import HTML_PROFILE, SanitizerProfile, sanitize

__all__ = [
    "convert",
    "stringify",
    "to_markup",
    "HTML_PROFILE",
    "SanitizerProfile",
    "sanitize",
]
