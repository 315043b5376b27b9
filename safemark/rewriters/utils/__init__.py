"""utility modules for node rewriters."""

from safemark.rewriters.utils.text import child_text

__all__ = ["child_text"]
