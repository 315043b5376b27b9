"""exception types raised by safemark."""


class SafemarkError(Exception):
    """base class for safemark errors."""


class MarkdownParseError(SafemarkError):
    """raised when the markdown parser cannot process the input."""


class UnknownProfileError(SafemarkError, KeyError):
    """raised when a sanitizer profile name is not registered."""
