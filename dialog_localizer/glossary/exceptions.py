class GlossaryError(Exception):
    """Base exception for glossary loading and matcher management."""


class GlossaryNotLoadedError(GlossaryError):
    """Raised when the matcher is requested before it has been built."""
