class TranslationError(Exception):
    """Raised when a translation attempt fails. Retryable."""


class TranslationResponseError(TranslationError):
    """Raised when the AI provider returns an empty or unparsable response."""


class TranslationNetworkError(TranslationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
