class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DialogStringNotFoundError(ProcessorError):
    """Raised when a dialog string cannot be found in the database."""


class ImportDirectoryNotFoundError(ProcessorError):
    """Raised when the raw strings directory does not exist."""
