class SstFormatError(Exception):
    """Raised when a file is not a well-formed SST XML string table."""
