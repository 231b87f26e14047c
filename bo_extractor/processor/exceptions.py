class ProcessorError(Exception):
    """Base exception for batch-level processing errors."""


class NoEligibleFilesError(ProcessorError):
    """Raised when a batch contains no file with a supported extension."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""
