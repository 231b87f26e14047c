class ExtractionFailure(Exception):
    """Raised when a single report file cannot be extracted.

    Carries the file name so batch callers can report the failure per file.
    """

    def __init__(self, file_name: str, cause: str) -> None:
        super().__init__(cause)
        self.file_name = file_name
        self.cause = cause
