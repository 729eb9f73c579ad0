# app/errors.py
# Role: Structured failure type for CSV resource reads.
#       Keeps the cause (missing file, permission, parse, I/O) for logs
#       while routes still answer with one uniform error envelope.

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    PARSE = "parse"
    IO = "io"


class CsvReadError(Exception):
    """
    Raised by the CSV reader when a resource file cannot be turned into records.

    Attributes:
        kind: ErrorKind describing what went wrong
        filename: the file name that was requested
        message: human-readable description (also str(err))
    """

    def __init__(self, kind: ErrorKind, filename: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.filename = filename
        self.message = message

    def __repr__(self) -> str:
        return f"CsvReadError(kind={self.kind.value!r}, filename={self.filename!r}, message={self.message!r})"
