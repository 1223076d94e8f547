"""Exception hierarchy for prompt and read failures.

Every failure wraps the underlying exception, available both as ``cause``
and as ``__cause__`` when raised with ``raise ... from``.
"""

from .config import FLUSH_ERROR_PREFIX, READ_ERROR_PREFIX, WRITE_ERROR_PREFIX


class InputError(Exception):
    """Base exception for all inputpy I/O failures."""

    prefix = "Input operation failed"

    def __init__(self, cause: BaseException):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.prefix}: {self.cause}"


class WriteError(InputError):
    """Writing the prompt failed or was incomplete."""

    prefix = WRITE_ERROR_PREFIX


class FlushError(InputError):
    """The prompt was written but flushing the output failed."""

    prefix = FLUSH_ERROR_PREFIX


class ReadError(InputError):
    """The input source could not be read. End-of-input is not a ReadError."""

    prefix = READ_ERROR_PREFIX
