"""Reader and writer abstractions over text streams."""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class OutputWriter(ABC):
    """Destination for prompt text.

    Implementations raise the underlying exception (normally ``OSError``)
    on failure. Classification into inputpy errors happens in the caller.
    """

    @abstractmethod
    def write(self, text: str) -> None:
        """Write text without appending a line terminator.

        Args:
            text: Text to emit

        Raises:
            OSError: If the text could not be written completely
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered output.

        Raises:
            OSError: If pending output could not be delivered
        """
        pass


class InputReader(ABC):
    """Source of input lines."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """Read one line.

        Returns:
            The line including its terminator (if one was present), or None
            when the input is exhausted

        Raises:
            OSError: If the source could not be read
        """
        pass


class StreamWriter(OutputWriter):
    """OutputWriter bound to a text stream, stdout by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        written = self.stream.write(text)
        if written is not None and written < len(text):
            raise OSError(f"incomplete write: {written} of {len(text)} characters")

    def flush(self) -> None:
        self.stream.flush()


class StreamReader(InputReader):
    """InputReader bound to a text stream, stdin by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_line(self) -> Optional[str]:
        line = self.stream.readline()
        # readline() only returns "" at end of stream; an empty line is "\n"
        return line or None
