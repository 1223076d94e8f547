"""Fluent builder for configuring and performing a prompted read."""

import logging
from typing import Optional

from .errors import FlushError, ReadError, WriteError
from .processing import process_input, render_prompt
from .streams import InputReader, OutputWriter, StreamReader, StreamWriter

logger = logging.getLogger(__name__)

# Exceptions raised by text streams that are classified as I/O failures.
# UnicodeDecodeError and operations on closed files are ValueErrors.
STREAM_ERRORS = (OSError, ValueError)


class Input:
    """Prompted line input with optional default value and trimming.

    Setters return the same instance so calls can be chained:

        port = Input("Port").default("8080").read()

    Nothing is written or read until ``read`` (or ``read_with_io``) is
    called, and one instance may be read from repeatedly.
    """

    def __init__(self, prompt: str):
        self.prompt = prompt
        self.default_value: Optional[str] = None
        self.trim_input = True
        self.prompt_visible = True

    def default(self, value: str) -> "Input":
        """Use value when the input is blank."""
        self.default_value = value
        return self

    def trim(self, enabled: bool) -> "Input":
        """Strip leading/trailing whitespace from the input."""
        self.trim_input = enabled
        return self

    def show_prompt(self, visible: bool) -> "Input":
        """Display the prompt before reading."""
        self.prompt_visible = visible
        return self

    def read(self) -> str:
        """Prompt on stdout and read one line from stdin.

        Raises:
            WriteError: Writing the prompt failed
            FlushError: Flushing stdout failed
            ReadError: Reading stdin failed
        """
        return self.read_with_io(StreamReader(), StreamWriter())

    def read_with_io(self, reader: InputReader, writer: OutputWriter) -> str:
        """Prompt on writer and read one line from reader.

        End of input is treated as an empty line, so a configured default
        still applies.

        Args:
            reader: Input source
            writer: Prompt destination

        Returns:
            Processed input

        Raises:
            WriteError: Writing the prompt failed (nothing is read)
            FlushError: Flushing the prompt failed (nothing is read)
            ReadError: Reading from reader failed
        """
        text = render_prompt(self.prompt, self.default_value, self.prompt_visible)
        if text:
            logger.debug("Displaying prompt %r", text)
            self._show(text, writer)
        else:
            logger.debug("No prompt displayed for %r", self.prompt)

        try:
            raw = reader.read_line()
        except STREAM_ERRORS as e:
            raise ReadError(e) from e

        if raw is None:
            logger.debug("End of input reached while reading %r", self.prompt)
            raw = ""

        return process_input(raw, self.default_value, self.trim_input)

    def _show(self, text: str, writer: OutputWriter) -> None:
        try:
            writer.write(text)
        except STREAM_ERRORS as e:
            raise WriteError(e) from e

        try:
            writer.flush()
        except STREAM_ERRORS as e:
            raise FlushError(e) from e

    def __repr__(self) -> str:
        return (
            f"Input(prompt={self.prompt!r}, default={self.default_value!r}, "
            f"trim={self.trim_input}, show_prompt={self.prompt_visible})"
        )
