"""Prompted line input for terminal programs, in the spirit of Python's ``input``."""

from .builder import Input
from .errors import FlushError, InputError, ReadError, WriteError
from .functions import read_input, read_input_with_default, read_input_with_trim
from .processing import process_input, render_prompt
from .streams import InputReader, OutputWriter, StreamReader, StreamWriter

__all__ = [
    "FlushError",
    "Input",
    "InputError",
    "InputReader",
    "OutputWriter",
    "ReadError",
    "StreamReader",
    "StreamWriter",
    "WriteError",
    "process_input",
    "read_input",
    "read_input_with_default",
    "read_input_with_trim",
    "render_prompt",
]
