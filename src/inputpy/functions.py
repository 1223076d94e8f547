"""Shortcut functions for the common builder configurations."""

from .builder import Input


def read_input(prompt: str) -> str:
    """Prompt and read a trimmed line from stdin."""
    return Input(prompt).read()


def read_input_with_default(prompt: str, default: str) -> str:
    """Prompt as ``"prompt [default]: "`` and return default on blank input."""
    return Input(prompt).default(default).read()


def read_input_with_trim(prompt: str, trim: bool) -> str:
    """Prompt and read a line, trimming whitespace only when trim is set."""
    return Input(prompt).trim(trim).read()
