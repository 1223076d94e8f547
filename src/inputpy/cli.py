#!/usr/bin/env python3
"""Interactive demo of the inputpy API."""

import logging
import sys
from typing import Callable

import click
from rich.markup import escape

from . import config as settings
from .builder import Input
from .config import Config
from .errors import InputError
from .functions import read_input, read_input_with_default, read_input_with_trim
from .output import console, set_quiet

logger = logging.getLogger(__name__)


def _ask(what: str, reader: Callable[[], str]) -> str:
    """Run reader, exiting with status 1 on an input error."""
    try:
        return reader()
    except InputError as e:
        logger.debug("Demo step failed", exc_info=True)
        console.error(f"[red]Error reading {what}: {escape(str(e))}[/red]")
        sys.exit(1)


@click.command()
@click.version_option(package_name="inputpy")
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress headings. Results and errors are still shown.",
)
@click.option(
    "--log-level",
    default=None,
    help="Logging level for stderr diagnostics (default: INPUTPY_LOG_LEVEL or WARNING).",
)
def main(quiet: bool, log_level: str):
    """Walk through the inputpy prompt styles."""
    set_quiet(quiet)

    cfg = Config()
    if log_level:
        cfg.log_level = log_level.upper()

    errors = cfg.validate()
    if errors:
        for error in errors:
            console.error(f"[red]✗ {escape(error)}[/red]")
        sys.exit(2)

    logging.basicConfig(level=cfg.log_level, stream=sys.stderr)

    console.print(settings.DEMO_TITLE)
    console.print()

    console.print("1. Basic input example:")
    name = _ask("input", lambda: read_input(settings.PROMPT_NAME))
    if name:
        console.result(f"Hello, {escape(name)}!")
    else:
        console.result(settings.MESSAGE_NO_NAME_ENTERED)

    console.print("\n2. Input with default value:")
    port = _ask("port", lambda: read_input_with_default(settings.PROMPT_PORT, cfg.default_port))
    console.result(f"Using port: {escape(port)}")

    console.print("\n3. Input with preserved whitespace:")
    text = _ask("text", lambda: read_input_with_trim(settings.PROMPT_TEXT_PRESERVED, False))
    console.result(f"Raw input: '{escape(text)}'")

    console.print("\n4. Input with trimming:")
    text = _ask("text", lambda: Input(settings.PROMPT_TEXT_TRIMMED).trim(True).read())
    console.result(f"Trimmed input: '{escape(text)}'")

    console.print("\n5. Empty prompt example:")
    data = _ask("input", lambda: read_input(settings.PROMPT_EMPTY))
    console.result(f"You entered: '{escape(data)}'")

    console.print(f"\n{settings.MESSAGE_DEMO_COMPLETED}")


if __name__ == "__main__":
    sys.exit(main())
