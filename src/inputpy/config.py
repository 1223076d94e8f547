"""Configuration for inputpy and its demo application."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Prompt formatting
PROMPT_SUFFIX = ": "

# Error message prefixes
WRITE_ERROR_PREFIX = "Failed to write to stdout"
FLUSH_ERROR_PREFIX = "Failed to flush stdout"
READ_ERROR_PREFIX = "Failed to read from stdin"

# Demo application
DEMO_TITLE = "=== inputpy Demo ==="
DEFAULT_PORT = "8080"

PROMPT_NAME = "Enter your name"
PROMPT_PORT = "Enter port"
PROMPT_TEXT_PRESERVED = "Enter text (whitespace preserved)"
PROMPT_TEXT_TRIMMED = "Enter text (whitespace trimmed)"
PROMPT_EMPTY = ""

MESSAGE_NO_NAME_ENTERED = "No name entered!"
MESSAGE_DEMO_COMPLETED = "Demo completed successfully!"

DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Demo configuration loaded from the environment and an optional .env file."""

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_dir = project_dir or Path.cwd()

        load_dotenv(self.project_dir / ".env")

        self.log_level = os.getenv("INPUTPY_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        self.default_port = os.getenv("INPUTPY_DEFAULT_PORT", DEFAULT_PORT).strip()

    def validate(self) -> list[str]:
        """Validate configuration values."""
        errors = []

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"INPUTPY_LOG_LEVEL '{self.log_level}' is not a logging level")

        if not self.default_port.isdecimal() or not 0 < int(self.default_port) <= 65535:
            errors.append(
                f"INPUTPY_DEFAULT_PORT '{self.default_port}' must be an integer in 1..65535"
            )

        return errors
