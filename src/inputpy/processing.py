"""Pure helpers for rendering prompts and post-processing raw input."""

from typing import Optional

from .config import PROMPT_SUFFIX

LINE_TERMINATORS = "\r\n"


def render_prompt(prompt: str, default: Optional[str] = None, show_prompt: bool = True) -> str:
    """Build the prompt text to display.

    Returns an empty string when nothing should be written: the prompt is
    hidden or the prompt text itself is empty. An empty default is not shown.

    Examples:
        >>> render_prompt("Port", "8080")
        'Port [8080]: '
        >>> render_prompt("Name")
        'Name: '
    """
    if not show_prompt or not prompt:
        return ""

    if default:
        return f"{prompt} [{default}]{PROMPT_SUFFIX}"
    return f"{prompt}{PROMPT_SUFFIX}"


def process_input(raw: str, default: Optional[str] = None, trim: bool = True) -> str:
    """Turn a raw line into the final value.

    The line terminator is always removed. With ``trim`` the surrounding
    whitespace is removed as well. If the input is blank (empty or only
    whitespace) and a default is configured, the default is returned
    verbatim, regardless of ``trim``. Without a default, whitespace-only
    input is returned as-is when ``trim`` is off.

    Args:
        raw: Line as read, terminator included if present
        default: Value substituted for empty input
        trim: Strip leading/trailing whitespace

    Returns:
        Processed input or the default value
    """
    value = raw.rstrip(LINE_TERMINATORS)
    if trim:
        value = value.strip()

    if default is not None and not value.strip():
        return default
    return value
