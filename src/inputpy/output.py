"""Console output for the demo with quiet mode support."""

from rich.console import Console as RichConsole


class QuietConsole:
    """A console wrapper that respects quiet mode.

    In quiet mode headings are suppressed. Results and errors are always shown.
    """

    def __init__(self):
        self._console = RichConsole(highlight=False)
        self._quiet = False

    @property
    def quiet(self) -> bool:
        return self._quiet

    @quiet.setter
    def quiet(self, value: bool):
        self._quiet = value

    def print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self._quiet:
            self._console.print(*args, **kwargs)

    def result(self, *args, **kwargs):
        """Print a result (always shown)."""
        self._console.print(*args, **kwargs)

    def error(self, *args, **kwargs):
        """Print error messages (always shown, even in quiet mode)."""
        self._console.print(*args, **kwargs)


# Global console instance
console = QuietConsole()


def set_quiet(quiet: bool):
    """Set global quiet mode."""
    console.quiet = quiet
