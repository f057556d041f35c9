"""Rich-based terminal output for rendered responses."""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape


class OutputFormatter:
    """Prints rendered responses as markdown, or verbatim with ``plain``."""

    def __init__(self, plain: bool = False, console: Console | None = None):
        self._plain = plain
        self._console = console or Console()

    def show_response(self, text: str) -> None:
        if self._plain:
            self._console.out(text, highlight=False)
            return
        self._console.print(Markdown(text))

    def show_error(self, message: str) -> None:
        """Show an error message."""
        self._console.print(f"[bold red]Error:[/bold red] {escape(message)}")
