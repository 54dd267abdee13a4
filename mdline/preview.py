"""live preview wiring between an input buffer and a display target."""

from typing import Optional

from rich.console import Console
from rich.syntax import Syntax

from mdline.converter import EMPTY_HTML, convert_text
from mdline.renderers import RenderContext


class PreviewTarget:
    """holds the HTML currently shown in the preview."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.html = EMPTY_HTML
        self._console = console or Console(stderr=True)

    def replace(self, html: str) -> None:
        """replaces the displayed HTML."""
        self.html = html

    def show(self) -> None:
        """prints the current HTML with syntax highlighting."""
        self._console.print(Syntax(self.html, "html", word_wrap=True))


class TextChangeHandler:  # pylint: disable=too-few-public-methods
    """re-renders the preview whenever the input buffer changes."""

    def __init__(
        self, target: PreviewTarget, ctx: Optional[RenderContext] = None
    ) -> None:
        self.target = target
        self.ctx = ctx

    def on_input_changed(self, text: str) -> str:
        """
        converts text and pushes the result to the target.

        Args:
            text: full contents of the input buffer

        Returns:
            HTML now shown by the target
        """
        html = convert_text(text, self.ctx) if text else EMPTY_HTML
        self.target.replace(html)
        return html
