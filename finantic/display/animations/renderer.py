# display/animations/renderer.py

from typing import Optional

CARET = "|"


class TaglineRenderer:
    """Rewrites the tagline line in place with a trailing caret."""

    def __init__(self, terminal, style=None, caret: str = CARET, row: Optional[int] = None):
        """
        Args:
            terminal: DisplayTerminal instance for output
            style: DisplayStyle for colouring; plain text if None
            caret: Glyph drawn after the text
            row: Absolute screen row to draw on; the current line if None
        """
        self.terminal = terminal
        self.style = style
        self.caret = caret
        self.row = row
        self.frame = ""

    def format(self, text: str) -> str:
        if self.style:
            return f"{self.style.tagline(text)}{self.style.caret(self.caret)}"
        return f"{text}{self.caret}"

    def __call__(self, text: str) -> None:
        self.frame = text
        self.terminal.rewrite_line(self.format(text), row=self.row)
