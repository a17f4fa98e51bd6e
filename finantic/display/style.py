# display/style.py

import re
from io import StringIO

from rich.align import Align
from rich.console import Console
from rich.panel import Panel

ANSI_REGEX = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]')
FMT = lambda x: f'\033[{x}m'
FORMATS = {
    'RESET': FMT('0'),
    'BOLD_ON': FMT('1'),
    'BOLD_OFF': FMT('22'),
    'BLINK_ON': FMT('5'),
    'BLINK_OFF': FMT('25'),
}
COLORS = {
    'GREEN': {'ansi': '\033[38;5;47m', 'rich': 'green3'},
    'BLUE':  {'ansi': '\033[38;5;75m', 'rich': 'blue1'},
    'GRAY':  {'ansi': '\033[38;5;245m', 'rich': 'gray50'},
    'WHITE': {'ansi': '\033[38;5;255m', 'rich': 'white'},
}


class DisplayStyle:
    """ANSI colouring for the tagline and rich rendering for the logo panel."""

    def __init__(self, terminal=None, tagline_color: str = 'WHITE', caret_color: str = 'GREEN'):
        self.terminal = terminal
        self.tagline_color = tagline_color
        self.caret_color = caret_color
        self._console = Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False,
        )

    def get_format(self, name: str) -> str:
        return FORMATS.get(name, '')

    def get_color(self, name: str) -> str:
        return COLORS.get(name, {}).get('ansi', '')

    def get_visible_length(self, text: str) -> int:
        return len(ANSI_REGEX.sub('', text))

    def tagline(self, text: str) -> str:
        return f"{FORMATS['BOLD_ON']}{self.get_color(self.tagline_color)}{text}{FORMATS['RESET']}"

    def caret(self, glyph: str) -> str:
        return f"{FORMATS['BLINK_ON']}{self.get_color(self.caret_color)}{glyph}{FORMATS['RESET']}"

    def panel(self, text: str, title: str = None, border_style: str = "dim green",
              width: int = None) -> str:
        """Render text as a centred rich panel and return the ANSI string."""
        with self._console.capture() as capture:
            self._console.print(
                Panel(
                    Align.center(text.rstrip()),
                    title=title,
                    title_align="right",
                    border_style=border_style,
                    padding=(1, 2),
                    expand=True,
                    width=width,
                )
            )
        return capture.get()
