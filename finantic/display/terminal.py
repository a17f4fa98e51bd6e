# display/terminal.py

import sys
import asyncio
import shutil
from dataclasses import dataclass
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import create_input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class DisplayTerminal:
    """Low-level terminal operations and I/O."""

    def __init__(self, stream=None):
        self._stream = stream
        self._cursor_visible = True
        self._prompt_session = None
        self._setup_key_bindings()

    @property
    def stream(self):
        # Resolved lazily so redirected stdout (tests, pipes) is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def _setup_key_bindings(self) -> None:
        """Escape cancels the form; the prompt then returns None."""
        kb = KeyBindings()

        @kb.add("escape", eager=True)
        def _(event):
            event.app.exit(result=None)

        self._key_bindings = kb

    @property
    def prompt_session(self) -> PromptSession:
        if self._prompt_session is None:
            self._prompt_session = PromptSession(
                key_bindings=self._key_bindings, complete_while_typing=False
            )
        return self._prompt_session

    @property
    def width(self) -> int:
        """Return terminal width."""
        return self.get_size().columns

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions."""
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    def _is_terminal(self) -> bool:
        """Return True if the output stream is a terminal."""
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            self.stream.write("\033[?25h" if show else "\033[?25l")
            self.stream.flush()

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def reset(self) -> None:
        """Reset terminal: show cursor and clear screen."""
        self.show_cursor()
        self.clear_screen()

    def clear_screen(self) -> None:
        """Clear the terminal screen and reset cursor position."""
        if self._is_terminal():
            self.stream.write("\033[2J\033[H")
            self.stream.flush()

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to the stream; append newline if requested."""
        try:
            self.stream.write(text)
            if newline:
                self.stream.write("\n")
            self.stream.flush()
        except IOError:
            pass  # Ignore pipe errors

    def write_line(self, text: str = "") -> None:
        """Write text with newline."""
        self.write(text, newline=True)

    def rewrite_line(self, text: str, row: Optional[int] = None) -> None:
        """
        Replace a line with text.

        Without a row the current line is rewritten and the cursor is left at
        its end. With a row (1-based) that line is rewritten and the cursor is
        restored to where it was, so an active prompt below is undisturbed.
        """
        if row is None:
            self.write(f"\r\033[2K{text}")
        else:
            self.write(f"\0337\033[{row};1H\033[2K{text}\0338")

    async def read_key(self) -> str:
        """Wait for a single key press and return its prompt_toolkit key name."""
        inp = create_input()
        pressed = []
        ready = asyncio.Event()

        def keys_ready():
            for key_press in inp.read_keys():
                pressed.append(key_press.key)
            if pressed:
                ready.set()

        with inp.raw_mode():
            with inp.attach(keys_ready):
                await ready.wait()
        key = pressed[0]
        return key.value if isinstance(key, Keys) else key

    async def prompt(self, label: str, default: str = "") -> Optional[str]:
        """Ask for one line of input. Returns None when cancelled with Escape."""
        self.show_cursor()
        try:
            return await self.prompt_session.prompt_async(
                FormattedText([("class:prompt", label)]), default=default
            )
        finally:
            self.hide_cursor()
