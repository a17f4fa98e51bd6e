# landing.py

from typing import List, Optional, Sequence

from .taglines import DEFAULT_TAGLINES, WAITLIST_TAGLINE, LOGO_TEXT

OPEN_KEYS = {"c-m", "c-j", " "}
QUIT_KEYS = {"c-c", "c-d", "q"}


class Landing:
    """
    Terminal landing screen: logo panel, animated tagline and the waitlist form.

    Opening the form swaps the tagline list for the waitlist call to action,
    which restarts the typewriter; closing it swaps the taglines back.
    """

    def __init__(self, display, client, logger,
                 taglines: Sequence[str] = DEFAULT_TAGLINES,
                 waitlist_tagline: Sequence[str] = WAITLIST_TAGLINE,
                 logo_text: str = LOGO_TEXT):
        self.display = display
        self.terminal = display.terminal
        self.client = client
        self.logger = logger
        self.taglines = list(taglines)
        self.waitlist_tagline = list(waitlist_tagline)
        self.show_form = False
        self.name = ""
        self.email = ""
        self.logo = display.style.panel(logo_text, title="Finantic")
        self.tagline_row = self.logo.count("\n") + 2
        self.renderer = display.animations.create_renderer(row=self.tagline_row)
        self.typewriter = display.animations.create_typewriter(
            self.phrases, reset_on_phrase_change=True, renderer=self.renderer
        )

    @property
    def phrases(self) -> List[str]:
        return self.waitlist_tagline if self.show_form else self.taglines

    def open_form(self) -> None:
        self.show_form = True
        self.typewriter.update(self.phrases)

    def leave_form(self) -> None:
        """Hide the form unless something has been typed into it."""
        if not self.name and not self.email:
            self.show_form = False
            self.typewriter.update(self.phrases)

    async def submit(self) -> Optional[dict]:
        """Send the form if either field has content. Returns the server's reply, if any."""
        if not (self.name.strip() or self.email.strip()):
            return None
        result = await self.client.submit(self.name, self.email)
        if result is not None:
            self.name = ""
            self.email = ""
            self.show_form = False
            self.typewriter.update(self.phrases)
        return result

    def draw(self) -> None:
        self.terminal.clear_screen()
        self.terminal.hide_cursor()
        self.terminal.write(self.logo)
        self.renderer(self.typewriter.state.text)
        self.terminal.write(f"\033[{self.tagline_row + 2};1H")

    async def run_form(self) -> None:
        self.open_form()
        try:
            name = await self.terminal.prompt("Your name: ", default=self.name)
            if name is not None:
                self.name = name
                email = await self.terminal.prompt("Your email: ", default=self.email)
                if email is not None:
                    self.email = email
                    await self.submit()
        finally:
            self.draw()
        # Escape or an empty submission leaves the form; typed text keeps it open.
        self.leave_form()

    async def run(self) -> None:
        self.draw()
        async with self.typewriter:
            while True:
                key = await self.terminal.read_key()
                if key in QUIT_KEYS:
                    break
                if key in OPEN_KEYS:
                    try:
                        await self.run_form()
                    except (KeyboardInterrupt, EOFError):
                        break
        self.logger.debug("Landing closed")
