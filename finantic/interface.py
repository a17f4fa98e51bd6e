# interface.py

import asyncio
from typing import Optional, Sequence

from .config import Settings
from .logger import Logger
from .display import Display
from .landing import Landing
from .taglines import DEFAULT_TAGLINES
from .waitlist.client import WaitlistClient


class Interface:
    """
    Main entry point that assembles the Display, the waitlist client and the Landing screen.
    """

    def __init__(self, endpoint: Optional[str] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize components with an optional endpoint and logging.

        Args:
            endpoint: Waitlist URL to POST submissions to. Falls back to
                FINANTIC_WAITLIST_ENDPOINT, then the local server.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
        """
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)
            self.settings = Settings.from_env({'waitlist_endpoint': endpoint})
            self.display = Display(logger=self.logger)
            self.logger.debug(f"Waitlist endpoint: {self.settings.waitlist_endpoint}")
        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    async def _run(self, taglines: Sequence[str]) -> None:
        async with WaitlistClient(self.settings.waitlist_endpoint, logger=self.logger,
                                  timeout=self.settings.timeout) as client:
            landing = Landing(self.display, client, self.logger, taglines=taglines)
            await landing.run()

    def start(self, taglines: Optional[Sequence[str]] = None) -> None:
        """Show the landing screen until the user quits (q, Ctrl-C or Ctrl-D)."""
        try:
            asyncio.run(self._run(list(taglines or DEFAULT_TAGLINES)))
        except KeyboardInterrupt:
            print("\nExiting...")
        finally:
            self.display.terminal.reset()
