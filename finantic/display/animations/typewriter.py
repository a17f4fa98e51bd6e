# display/animations/typewriter.py

import asyncio
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Protocol, Sequence, Tuple

TYPING_DELAY_MS = (50, 100)
ERASING_DELAY_MS = (20, 50)
PAUSE_DELAY_MS = 1500


class Mode(Enum):
    TYPING = "typing"
    ERASING = "erasing"
    PAUSED = "paused"


@dataclass
class AnimatorState:
    """Snapshot of the typewriter: which phrase, how much of it, and what happens next."""
    index: int = 0
    text: str = ""
    mode: Mode = Mode.TYPING
    # Mode a pause resolves to; TYPING means "advance to the next phrase first".
    pending: Optional[Mode] = None


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


def _check_phrases(phrases: Sequence[str]) -> Tuple[str, ...]:
    phrases = tuple(phrases)
    if not phrases:
        raise ValueError("phrases must contain at least one string")
    return phrases


class TypewriterMachine:
    """
    Clock-free typewriter state machine.

    Types a phrase one character per tick, pauses, erases it one character
    per tick, pauses again and moves on to the next phrase, forever.
    """

    def __init__(self, phrases: Sequence[str], rng: Optional[random.Random] = None):
        self.phrases = _check_phrases(phrases)
        self.rng = rng or random.Random()
        self.state = AnimatorState()

    @property
    def phrase(self) -> str:
        return self.phrases[self.state.index]

    @property
    def text(self) -> str:
        return self.state.text

    def reset(self, phrases: Optional[Sequence[str]] = None) -> None:
        """Return to the initial state, optionally on a new phrase list."""
        if phrases is not None:
            self.phrases = _check_phrases(phrases)
        self.state = AnimatorState()

    def adopt(self, phrases: Sequence[str]) -> None:
        """Swap the phrase list in place, keeping index, text and mode."""
        self.phrases = _check_phrases(phrases)
        state = self.state
        state.index %= len(self.phrases)
        # Keep the prefix invariant against the (possibly different) phrase.
        keep = 0
        for have, want in zip(state.text, self.phrase):
            if have != want:
                break
            keep += 1
        state.text = state.text[:keep]

    def settle(self) -> bool:
        """Apply the zero-delay transitions into a pause. Returns True if one happened."""
        state = self.state
        if state.mode is Mode.TYPING and len(state.text) >= len(self.phrase):
            state.mode, state.pending = Mode.PAUSED, Mode.ERASING
            return True
        if state.mode is Mode.ERASING and not state.text:
            state.mode, state.pending = Mode.PAUSED, Mode.TYPING
            return True
        return False

    def delay(self) -> float:
        """Seconds to wait before the next tick in the current mode."""
        mode = self.state.mode
        if mode is Mode.PAUSED:
            ms = PAUSE_DELAY_MS
        elif mode is Mode.TYPING:
            ms = self.rng.randrange(*TYPING_DELAY_MS)
        else:
            ms = self.rng.randrange(*ERASING_DELAY_MS)
        return ms / 1000

    def tick(self) -> None:
        """Advance by one character or resolve one pause."""
        state = self.state
        if state.mode is Mode.PAUSED:
            if state.pending is Mode.ERASING:
                state.mode = Mode.ERASING
            else:
                state.index = (state.index + 1) % len(self.phrases)
                state.mode = Mode.TYPING
            state.pending = None
        elif state.mode is Mode.TYPING:
            state.text = self.phrase[:len(state.text) + 1]
        else:
            state.text = self.phrase[:len(state.text) - 1]

    def frames(self) -> Iterator[Tuple[float, str]]:
        """Infinite lazy sequence of (delay_seconds, text) pairs, one per tick."""
        while True:
            self.settle()
            delay = self.delay()
            self.tick()
            yield delay, self.state.text


class TypingAnimator:
    """
    Drives a TypewriterMachine from a timer and pushes every change to a renderer.

    Exactly one timer is outstanding while mounted. The previous handle is
    always cancelled before a new one is scheduled, and stop() cancels it
    unconditionally, so no callback mutates state after disposal.
    """

    def __init__(self, phrases: Sequence[str], render: Callable[[str], None],
                 reset_on_phrase_change: bool = False,
                 scheduler: Optional[Scheduler] = None,
                 rng: Optional[random.Random] = None,
                 logger=None):
        """
        Args:
            phrases: Non-empty list of phrases to cycle through
            render: Called with the current display text on every state change
            reset_on_phrase_change: Restart from the first phrase when update()
                receives a list whose length or first element differs
            scheduler: Object with call_later(); defaults to the running event loop
            rng: Random source for the per-character delays
            logger: Optional Logger instance
        """
        self.machine = TypewriterMachine(phrases, rng)
        self.render = render
        self.reset_on_phrase_change = reset_on_phrase_change
        self.logger = logger
        self._scheduler = scheduler
        self._handle: Optional[TimerHandle] = None
        self._mounted = False

    @property
    def state(self) -> AnimatorState:
        return self.machine.state

    @property
    def phrases(self) -> Tuple[str, ...]:
        return self.machine.phrases

    @property
    def running(self) -> bool:
        return self._mounted

    @property
    def pending(self) -> bool:
        """True while a tick is scheduled."""
        return self._handle is not None

    def start(self) -> None:
        """Mount: render the empty line and schedule the first tick."""
        if self._mounted:
            return
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        self._mounted = True
        if self.logger:
            self.logger.debug(f"Typewriter started with {len(self.phrases)} phrases")
        self.render(self.machine.text)
        self._schedule()

    def stop(self) -> None:
        """Unmount: cancel the outstanding tick."""
        self._cancel()
        if self._mounted and self.logger:
            self.logger.debug("Typewriter stopped")
        self._mounted = False

    def update(self, phrases: Sequence[str]) -> None:
        """Hand the animator a (possibly) new phrase list."""
        phrases = _check_phrases(phrases)
        previous = self.machine.phrases
        changed = len(phrases) != len(previous) or phrases[0] != previous[0]
        if not (self.reset_on_phrase_change and changed):
            self.machine.adopt(phrases)
            return

        self._cancel()
        self.machine.reset(phrases)
        if self.logger:
            self.logger.debug(f"Typewriter reset on new phrases: {phrases[0]!r}")
        if self._mounted:
            self.render(self.machine.text)
            self._schedule()

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        self._cancel()
        if self.machine.settle():
            self.render(self.machine.text)
        self._handle = self._scheduler.call_later(self.machine.delay(), self._fire)

    def _fire(self) -> None:
        self._handle = None
        if not self._mounted:
            return
        self.machine.tick()
        self.render(self.machine.text)
        self._schedule()

    async def __aenter__(self):
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.stop()
