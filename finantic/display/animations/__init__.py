# display/animations/__init__.py

from .renderer import TaglineRenderer, CARET
from .typewriter import TypingAnimator, TypewriterMachine, AnimatorState, Mode


class DisplayAnimations:
    """Coordinates terminal animation components."""
    def __init__(self, terminal, style, logger=None):
        self.terminal = terminal
        self.style = style
        self.logger = logger

    def create_renderer(self, caret: str = CARET, row=None) -> TaglineRenderer:
        """Create a renderer that draws the tagline line with a caret."""
        return TaglineRenderer(self.terminal, self.style, caret, row)

    def create_typewriter(self, phrases, reset_on_phrase_change=False, renderer=None):
        """Create a typing animation bound to a tagline renderer."""
        return TypingAnimator(
            phrases,
            renderer or self.create_renderer(),
            reset_on_phrase_change=reset_on_phrase_change,
            logger=self.logger,
        )


__all__ = ['DisplayAnimations', 'TaglineRenderer', 'TypingAnimator',
           'TypewriterMachine', 'AnimatorState', 'Mode', 'CARET']
