# display/__init__.py

from .terminal import DisplayTerminal
from .style import DisplayStyle
from .animations import DisplayAnimations


class Display:
    """
    Coordinates terminal display components in a hierarchical structure.

    Component Hierarchy:
    DisplayTerminal (base) → DisplayStyle → DisplayAnimations
    """
    def __init__(self, terminal=None, logger=None):
        """Initialize components in dependency order."""
        self.terminal = terminal or DisplayTerminal()
        self.style = DisplayStyle(terminal=self.terminal)
        self.animations = DisplayAnimations(terminal=self.terminal, style=self.style, logger=logger)


__all__ = ['Display', 'DisplayTerminal', 'DisplayStyle', 'DisplayAnimations']
