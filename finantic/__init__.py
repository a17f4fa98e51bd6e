# __init__.py

from .taglines import DEFAULT_TAGLINES, WAITLIST_TAGLINE
from .logger import Logger
from .interface import Interface
from .display.animations.typewriter import TypingAnimator, TypewriterMachine

__all__ = ["Interface", "Logger", "TypingAnimator", "TypewriterMachine",
           "DEFAULT_TAGLINES", "WAITLIST_TAGLINE"]
