# waitlist/__init__.py

from .errors import WaitlistError, ValidationError, StorageError
from .models import WaitlistEntry

__all__ = ['WaitlistEntry', 'WaitlistError', 'ValidationError', 'StorageError']
