# waitlist/errors.py


class WaitlistError(Exception):
    """Base class for waitlist failures."""
    status_code = 500


class ValidationError(WaitlistError):
    """The submitted name/email pair was rejected."""
    status_code = 400


class StorageError(WaitlistError):
    """The backend could not persist the entry."""
    status_code = 500
