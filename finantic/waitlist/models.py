# waitlist/models.py

import random
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .errors import ValidationError

_BASE36 = string.digits + string.ascii_lowercase


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_entry_id(rng: Optional[random.Random] = None) -> str:
    """Epoch milliseconds plus nine random base36 characters."""
    rng = rng or random
    suffix = ''.join(rng.choice(_BASE36) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"


@dataclass
class WaitlistEntry:
    name: str
    email: str
    timestamp: str = field(default_factory=utc_timestamp)
    source: str = "website"
    id: str = field(default_factory=new_entry_id)

    @classmethod
    def from_payload(cls, payload: Any, require_name: bool = True) -> "WaitlistEntry":
        """
        Build an entry from a decoded JSON body.

        With require_name both fields must be present (HTTP/CSV backend);
        otherwise only an email containing '@' is required and the name
        defaults to '' (Lambda/DynamoDB backend).

        Raises:
            ValidationError: If the payload fails the backend's check
        """
        if not isinstance(payload, dict):
            payload = {}
        name = payload.get("name") or ""
        email = payload.get("email") or ""
        if not isinstance(name, str) or not isinstance(email, str):
            raise ValidationError("Name and email must be strings")

        if require_name:
            if not name or not email:
                raise ValidationError("Name and email are required")
        elif "@" not in email:
            raise ValidationError("Valid email is required")
        return cls(name=name, email=email)

    def to_dict(self) -> Dict[str, str]:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'timestamp': self.timestamp,
            'source': self.source,
        }
