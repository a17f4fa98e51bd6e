# waitlist/csv_store.py

import asyncio
import csv
import logging
import os
from typing import List, Optional

from cryptography.fernet import Fernet, InvalidToken

from .errors import StorageError
from .models import WaitlistEntry

logger = logging.getLogger(__name__)

HEADER = ["TIMESTAMP", "NAME", "EMAIL"]


class FieldCipher:
    """Authenticated encryption for individual CSV fields."""

    def __init__(self, key: Optional[str] = None):
        if not key:
            logger.warning("No encryption key configured; generated an ephemeral key. "
                           "Rows written now cannot be read after a restart.")
            key = Fernet.generate_key()
        self.fernet = Fernet(key)

    def encrypt(self, text: str) -> str:
        return self.fernet.encrypt(text.encode("utf-8")).decode("ascii")

    def decrypt(self, token: str) -> str:
        return self.fernet.decrypt(token.encode("ascii")).decode("utf-8")


class CsvWaitlistStore:
    """Appends waitlist entries to a CSV file with name and email encrypted."""

    def __init__(self, path: str, cipher: FieldCipher):
        self.path = path
        self.cipher = cipher
        self._lock = asyncio.Lock()
        self._ensure_file()

    def _ensure_file(self) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        if not os.path.exists(self.path):
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow(HEADER)

    def _append(self, entry: WaitlistEntry) -> None:
        row = [entry.timestamp,
               self.cipher.encrypt(entry.name),
               self.cipher.encrypt(entry.email)]
        with open(self.path, "a", newline="", encoding="utf-8") as f:
            csv.writer(f).writerow(row)

    async def add(self, entry: WaitlistEntry) -> None:
        """
        Persist one entry.

        Raises:
            StorageError: If the file cannot be written
        """
        async with self._lock:
            try:
                await asyncio.to_thread(self._append, entry)
            except OSError as e:
                raise StorageError(str(e)) from e

    def read_entries(self) -> List[WaitlistEntry]:
        """Decrypt every row written with this store's key."""
        entries = []
        with open(self.path, newline="", encoding="utf-8") as f:
            for row in csv.DictReader(f):
                try:
                    entries.append(WaitlistEntry(
                        name=self.cipher.decrypt(row["NAME"]),
                        email=self.cipher.decrypt(row["EMAIL"]),
                        timestamp=row["TIMESTAMP"],
                    ))
                except InvalidToken:
                    logger.warning(f"Skipping row from {row['TIMESTAMP']}: encrypted with another key")
        return entries
