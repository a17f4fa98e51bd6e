# conftest.py

import pytest
from cryptography.fernet import Fernet

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from finantic.config import Settings
from finantic.waitlist.csv_store import CsvWaitlistStore, FieldCipher


@pytest.fixture
def encryption_key():
    return Fernet.generate_key().decode()


@pytest.fixture
def settings(tmp_path, encryption_key):
    return Settings.from_env({
        'data_dir': str(tmp_path / 'data'),
        'build_dir': str(tmp_path / 'build'),
        'encryption_key': encryption_key,
    }, environ={})


@pytest.fixture
def csv_store(settings):
    return CsvWaitlistStore(settings.csv_path, FieldCipher(settings.encryption_key))
