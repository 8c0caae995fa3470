"""Pytest configuration and fixtures for keystore cracker tests."""

import json
import logging
import threading
import time

import pytest
from eth_account import Account

from keystore_cracker.config import PACKAGE_LOGGER
from keystore_cracker.models.models import PasswordConfig
from keystore_cracker.validators.base_validator import PasswordValidator

KEYSTORE_PASSWORD = "Wallet2024@"
PRIVATE_KEY = "0x" + "4c" * 32


class RecordingValidator(PasswordValidator):
    """Remembers every candidate it was asked about."""

    def __init__(self, target: str | None = None, delay: float = 0.0):
        self.target = target
        self.delay = delay
        self.tried: list[str] = []
        self._lock = threading.Lock()

    @property
    def description(self) -> str:
        return "recording validator"

    def validate(self, password: str) -> bool:
        with self._lock:
            self.tried.append(password)
        if self.delay:
            time.sleep(self.delay)
        return password == self.target


@pytest.fixture
def small_config():
    """12 bases x 3 digit patterns x 2 specials."""
    return PasswordConfig(
        base_words=["wallet", "crypto"],
        digit_patterns=["1", "22", "333"],
        special_chars=["!", "@"],
    )


@pytest.fixture
def wide_config():
    """12 bases x 100 digit patterns x 3 specials."""
    return PasswordConfig(
        base_words=["wallet", "crypto"],
        digit_patterns=[f"{i:02d}" for i in range(100)],
        special_chars=["!", "@", "#"],
    )


@pytest.fixture
def keystore_file(tmp_path):
    """A v3 keystore encrypted with KEYSTORE_PASSWORD (cheap pbkdf2 kdf)."""
    keystore = Account.encrypt(PRIVATE_KEY, KEYSTORE_PASSWORD, kdf="pbkdf2", iterations=16)
    path = tmp_path / "wallet.json"
    path.write_text(json.dumps(keystore), encoding="utf-8")
    return path


@pytest.fixture
def reset_package_logger():
    """Drop handlers installed by setup_logger so they do not outlive the test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
