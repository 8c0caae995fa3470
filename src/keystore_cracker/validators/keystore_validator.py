
"""
Ethereum keystore (v3) validator
"""

import json
import logging
from pathlib import Path
from typing import Any

from eth_account import Account

from keystore_cracker.config import MAX_KEYSTORE_SIZE_BYTES, MAX_PASSWORD_LENGTH, MAX_PATH_LENGTH
from keystore_cracker.errors import KeystoreError
from .base_validator import PasswordValidator

logger = logging.getLogger(__name__)

REQUIRED_CRYPTO_FIELDS = ("kdf", "ciphertext", "mac")


def validate_keystore_path(path: str | Path) -> Path:
    """Check that `path` names a readable, reasonably sized .json file."""
    raw = str(path)
    if not raw.strip():
        raise KeystoreError("Keystore path cannot be empty")
    if len(raw) > MAX_PATH_LENGTH:
        raise KeystoreError(
            f"Path too long: {len(raw)} chars (max: {MAX_PATH_LENGTH})")
    if "\0" in raw:
        raise KeystoreError("Null byte detected in path")
    if ".." in Path(raw.replace("\\", "/")).parts:
        raise KeystoreError(f"Path traversal detected: {raw}")

    resolved = Path(raw).resolve()
    if not resolved.exists():
        raise KeystoreError(f"File not found: {raw}")
    if not resolved.is_file():
        raise KeystoreError(f"Not a regular file: {raw}")
    if resolved.suffix.lower() != ".json":
        raise KeystoreError(
            f"Keystore file must have .json extension: {resolved.name}")

    size = resolved.stat().st_size
    if size == 0:
        raise KeystoreError(f"File is empty: {raw}")
    if size > MAX_KEYSTORE_SIZE_BYTES:
        raise KeystoreError(
            f"File too large: {size} bytes (max: {MAX_KEYSTORE_SIZE_BYTES})")
    return resolved


def parse_keystore(text: str) -> dict[str, Any]:
    """Parse keystore JSON and check it carries what decryption needs."""
    try:
        keystore = json.loads(text)
    except json.JSONDecodeError as e:
        raise KeystoreError(f"Keystore is not valid JSON: {e}") from e

    if not isinstance(keystore, dict):
        raise KeystoreError("Keystore must be a JSON object")
    if keystore.get("version") != 3:
        raise KeystoreError(
            f"Unsupported keystore version: {keystore.get('version')!r}")

    # some wallets write "Crypto"
    if "crypto" not in keystore and "Crypto" in keystore:
        keystore["crypto"] = keystore.pop("Crypto")

    crypto = keystore.get("crypto")
    if not isinstance(crypto, dict):
        raise KeystoreError("Keystore has no crypto section")
    missing = [name for name in REQUIRED_CRYPTO_FIELDS if name not in crypto]
    if missing:
        raise KeystoreError(
            f"Keystore crypto section is missing: {', '.join(missing)}")
    return keystore


class KeystoreValidator(PasswordValidator):
    """
    Test passwords against an Ethereum v3 keystore.

    The file is read and parsed once. Every `validate` call only reads the
    parsed keystore, so calls from several workers run side by side with
    no lock and no temporary file.
    """

    def __init__(self, path: str | Path):
        self.path = validate_keystore_path(path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise KeystoreError(f"Cannot read keystore {self.path.name}: {e}") from e
        self._keystore = parse_keystore(text)
        self.address = self._keystore.get("address")
        logger.info(f"Loaded keystore {self.path.name} (kdf={self._keystore['crypto']['kdf']})")

    @property
    def description(self) -> str:
        return f"Ethereum keystore validator for {self.path.name}"

    def validate(self, password: str) -> bool:
        if password is None or len(password) > MAX_PASSWORD_LENGTH or "\0" in password:
            logger.debug("Rejected malformed password candidate")
            return False
        try:
            Account.decrypt(self._keystore, password)
        except ValueError:
            # MAC mismatch: wrong password
            return False
        return True
