import json

import pytest

from conftest import KEYSTORE_PASSWORD
from keystore_cracker.cracker.engine import RecoveryEngine
from keystore_cracker.errors import KeystoreError
from keystore_cracker.models.models import PasswordConfig
from keystore_cracker.validators import VALIDATORS, FunctionValidator, KeystoreValidator
from keystore_cracker.validators.keystore_validator import parse_keystore


def test_keystore_accepts_right_password(keystore_file):
    validator = KeystoreValidator(keystore_file)

    assert validator.validate(KEYSTORE_PASSWORD)
    assert not validator.validate("Wallet2024!")
    assert validator.description == "Ethereum keystore validator for wallet.json"


def test_malformed_passwords_are_wrong(keystore_file):
    validator = KeystoreValidator(keystore_file)

    assert not validator.validate("Wallet\0 2024@")
    assert not validator.validate("x" * 1001)
    assert not validator.validate(None)


def test_registry_builds_keystore_validator(keystore_file):
    assert isinstance(VALIDATORS["keystore"](keystore_file), KeystoreValidator)


def test_recover_real_keystore(keystore_file):
    config = PasswordConfig(base_words=["wallet", "crypto"], digit_patterns=["12", "2024"],
                            special_chars=["!", "@"])
    engine = RecoveryEngine(KeystoreValidator(keystore_file))

    result = engine.recover(config, 4)

    assert result.found
    assert result.password == KEYSTORE_PASSWORD


def test_capitalized_crypto_section(keystore_file):
    keystore = json.loads(keystore_file.read_text())
    keystore["Crypto"] = keystore.pop("crypto")
    keystore_file.write_text(json.dumps(keystore))

    assert KeystoreValidator(keystore_file).validate(KEYSTORE_PASSWORD)


def test_missing_file(tmp_path):
    with pytest.raises(KeystoreError, match="File not found"):
        KeystoreValidator(tmp_path / "missing.json")


def test_wrong_extension(tmp_path):
    path = tmp_path / "wallet.txt"
    path.write_text("{}")
    with pytest.raises(KeystoreError, match=".json extension"):
        KeystoreValidator(path)


def test_empty_file(tmp_path):
    path = tmp_path / "wallet.json"
    path.write_text("")
    with pytest.raises(KeystoreError, match="empty"):
        KeystoreValidator(path)


def test_directory_is_rejected(tmp_path):
    path = tmp_path / "dir.json"
    path.mkdir()
    with pytest.raises(KeystoreError, match="Not a regular file"):
        KeystoreValidator(path)


def test_path_traversal_is_rejected(tmp_path):
    with pytest.raises(KeystoreError, match="traversal"):
        KeystoreValidator(f"{tmp_path}/../wallet.json")


@pytest.mark.parametrize("text, message", [
    ("not json", "not valid JSON"),
    ("[1, 2]", "JSON object"),
    ('{"version": 1}', "Unsupported keystore version"),
    ('{"version": 3}', "no crypto section"),
    ('{"version": 3, "crypto": {"kdf": "scrypt"}}', "ciphertext, mac"),
])
def test_bad_keystore_content(text, message):
    with pytest.raises(KeystoreError, match=message):
        parse_keystore(text)


def test_function_validator():
    validator = FunctionValidator(lambda pw: pw == "abc", description="demo")
    assert validator.validate("abc")
    assert not validator.validate("abd")
    assert validator.description == "demo"
