
"""
Password validators for the keystore cracker.
"""

from typing import Callable

from keystore_cracker.validators.base_validator import FunctionValidator, PasswordValidator
from keystore_cracker.validators.keystore_validator import KeystoreValidator


VALIDATORS: dict[str, Callable[..., PasswordValidator]] = {
    "keystore": KeystoreValidator,
}

__all__ = [
    "FunctionValidator",
    "KeystoreValidator",
    "PasswordValidator",
    "VALIDATORS",
]
