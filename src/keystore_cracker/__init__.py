"""
Keystore Cracker - Ethereum keystore password recovery.

Searches passwords of the form [5-12 char base] + [1-5 digits] + [1 special
char], with base tokens built from a word list, across a pool of threads.
"""

__version__ = "1.1.0"

from keystore_cracker.cracker.engine import RecoveryEngine
from keystore_cracker.errors import ConfigurationError, KeystoreError, RecoveryError
from keystore_cracker.models.models import GrammarBounds, PasswordConfig, RecoveryResult
from keystore_cracker.validators import FunctionValidator, KeystoreValidator, PasswordValidator

__all__ = [
    "ConfigurationError",
    "FunctionValidator",
    "GrammarBounds",
    "KeystoreError",
    "KeystoreValidator",
    "PasswordConfig",
    "PasswordValidator",
    "RecoveryEngine",
    "RecoveryError",
    "RecoveryResult",
]
