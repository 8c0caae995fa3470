"""Exceptions raised by the keystore cracker."""


class RecoveryError(Exception):
    """Base class for keystore cracker errors."""


class ConfigurationError(RecoveryError, ValueError):
    """The search cannot start: bad lists, empty base set or bad worker count."""


class KeystoreError(RecoveryError):
    """The keystore file cannot be used for validation."""
