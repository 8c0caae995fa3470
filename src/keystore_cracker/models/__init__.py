"""
Models for the keystore cracker.
"""

from keystore_cracker.models.models import (DEFAULT_BOUNDS, GrammarBounds, PasswordConfig,
                                            ProgressSnapshot, RecoveryResult, SearchChunk,
                                            WorkerReport, WorkerState)

__all__ = [
    "DEFAULT_BOUNDS",
    "GrammarBounds",
    "PasswordConfig",
    "ProgressSnapshot",
    "RecoveryResult",
    "SearchChunk",
    "WorkerReport",
    "WorkerState",
]
