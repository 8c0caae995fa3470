"""
Candidate generation and the recovery engine.
"""

from keystore_cracker.cracker.cracker_core import (capitalize, count_candidates, generate_bases,
                                                   iter_candidates, title_case)
from keystore_cracker.cracker.engine import ProgressReporter, RecoveryEngine, SearchState

__all__ = [
    "ProgressReporter",
    "RecoveryEngine",
    "SearchState",
    "capitalize",
    "count_candidates",
    "generate_bases",
    "iter_candidates",
    "title_case",
]
