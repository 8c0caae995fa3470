"""
Models for the recovery engine.
"""
from datetime import timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from keystore_cracker.config import (MAX_BASE_LENGTH, MAX_DIGITS, MIN_BASE_LENGTH,
                                     MIN_DIGITS, SPECIAL_LENGTH)


class WorkerState(str, Enum):
    """State of a search worker.

    RUNNING:    The worker is walking its chunk.
    FOUND:      The worker found the password.
    EXHAUSTED:  The worker tried every candidate of its chunk.
    CANCELLED:  The worker stopped because the run was stopped.
    """
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


class GrammarBounds(BaseModel):
    """Bounds of the password grammar.

    min_base_length: Shortest allowed base token.
    max_base_length: Longest allowed base token.
    min_digits:      Fewest digits in a digit pattern.
    max_digits:      Most digits in a digit pattern.
    special_length:  Length of the trailing special part.
    """
    model_config = ConfigDict(frozen=True)

    min_base_length: int = MIN_BASE_LENGTH
    max_base_length: int = MAX_BASE_LENGTH
    min_digits: int = MIN_DIGITS
    max_digits: int = MAX_DIGITS
    special_length: int = SPECIAL_LENGTH

    @model_validator(mode="after")
    def check_ranges(self) -> "GrammarBounds":
        if not 1 <= self.min_base_length <= self.max_base_length:
            raise ValueError(
                f"invalid base length bounds {self.min_base_length}-{self.max_base_length}")
        if not 1 <= self.min_digits <= self.max_digits:
            raise ValueError(
                f"invalid digit bounds {self.min_digits}-{self.max_digits}")
        if self.special_length < 1:
            raise ValueError("special_length must be at least 1")
        return self

    def base_length_ok(self, token: str) -> bool:
        return self.min_base_length <= len(token) <= self.max_base_length


DEFAULT_BOUNDS = GrammarBounds()


class PasswordConfig(BaseModel):
    """The three input lists of a recovery run, ordered by likelihood.

    base_words:     Words the base tokens are built from.
    digit_patterns: Digit strings appended to a base.
    special_chars:  Characters appended last.
    """
    model_config = ConfigDict(frozen=True)

    base_words: tuple[str, ...]
    digit_patterns: tuple[str, ...]
    special_chars: tuple[str, ...]

    @field_validator("base_words", "digit_patterns", "special_chars")
    @classmethod
    def not_empty(cls, value: tuple[str, ...], info) -> tuple[str, ...]:
        if not value:
            raise ValueError(f"{info.field_name} cannot be empty")
        return value

    def is_valid(self) -> bool:
        """True when all three lists have at least one item."""
        return bool(self.base_words and self.digit_patterns and self.special_chars)

    def __str__(self) -> str:
        return (f"PasswordConfig(base_words={len(self.base_words)}, "
                f"digit_patterns={len(self.digit_patterns)}, "
                f"special_chars={len(self.special_chars)})")


class SearchChunk(BaseModel):
    """A contiguous slice of the base sequence owned by one worker.

    worker_id: The worker the chunk is assigned to.
    start:     First base index (inclusive).
    end:       Last base index (exclusive).
    """
    model_config = ConfigDict(frozen=True)

    worker_id: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


class WorkerReport(BaseModel):
    """Final outcome of one worker."""
    worker_id: int
    state: WorkerState
    attempts: int
    chunk_size: int


class ProgressSnapshot(BaseModel):
    """Telemetry published while a run is in progress."""
    model_config = ConfigDict(frozen=True)

    attempts: int
    total: int
    elapsed_seconds: float
    rate: float

    @property
    def percent(self) -> float:
        if self.total <= 0:
            return 0.0
        return self.attempts * 100 / self.total


class RecoveryResult(BaseModel):
    """Outcome of a recovery run.

    found:            Whether the password was found.
    password:         The password, when found.
    attempts:         Candidates tested during the run.
    elapsed:          Wall time of the run.
    total_candidates: Size of the search space.
    worker_count:     Workers used.
    timed_out:        The run stopped at its deadline.
    """
    model_config = ConfigDict(frozen=True)

    found: bool
    password: Optional[str] = None
    attempts: int
    elapsed: timedelta
    total_candidates: int = 0
    worker_count: int = 1
    timed_out: bool = False

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed.total_seconds()

    def __str__(self) -> str:
        return (f"RecoveryResult(found={self.found}, attempts={self.attempts:,}, "
                f"time={self.elapsed_seconds:.2f}s)")
