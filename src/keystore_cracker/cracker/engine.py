"""
Multi-threaded recovery engine.

The base tokens are split into one contiguous chunk per worker. Each worker
walks `base x digits x special` for its chunk and asks the validator about
every candidate. The first worker that finds the password stops the others
through the run's shared `SearchState`.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import timedelta
from typing import Callable, Optional, Sequence

from keystore_cracker.config import MAX_WORKERS, MIN_WORKERS, PROGRESS_INTERVAL
from keystore_cracker.cracker.cracker_core import count_candidates, generate_bases
from keystore_cracker.errors import ConfigurationError
from keystore_cracker.models.models import (DEFAULT_BOUNDS, GrammarBounds, PasswordConfig,
                                            ProgressSnapshot, RecoveryResult, SearchChunk,
                                            WorkerReport, WorkerState)
from keystore_cracker.utils.prepare_chunks import prepare_chunks
from keystore_cracker.validators.base_validator import PasswordValidator

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressSnapshot], None]


class SearchState:
    """State shared by the workers of a single run."""

    def __init__(self) -> None:
        self.start_time = time.perf_counter()
        self.found = threading.Event()
        self.stopped = threading.Event()
        self.timed_out = False
        self._password: Optional[str] = None
        self._attempts = 0
        self._lock = threading.Lock()

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def password(self) -> Optional[str]:
        return self._password

    def record_attempt(self) -> None:
        with self._lock:
            self._attempts += 1

    def claim(self, password: str) -> bool:
        """Record `password` as the answer. Only the first claim wins."""
        with self._lock:
            if self._password is not None:
                return False
            self._password = password
        self.found.set()
        self.stopped.set()
        return True

    def expire(self) -> None:
        """Stop the run because its deadline passed."""
        if not self.found.is_set():
            self.timed_out = True
        self.stopped.set()

    def elapsed(self) -> float:
        return time.perf_counter() - self.start_time


def log_progress(snapshot: ProgressSnapshot) -> None:
    logger.info(
        f"Progress: {snapshot.attempts:,}/{snapshot.total:,} ({snapshot.percent:.1f}%) | "
        f"Rate: {snapshot.rate:.2f} passwords/sec | "
        f"Elapsed: {snapshot.elapsed_seconds:.1f}s")


class ProgressReporter(threading.Thread):
    """Publishes attempts and rate every `interval` seconds until the run stops."""

    def __init__(self, state: SearchState, total: int, interval: float = PROGRESS_INTERVAL,
                 callback: Optional[ProgressCallback] = None) -> None:
        super().__init__(name="progress-reporter", daemon=True)
        self.state = state
        self.total = total
        self.interval = interval
        self.callback = callback or log_progress
        self._stop_requested = threading.Event()

    def snapshot(self) -> ProgressSnapshot:
        elapsed = self.state.elapsed()
        attempts = self.state.attempts
        rate = attempts / elapsed if elapsed > 0 else 0.0
        return ProgressSnapshot(attempts=attempts, total=self.total,
                                elapsed_seconds=elapsed, rate=rate)

    def run(self) -> None:
        while not self._stop_requested.wait(self.interval):
            if self.state.stopped.is_set():
                return
            try:
                self.callback(self.snapshot())
            except Exception as e:
                logger.error("Progress callback failed", exc_info=e)

    def stop(self) -> None:
        """Ask the reporter to exit. Does not wait for it."""
        self._stop_requested.set()


class RecoveryEngine:
    """
    Search the candidate space with a pool of worker threads.

    Args:
        validator: Oracle asked about every candidate.
        bounds: Grammar bounds used to build the base tokens.
        progress_interval: Seconds between progress reports.
        on_progress: Receives every ProgressSnapshot, logged when omitted.
    """

    def __init__(self, validator: PasswordValidator, bounds: GrammarBounds = DEFAULT_BOUNDS,
                 progress_interval: float = PROGRESS_INTERVAL,
                 on_progress: Optional[ProgressCallback] = None) -> None:
        if validator is None:
            raise ConfigurationError("validator cannot be None")
        self.validator = validator
        self.bounds = bounds
        self.progress_interval = progress_interval
        self.on_progress = on_progress
        self.last_reports: list[WorkerReport] = []

    def estimate(self, config: PasswordConfig) -> int:
        """Number of candidates `recover(config, ...)` would test at most."""
        self._check_config(config)
        return count_candidates(generate_bases(config.base_words, self.bounds), config)

    def recover(self, config: PasswordConfig, worker_count: int,
                timeout: Optional[float] = None) -> RecoveryResult:
        """
        Search for the password described by `config`.

        Args:
            config: The three candidate lists.
            worker_count: Worker threads, between 1 and 100.
            timeout: Optional deadline in seconds.

        Returns:
            RecoveryResult with the outcome.

        Raises:
            ConfigurationError: Bad worker count, invalid config or no
                base token in the grammar bounds.
        """
        self._check_worker_count(worker_count)
        self._check_config(config)

        state = SearchState()

        bases = generate_bases(config.base_words, self.bounds)
        if not bases:
            raise ConfigurationError(
                f"No base word combination is {self.bounds.min_base_length}-"
                f"{self.bounds.max_base_length} characters long")

        total = count_candidates(bases, config)
        chunks = prepare_chunks(len(bases), worker_count)

        logger.info("Starting password recovery")
        logger.info(f"Base tokens: {len(bases):,} | Total combinations: {total:,}")
        logger.info(f"Using {worker_count} threads for parallel processing")

        reporter = ProgressReporter(state, total, self.progress_interval, self.on_progress)
        timer = None
        if timeout is not None:
            timer = threading.Timer(timeout, state.expire)
            timer.daemon = True
            timer.start()
        reporter.start()

        reports: list[WorkerReport] = []
        try:
            with ThreadPoolExecutor(max_workers=worker_count,
                                    thread_name_prefix="search-worker") as executor:
                try:
                    futures = {
                        executor.submit(self._search_chunk, chunk, bases, config, state): chunk
                        for chunk in chunks
                    }
                    for future in as_completed(futures):
                        chunk = futures[future]
                        try:
                            report = future.result()
                        except Exception as e:
                            logger.error(f"Worker {chunk.worker_id} failed", exc_info=e)
                            continue
                        logger.debug(
                            f"Worker {report.worker_id}: {report.state.value} after "
                            f"{report.attempts:,} attempts ({report.chunk_size} bases)")
                        reports.append(report)
                finally:
                    # workers must see the stop flag before the pool joins them
                    state.stopped.set()
        finally:
            reporter.stop()
            if timer is not None:
                timer.cancel()

        self.last_reports = sorted(reports, key=lambda r: r.worker_id)
        elapsed = state.elapsed()
        result = RecoveryResult(
            found=state.password is not None,
            password=state.password,
            attempts=state.attempts,
            elapsed=timedelta(seconds=elapsed),
            total_candidates=total,
            worker_count=worker_count,
            timed_out=state.timed_out and state.password is None,
        )

        if result.found:
            logger.info(
                f"Password found! Total attempts: {result.attempts:,} | Time: {elapsed:.2f} seconds")
        elif result.timed_out:
            logger.info(
                f"Timed out after {result.attempts:,} of {total:,} attempts | Time: {elapsed:.2f} seconds")
        else:
            logger.info(
                f"Password not found after {result.attempts:,} attempts | Time: {elapsed:.2f} seconds")
        return result

    def _search_chunk(self, chunk: SearchChunk, bases: Sequence[str],
                      config: PasswordConfig, state: SearchState) -> WorkerReport:
        """Walk one chunk; the stop flag is checked before every base, digit pattern and special."""
        tried = 0

        def report(worker_state: WorkerState) -> WorkerReport:
            return WorkerReport(worker_id=chunk.worker_id, state=worker_state,
                                attempts=tried, chunk_size=chunk.size)

        for index in range(chunk.start, chunk.end):
            if state.stopped.is_set():
                return report(WorkerState.CANCELLED)
            base = bases[index]

            for digits in config.digit_patterns:
                if state.stopped.is_set():
                    return report(WorkerState.CANCELLED)

                for special in config.special_chars:
                    if state.stopped.is_set():
                        return report(WorkerState.CANCELLED)

                    candidate = base + digits + special
                    state.record_attempt()
                    tried += 1

                    if self._check(candidate):
                        if state.claim(candidate):
                            logger.info(f"Worker {chunk.worker_id} found the password")
                            return report(WorkerState.FOUND)
                        return report(WorkerState.CANCELLED)

        return report(WorkerState.EXHAUSTED)

    def _check(self, candidate: str) -> bool:
        try:
            return bool(self.validator.validate(candidate))
        except Exception as e:
            logger.warning(f"Validator error, counting candidate as wrong: {e!r}")
            logger.debug(f"Validator error for {candidate!r}", exc_info=e)
            return False

    @staticmethod
    def _check_worker_count(worker_count: int) -> None:
        if isinstance(worker_count, bool) or not isinstance(worker_count, int):
            raise ConfigurationError(f"worker_count must be an integer, got: {worker_count!r}")
        if not MIN_WORKERS <= worker_count <= MAX_WORKERS:
            raise ConfigurationError(
                f"worker_count must be {MIN_WORKERS}-{MAX_WORKERS}, got: {worker_count}")

    @staticmethod
    def _check_config(config: PasswordConfig) -> None:
        if config is None:
            raise ConfigurationError("config cannot be None")
        if not config.is_valid():
            missing = [name for name, values in (("base words", config.base_words),
                                                 ("digit patterns", config.digit_patterns),
                                                 ("special characters", config.special_chars))
                       if not values]
            raise ConfigurationError(f"Configuration is incomplete, missing: {', '.join(missing)}")
