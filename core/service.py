"""
Hash request orchestration shared by the HTTP routes.
"""
import re
import time
import logging
from typing import Optional

from model import LookupStatus, StatsSnapshot
from storage import ResultStore, StatsAggregator
from core.hashing import hash_and_encode
from core.scheduler import DelayedTaskScheduler

logger = logging.getLogger(__name__)

_HASH_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class HashLookupError(Exception):
    """Base class for errors raised while retrieving a hash."""
    message = "Hash lookup failed."
    status_code = 400

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class MissingHashIdError(HashLookupError):
    """Raised when no hash id segment was supplied."""
    message = "Missing hash id parameter."


class InvalidHashIdError(HashLookupError):
    """Raised when the hash id is not a decimal integer."""
    message = "Invalid hash id."


class HashIdOutOfRangeError(HashLookupError):
    """Raised when the hash id was never issued."""
    message = "Index out of range."


class HashNotReadyError(HashLookupError):
    """Raised when the hash id is valid but its digest is still pending."""
    message = "Hash not generated yet."


class HashService:
    """
    Coordinates the result store, the delayed scheduler and the stats.

    The store and the stats aggregator are locked independently and are
    never used together inside one critical section.
    """

    def __init__(
        self,
        store: ResultStore,
        stats: StatsAggregator,
        scheduler: DelayedTaskScheduler,
        hash_delay_seconds: float,
    ):
        self.store = store
        self.stats = stats
        self.scheduler = scheduler
        self.hash_delay_seconds = hash_delay_seconds

    def submit(self, password: bytes) -> int:
        """
        Reserve an id and schedule the digest computation for it.

        Returns immediately; the digest becomes available after the
        configured delay. Must be called from within a running event loop.
        """
        hash_id = self.store.reserve()
        self.scheduler.schedule(self.hash_delay_seconds, self._hash_task(hash_id, password))
        logger.debug(f"Issued hash id {hash_id}")
        return hash_id

    def _hash_task(self, hash_id: int, data: bytes):
        def task():
            encoded = hash_and_encode(data)
            self.store.complete(hash_id, encoded)
            logger.debug(f"Hash {hash_id} generated")

        return task

    def record_duration(self, started: float) -> None:
        """Record the time elapsed since ``started`` (a perf_counter value)."""
        elapsed_micros = int((time.perf_counter() - started) * 1_000_000)
        self.stats.record(elapsed_micros)

    def retrieve(self, raw_id: str) -> str:
        """
        Return the encoded digest for a hash id given as a path segment.

        Raises:
            MissingHashIdError: If ``raw_id`` is empty
            InvalidHashIdError: If ``raw_id`` is not a decimal integer
            HashIdOutOfRangeError: If the id was never issued
            HashNotReadyError: If the digest has not been generated yet
        """
        if not raw_id:
            raise MissingHashIdError()
        if not _HASH_ID_PATTERN.fullmatch(raw_id):
            raise InvalidHashIdError()
        try:
            hash_id = int(raw_id)
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            raise InvalidHashIdError()

        status, value = self.store.get(hash_id)
        if status is LookupStatus.OUT_OF_RANGE:
            raise HashIdOutOfRangeError()
        if status is LookupStatus.PENDING:
            raise HashNotReadyError()
        return value

    def snapshot(self) -> StatsSnapshot:
        return self.stats.snapshot()
