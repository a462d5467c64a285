"""
In-memory result store keyed by monotonically increasing hash ids.
"""
import threading
from typing import Optional

from model import LookupStatus


class ResultStore:
    """
    Maps hash ids to their encoded digests.

    The id counter and the value mapping share one lock, so a reserved id is
    visible to ``get`` as soon as ``reserve`` returns. Entries are never
    modified or removed once written.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counter = 0
        self._values: dict[int, str] = {}

    @property
    def counter(self) -> int:
        """The most recently issued id, or 0 if none has been issued."""
        with self._lock:
            return self._counter

    def reserve(self) -> int:
        """Issue the next id. The entry stays pending until ``complete`` runs."""
        with self._lock:
            self._counter += 1
            return self._counter

    def complete(self, hash_id: int, value: str) -> None:
        """
        Record the encoded digest for a reserved id.

        Raises:
            ValueError: If the id was never reserved or is already complete
        """
        with self._lock:
            if not 1 <= hash_id <= self._counter:
                raise ValueError(f"Hash id {hash_id} was never reserved")
            if hash_id in self._values:
                raise ValueError(f"Hash id {hash_id} is already complete")
            self._values[hash_id] = value

    def get(self, hash_id: int) -> tuple[LookupStatus, Optional[str]]:
        """Look up an id, distinguishing unknown ids from pending ones."""
        with self._lock:
            if not 1 <= hash_id <= self._counter:
                return LookupStatus.OUT_OF_RANGE, None
            value = self._values.get(hash_id)

        if value is None:
            return LookupStatus.PENDING, None
        return LookupStatus.FOUND, value
