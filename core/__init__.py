from core.config import Settings
from core.hashing import hash_and_encode
from core.scheduler import DelayedTaskScheduler
from core.service import (
    HashService,
    HashLookupError,
    MissingHashIdError,
    InvalidHashIdError,
    HashIdOutOfRangeError,
    HashNotReadyError,
)

__all__ = [
    "Settings",
    "hash_and_encode",
    "DelayedTaskScheduler",
    "HashService",
    "HashLookupError",
    "MissingHashIdError",
    "InvalidHashIdError",
    "HashIdOutOfRangeError",
    "HashNotReadyError",
]
