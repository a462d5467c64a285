from model.models import (
    LookupStatus,
    StatsSnapshot,
    ShutdownResponse,
)

__all__ = [
    "LookupStatus",
    "StatsSnapshot",
    "ShutdownResponse",
]
