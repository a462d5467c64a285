"""
Pydantic models for response schemas and lookup states.
"""
from enum import Enum
from pydantic import BaseModel, Field


class LookupStatus(str, Enum):
    FOUND = "found"
    PENDING = "pending"
    OUT_OF_RANGE = "out_of_range"


# ============ Output Schemas ============

class StatsSnapshot(BaseModel):
    """Aggregate latency of hash submissions, in microseconds."""
    total: int = Field(..., ge=0, description="Number of completed submissions")
    average: int = Field(..., description="Truncated mean processing time in microseconds")


class ShutdownResponse(BaseModel):
    """Acknowledgement for /shutdown."""
    status: str = "shutting down"
