"""
Stats endpoint - aggregate processing time of hash submissions.
"""
import logging
from fastapi import APIRouter, Depends, Response

from model import StatsSnapshot
from core import HashService
from routes.dependencies import get_hash_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=StatsSnapshot)
async def stats(service: HashService = Depends(get_hash_service)):
    """
    Return the number of hash submissions and their average
    processing time in microseconds.
    """
    snapshot = service.snapshot()
    try:
        body = snapshot.model_dump_json()
    except ValueError:
        logger.exception("Failed to serialize stats")
        raise
    return Response(content=body, media_type="application/json")
