"""
Shutdown endpoint - asks the hosting server to stop gracefully.
"""
import logging
from fastapi import APIRouter, Request

from model import ShutdownResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route("/shutdown", methods=["GET", "POST"], response_model=ShutdownResponse)
async def shutdown(request: Request):
    """
    Request an orderly shutdown.

    In-flight requests are allowed to finish; pending hashes are dropped.
    """
    logger.info("Shutdown requested")
    request.app.state.request_shutdown()
    return ShutdownResponse()
