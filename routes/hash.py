"""
Hash endpoints - submit a password, retrieve its digest later.
"""
import time
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from core import HashService, HashLookupError
from routes.dependencies import get_hash_service, read_password

router = APIRouter()

SUBMIT_METHODS = ["POST", "PUT", "PATCH"]


@router.api_route("/hash", methods=SUBMIT_METHODS, response_class=PlainTextResponse)
@router.api_route("/hash/", methods=SUBMIT_METHODS, response_class=PlainTextResponse, include_in_schema=False)
async def submit_hash(
    request: Request,
    background_tasks: BackgroundTasks,
    service: HashService = Depends(get_hash_service),
):
    """
    Accept a password and return its hash id immediately.

    The ``password`` field is read from a form-encoded body (or the query
    string) and hashed byte for byte. The digest is generated in the
    background after the configured delay. Processing time is recorded
    once the response has been sent.
    """
    started = time.perf_counter()
    password = await read_password(request)
    hash_id = service.submit(password)
    background_tasks.add_task(service.record_duration, started)
    return PlainTextResponse(str(hash_id))


@router.get("/hash", response_class=PlainTextResponse, include_in_schema=False)
@router.get("/hash/", response_class=PlainTextResponse)
async def missing_hash_id(service: HashService = Depends(get_hash_service)):
    return _lookup(service, "")


@router.get("/hash/{hash_id:path}", response_class=PlainTextResponse)
async def get_hash(hash_id: str, service: HashService = Depends(get_hash_service)):
    """
    Return the base64 encoded SHA-256 digest for a hash id.

    Everything after ``/hash/`` is treated as the id. Unknown, malformed
    and not yet generated ids all answer 400 with distinct messages.
    """
    return _lookup(service, hash_id)


def _lookup(service: HashService, raw_id: str) -> PlainTextResponse:
    try:
        return PlainTextResponse(service.retrieve(raw_id))
    except HashLookupError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
