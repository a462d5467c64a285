"""
Request-scoped access to the services held on application state.
"""
from urllib.parse import parse_qsl
from fastapi import Request

from core import HashService

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_hash_service(request: Request) -> HashService:
    return request.app.state.hash_service


async def read_password(request: Request) -> bytes:
    """
    Extract the ``password`` form field as the exact bytes submitted.

    Form-encoded bodies take precedence over the query string. Values are
    percent-decoded through latin-1 so every byte survives unchanged; a
    missing field yields empty bytes.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    sources = []
    if content_type == FORM_CONTENT_TYPE:
        sources.append((await request.body()).decode("latin-1"))
    sources.append(request.url.query)

    for source in sources:
        for name, value in parse_qsl(source, keep_blank_values=True, encoding="latin-1"):
            if name == "password":
                return value.encode("latin-1")
    return b""
