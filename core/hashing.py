"""
Digest computation for submitted passwords.
"""
import base64
import hashlib


def hash_and_encode(data: bytes) -> str:
    """Return the standard padded base64 encoding of the SHA-256 digest of ``data``."""
    digest = hashlib.sha256(data).digest()
    return base64.b64encode(digest).decode("ascii")
