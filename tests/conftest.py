"""Shared fixtures for the hash service test suite."""

from __future__ import annotations

import time
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from core import Settings
from main import create_app

TEST_HASH_DELAY_SECONDS = 0.3


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """A client bound to a fresh app with a short hash delay."""
    app = create_app(Settings(hash_delay_seconds=TEST_HASH_DELAY_SECONDS))
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def slow_client() -> Iterator[TestClient]:
    """A client whose hashes are never generated during the test."""
    app = create_app(Settings(hash_delay_seconds=60))
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def wait_for_hash() -> Callable[[TestClient, int], str]:
    """Poll GET /hash/<id> until the digest is available."""

    def _wait(c: TestClient, hash_id: int, timeout: float = 5.0) -> str:
        deadline = time.monotonic() + timeout
        while True:
            r = c.get(f"/hash/{hash_id}")
            if r.status_code == 200:
                return r.text
            assert r.json()["detail"] == "Hash not generated yet."
            if time.monotonic() > deadline:
                pytest.fail(f"hash {hash_id} was not generated within {timeout}s")
            time.sleep(0.05)

    return _wait
