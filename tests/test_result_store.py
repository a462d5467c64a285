from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from model import LookupStatus
from storage import ResultStore


def test_reserve_is_strictly_increasing():
    store = ResultStore()
    ids = [store.reserve() for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert store.counter == 5


def test_get_distinguishes_pending_from_out_of_range():
    store = ResultStore()
    assert store.get(1) == (LookupStatus.OUT_OF_RANGE, None)

    hash_id = store.reserve()
    assert store.get(hash_id) == (LookupStatus.PENDING, None)
    assert store.get(0) == (LookupStatus.OUT_OF_RANGE, None)
    assert store.get(-3) == (LookupStatus.OUT_OF_RANGE, None)
    assert store.get(hash_id + 1) == (LookupStatus.OUT_OF_RANGE, None)

    store.complete(hash_id, "digest")
    assert store.get(hash_id) == (LookupStatus.FOUND, "digest")
    assert store.get(hash_id) == (LookupStatus.FOUND, "digest")


def test_completion_order_is_independent_of_ids():
    store = ResultStore()
    first, second = store.reserve(), store.reserve()
    store.complete(second, "b")
    assert store.get(first) == (LookupStatus.PENDING, None)
    assert store.get(second) == (LookupStatus.FOUND, "b")


def test_complete_rejects_unreserved_and_repeated_ids():
    store = ResultStore()
    with pytest.raises(ValueError):
        store.complete(1, "digest")

    hash_id = store.reserve()
    store.complete(hash_id, "digest")
    with pytest.raises(ValueError):
        store.complete(hash_id, "other")
    assert store.get(hash_id) == (LookupStatus.FOUND, "digest")


def test_concurrent_reservations_have_no_duplicates_or_gaps():
    store = ResultStore()
    prior = store.reserve()

    def reserve_many(_):
        return [store.reserve() for _ in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        batches = list(pool.map(reserve_many, range(8)))

    ids = [hash_id for batch in batches for hash_id in batch]
    assert sorted(ids) == list(range(prior + 1, prior + 1 + 1600))
    for batch in batches:
        assert batch == sorted(batch)
