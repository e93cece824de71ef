from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import threading

import pytest

from atlas_wordbreak.core.exceptions import NoActiveRequestError
from atlas_wordbreak.core.request_context import (
    RequestContext,
    current_index_reader,
    current_request,
    request_scope,
)


def test_no_active_request_raises():
    with pytest.raises(NoActiveRequestError):
        current_request()


def test_scope_binds_and_restores(FakeIndexReader):
    outer = RequestContext(request_id="r-1", index_reader=FakeIndexReader(1))
    inner = RequestContext(request_id="r-2", index_reader=FakeIndexReader(2))

    with request_scope(outer):
        assert current_index_reader().generation == 1
        with request_scope(inner):
            assert current_index_reader().generation == 2
        assert current_request() is outer

    with pytest.raises(NoActiveRequestError):
        current_index_reader()


def test_scope_is_restored_after_exception(FakeIndexReader):
    ctx = RequestContext(request_id="r-1", index_reader=FakeIndexReader(1))

    with pytest.raises(RuntimeError):
        with request_scope(ctx):
            raise RuntimeError("boom")

    with pytest.raises(NoActiveRequestError):
        current_request()


def test_each_thread_sees_its_own_reader(FakeIndexReader):
    barrier = threading.Barrier(4)

    def handle(generation: int) -> int:
        with request_scope(RequestContext(request_id=f"r-{generation}", index_reader=FakeIndexReader(generation))):
            barrier.wait(timeout=5)
            return current_index_reader().generation

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(handle, [1, 2, 3, 4]))

    assert results == [1, 2, 3, 4]


def test_log_appends_structured_event(FakeIndexReader):
    ctx = RequestContext(request_id="r-9", index_reader=FakeIndexReader(1))
    ctx.log(level="info", message="decompounded", term="tischbeleuchtung")

    assert len(ctx.events) == 1
    event = ctx.events[0]
    assert event["request_id"] == "r-9"
    assert event["level"] == "info"
    assert event["message"] == "decompounded"
    assert event["term"] == "tischbeleuchtung"
    assert event["timestamp"].endswith("+00:00")
