"""Tests for cancellable background requests."""

from __future__ import annotations

import threading

import pytest

from covid_tracking.api.request_slots import RequestSlots

WAIT = 5.0


@pytest.fixture
def slots():
    request_slots = RequestSlots(max_workers=2)
    yield request_slots
    request_slots.shutdown()


def test_success_is_delivered(slots) -> None:
    results = []
    errors = []

    handle = slots.submit("daily", lambda code: f"records for {code}", results.append, errors.append, "AZ")
    handle.future.result(timeout=WAIT)

    assert results == ["records for AZ"]
    assert errors == []
    assert slots.active("daily") is None


def test_error_is_delivered(slots) -> None:
    results = []
    errors = []

    def fail():
        raise RuntimeError("boom")

    handle = slots.submit("daily", fail, results.append, errors.append)
    handle.future.result(timeout=WAIT)

    assert results == []
    assert [str(error) for error in errors] == ["boom"]


def test_newer_request_supersedes_older(slots) -> None:
    """The result of a superseded request is dropped even if it finishes later."""
    release_first = threading.Event()
    first_started = threading.Event()
    results = []

    def slow():
        first_started.set()
        release_first.wait(WAIT)
        return "stale"

    first = slots.submit("daily", slow, results.append, results.append)
    assert first_started.wait(WAIT)
    second = slots.submit("daily", lambda: "fresh", results.append, results.append)
    second.future.result(timeout=WAIT)
    release_first.set()
    first.future.result(timeout=WAIT)

    assert first.is_cancelled
    assert not second.is_cancelled
    assert results == ["fresh"]


def test_slots_are_independent(slots) -> None:
    release = threading.Event()
    results = []

    def wait_and_return(value):
        release.wait(WAIT)
        return value

    states = slots.submit("states", wait_and_return, results.append, results.append, "states")
    daily = slots.submit("daily", wait_and_return, results.append, results.append, "daily")
    release.set()
    states.future.result(timeout=WAIT)
    daily.future.result(timeout=WAIT)

    assert sorted(results) == ["daily", "states"]


def test_cancel_all_drops_pending_results(slots) -> None:
    release = threading.Event()
    started = threading.Event()
    results = []

    def slow():
        started.set()
        release.wait(WAIT)
        return "late"

    handle = slots.submit("states", slow, results.append, results.append)
    assert started.wait(WAIT)
    slots.cancel_all()
    release.set()
    handle.future.result(timeout=WAIT)

    assert results == []
    assert slots.active("states") is None
