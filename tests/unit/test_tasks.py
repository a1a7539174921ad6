"""Tests for task composition."""

import threading

import pytest

from assetpipe.pipeline.context import BuildContext
from assetpipe.pipeline.tasks import TaskError, parallel, series


def recorder(calls, name, fail=False):
    def task(ctx):
        calls.append(name)
        if fail:
            raise TaskError(f"{name} broke")

    task.__name__ = name
    return task


def test_series_runs_in_order(tmp_path):
    """Test series runs tasks one after another."""
    calls = []
    series(recorder(calls, "a"), recorder(calls, "b"))(BuildContext(root=tmp_path))
    assert calls == ["a", "b"]


def test_series_stops_at_failure(tmp_path):
    """Test series does not run tasks after a failure."""
    calls = []
    task = series(recorder(calls, "a", fail=True), recorder(calls, "b"))
    with pytest.raises(TaskError, match="a broke"):
        task(BuildContext(root=tmp_path))
    assert calls == ["a"]


def test_parallel_runs_siblings_after_failure(tmp_path):
    """Test one failing member does not stop the others."""
    calls = []
    task = parallel(
        recorder(calls, "ok1"),
        recorder(calls, "bad", fail=True),
        recorder(calls, "ok2"),
    )
    with pytest.raises(TaskError, match="1 task\\(s\\) failed: bad"):
        task(BuildContext(root=tmp_path))
    assert sorted(calls) == ["bad", "ok1", "ok2"]


def test_parallel_runs_concurrently(tmp_path):
    """Test members run at the same time."""
    barrier = threading.Barrier(3, timeout=5)

    def waiter(ctx):
        barrier.wait()

    parallel(waiter, waiter, waiter)(BuildContext(root=tmp_path))


def test_parallel_empty(tmp_path):
    """Test an empty parallel composition succeeds."""
    parallel()(BuildContext(root=tmp_path))
