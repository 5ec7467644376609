from __future__ import annotations

import pytest

from pyheads.timings import Timings


def test_measure_records_duration() -> None:
    timings = Timings()
    with timings.measure("profile-req"):
        pass
    assert set(timings.durations) == {"profile-req"}
    assert timings.durations["profile-req"] >= 0


def test_stop_without_start_raises() -> None:
    with pytest.raises(RuntimeError):
        Timings().stop("gen-img")


def test_header_lists_every_stage() -> None:
    timings = Timings()
    timings.start("total")
    timings.start("get-cache")
    timings.stop("get-cache")
    timings.stop("total")
    parts = timings.to_header().split(", ")
    assert [p.split(";")[0] for p in parts] == ["get-cache", "total"]
    assert all(";dur=" in p for p in parts)


def test_durations_is_a_copy() -> None:
    timings = Timings()
    timings.durations["x"] = 1.0
    assert timings.durations == {}
