import pytest

from protocore.timer import (
    MAX_TIMERS,
    BlockTimer,
    TimerTree,
    sec_since_start,
    set_start,
    time_counter,
    time_frequency,
    time_to_msec,
    time_to_sec,
)


def test_frequency_is_nanoseconds():
    assert time_frequency() == 1_000_000_000


def test_tick_conversions():
    assert time_to_sec(time_frequency()) == 1.0
    assert time_to_msec(time_frequency() // 2) == 500.0
    assert time_to_msec(0) == 0.0


def test_counter_is_monotonic():
    a = time_counter()
    b = time_counter()
    assert b >= a


def test_seconds_since_start():
    set_start()
    first = sec_since_start()
    second = sec_since_start()
    assert 0.0 <= first <= second < 60.0


def test_block_timer_logs(capsys):
    with BlockTimer("work") as timer:
        sum(range(1000))
    out = capsys.readouterr().out
    assert out.startswith("Block time of work: ")
    assert f"({timer.ticks} ticks)" in out
    assert timer.ticks >= 0


def test_nested_timers():
    tree = TimerTree()
    tree.start("frame")
    tree.start("update")
    tree.stop()
    tree.stop()
    frame, update = tree.results()
    assert (frame.name, frame.parent, frame.depth, frame.count) == ("frame", None, 0, 1)
    assert (update.name, update.parent, update.depth, update.count) == ("update", "frame", 1, 1)
    assert frame.time >= update.time >= 0.0


def test_paused_timer_counts_intervals():
    tree = TimerTree()
    tree.start_paused("sub")
    tree.unpause()
    tree.pause()
    tree.unpause()
    tree.pause()
    tree.stop()
    (result,) = tree.results()
    assert result.count == 2
    assert result.time >= 0.0


def test_start_paused_then_stop_records_nothing():
    tree = TimerTree()
    tree.start_paused("idle")
    tree.stop()
    (result,) = tree.results()
    assert result.count == 0
    assert result.time == 0.0


def test_running_timer_not_reported():
    tree = TimerTree()
    tree.start("open")
    assert tree.results() == []


def test_results_limited_by_max_timers():
    tree = TimerTree()
    for name in ("a", "b", "c"):
        tree.start(name)
        tree.stop()
    assert [r.name for r in tree.results(2)] == ["a", "b"]
    assert [r.name for r in tree.results()] == ["a", "b", "c"]


def test_reset_clears_results():
    tree = TimerTree()
    tree.start("a")
    tree.stop()
    tree.reset()
    assert tree.results() == []


def test_stop_without_timer_logs(capsys):
    tree = TimerTree()
    tree.stop()
    assert "No timers to stop" in capsys.readouterr().out
    assert tree.results() == []


def test_pause_without_timer_raises():
    with pytest.raises(RuntimeError):
        TimerTree().pause()


def test_results_full(capsys):
    tree = TimerTree()
    for i in range(MAX_TIMERS - 2):
        tree.start(str(i))
        tree.stop()
    capsys.readouterr()
    tree.start("extra")
    assert "results full" in capsys.readouterr().out
    assert len(tree.results(MAX_TIMERS)) == MAX_TIMERS - 2