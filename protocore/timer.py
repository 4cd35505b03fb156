"""Monotonic tick counters, a block timer and a nested timer tree."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional

from protocore.log import log

__all__ = [
    "MAX_TIMERS",
    "BlockTimer",
    "TimerResult",
    "TimerTree",
    "time_counter",
    "time_frequency",
    "time_to_sec",
    "time_to_msec",
    "set_start",
    "sec_since_start",
]

MAX_TIMERS = 256
_FREQUENCY = 1_000_000_000
_time_start = 0


def time_counter() -> int:
    """Current value of the monotonic tick counter (nanoseconds)."""
    return time.perf_counter_ns()


def time_frequency() -> int:
    """Ticks per second."""
    return _FREQUENCY


def time_to_sec(t: int) -> float:
    return t / _FREQUENCY


def time_to_msec(t: int) -> float:
    return time_to_sec(t) * 1000.0


def set_start() -> None:
    """Mark now as the starting point for :func:`sec_since_start`."""
    global _time_start
    _time_start = time_counter()


def sec_since_start() -> float:
    """Seconds since :func:`set_start` was called."""
    return time_to_sec(time_counter() - _time_start)


class BlockTimer:
    """Context manager that logs how long its block took."""

    def __init__(self, name: str = ""):
        self.name = name
        self.ticks = 0
        self._start = time_counter()

    def __enter__(self) -> "BlockTimer":
        self._start = time_counter()
        return self

    def __exit__(self, *args) -> None:
        self.ticks = time_counter() - self._start
        log(f"Block time of {self.name}: {time_to_msec(self.ticks):f}ms ({self.ticks} ticks)\n")


@dataclass(frozen=True)
class TimerResult:
    """One finished timer: milliseconds spent and how often it ran."""

    name: str
    parent: Optional[str]
    depth: int
    time: float
    count: int


@dataclass
class _State:
    name: str
    start: int
    total: int
    paused: bool
    count: int
    slot: int


class TimerTree:
    """Nested timers; results are listed in the order the timers started."""

    def __init__(self):
        self._stack: List[_State] = []
        self._results: List[Optional[TimerResult]] = []

    def reset(self) -> None:
        """Forget all running timers and results."""
        self._stack = []
        self._results = []

    def _push(self, name: str, paused: bool, caller: str) -> None:
        if len(self._stack) >= MAX_TIMERS:
            log(f"TimerTree ({caller}): Can't start any more timers, stack full.\n")
            return
        if len(self._results) >= MAX_TIMERS - 2:
            log(
                "TimerTree (start): Can't start any more timers, results full "
                f"({len(self._results)}).\n"
            )
            return
        self._stack.append(
            _State(
                name=name,
                start=0 if paused else time_counter(),
                total=0,
                paused=paused,
                count=0,
                slot=len(self._results),
            )
        )
        self._results.append(None)

    def start(self, name: str) -> None:
        """Start a running timer nested inside the current one."""
        self._push(name, False, "start")

    def start_paused(self, name: str) -> None:
        """Start a timer that only counts between :meth:`unpause` and :meth:`pause`."""
        self._push(name, True, "startPaused")

    def _top(self) -> _State:
        if not self._stack:
            raise RuntimeError("no timer has been started")
        return self._stack[-1]

    def unpause(self) -> None:
        state = self._top()
        state.start = time_counter()
        state.paused = False

    def pause(self) -> None:
        now = time_counter()
        state = self._top()
        state.total += now - state.start
        state.paused = True
        state.count += 1

    def stop(self) -> None:
        """Finish the innermost timer and record its result."""
        now = time_counter()
        if not self._stack:
            log("TimerTree (stop): No timers to stop.\n")
            return
        state = self._stack[-1]
        if not state.paused:
            state.total += now - state.start
            state.count += 1
        parent = self._stack[-2].name if len(self._stack) > 1 else None
        self._results[state.slot] = TimerResult(
            name=state.name,
            parent=parent,
            depth=len(self._stack) - 1,
            time=state.total / _FREQUENCY * 1000.0,
            count=state.count,
        )
        self._stack.pop()

    def results(self, max_timers: int = MAX_TIMERS) -> List[TimerResult]:
        """Finished results among the first ``max_timers`` started timers."""
        num = max(0, min(max_timers, len(self._results)))
        return [r for r in self._results[:num] if r is not None]