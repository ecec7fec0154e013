"""Threads, auto-reset events, recursive mutexes and a high resolution counter."""

from __future__ import annotations

import threading
import time
from typing import Callable, Generic, Protocol, Sequence, TypeVar

__all__ = [
    "Thread",
    "Event",
    "Mutex",
    "sleep",
    "wait_for_multiple",
    "get_counter",
    "get_counter_frequency",
    "calculate_time_difference",
    "COUNTER_FREQUENCY",
]

COUNTER_FREQUENCY = 1_000_000_000
_POLL_MS = 1

A = TypeVar("A")
R = TypeVar("R")


class Thread(Generic[A, R]):
    """Runs ``func(arg)`` on a new thread, started immediately."""

    def __init__(self, func: Callable[[A], R], arg: A = None) -> None:  # type: ignore[assignment]
        self._func = func
        self._arg = arg
        self._result: R | None = None
        self._error: BaseException | None = None
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            self._result = self._func(self._arg)
        except BaseException as exc:  # handed over to the joining thread
            self._error = exc

    def join(self) -> R | None:
        """Wait for the thread to finish and return what ``func`` returned.

        An exception raised by ``func`` is raised again here.
        """
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._result

    def is_alive(self) -> bool:
        """Return whether the thread is still running."""
        return self._thread.is_alive()


class Event:
    """An auto-reset event: one successful wait consumes the signal."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._signalled = False

    def set(self) -> None:
        """Signal the event, waking one waiter."""
        with self._condition:
            self._signalled = True
            self._condition.notify()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait up to ``timeout`` milliseconds (forever if ``None``).

        Returns whether the event was signalled; the signal is then cleared.
        """
        seconds = None if timeout is None else max(timeout, 0) / 1000.0
        with self._condition:
            if not self._condition.wait_for(lambda: self._signalled, seconds):
                return False
            self._signalled = False
            return True

    def is_set(self) -> bool:
        """Return whether the event is signalled, without consuming it."""
        with self._condition:
            return self._signalled


class Mutex:
    """A recursive mutex owned by the thread that acquired it."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def acquire(self) -> None:
        """Block until the mutex is owned by the calling thread."""
        self._lock.acquire()

    def release(self) -> None:
        """Release one level of ownership.

        Raises :class:`RuntimeError` if the calling thread does not own it.
        """
        self._lock.release()

    def __enter__(self) -> "Mutex":
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


def sleep(milliseconds: float = 0) -> None:
    """Suspend the calling thread for ``milliseconds``."""
    time.sleep(max(milliseconds, 0) / 1000.0)


class _Waitable(Protocol):
    def wait(self, timeout: float | None = ...) -> bool: ...


def wait_for_multiple(events: Sequence[_Waitable], timeout: float | None = None) -> int | None:
    """Wait until any of ``events`` is signalled; return its index.

    ``timeout`` is in milliseconds, ``None`` meaning forever. Returns ``None``
    if the time runs out. The signal of the event returned is consumed.
    """
    if not events:
        raise ValueError("no events to wait for")
    waited = 0.0
    while True:
        for index, event in enumerate(events):
            if event.wait(0):
                return index
        step = float(_POLL_MS)
        if timeout is not None:
            if waited >= timeout:
                return None
            step = min(step, timeout - waited)
        sleep(step)
        waited += step


def get_counter() -> int:
    """Return the current value of the high resolution counter, in ticks."""
    return time.perf_counter_ns()


def get_counter_frequency() -> int:
    """Return the number of counter ticks per second."""
    return COUNTER_FREQUENCY


def calculate_time_difference(start: int, finish: int) -> float:
    """Return the seconds between two counter values."""
    return (finish - start) / COUNTER_FREQUENCY