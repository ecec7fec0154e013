"""Stopwatch timer and averaged frame profilers."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Callable

__all__ = [
    "PROFILE_SAMPLE_DURATION",
    "Timer",
    "ProfileID",
    "Profile",
    "RenderProfile",
    "Profiler",
]

PROFILE_SAMPLE_DURATION = 0.2

Clock = Callable[[], float]


class Timer:
    """Accumulates running time between starts and stops."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self._total = 0.0
        self._running = False
        self.last_delta = 0.0

    def start(self) -> None:
        """Start timing; does nothing if already running."""
        if not self._running:
            self._running = True
            self._start = self._clock()

    def stop(self) -> None:
        """Stop timing and add the time since the start to the total."""
        if self._running:
            now = self._clock()
            self._running = False
            self._total += now - self._start

    def reset(self) -> None:
        """Clear the total and stop the timer."""
        self._total = 0.0
        self._running = False

    def elapsed(self) -> float:
        """Return the total time; ``last_delta`` holds the time just added."""
        diff = 0.0
        if self._running:
            now = self._clock()
            diff = now - self._start
            self._total += diff
            self._start = now
        self.last_delta = diff
        return self._total

    def is_running(self) -> bool:
        """Return whether the timer is running."""
        return self._running

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


class ProfileID(IntEnum):
    """The sections of a frame that are profiled."""

    FRAME = 0
    UPDATE = 1
    DRAW = 2
    DRAW_UI = 3


class Profile:
    """Averages a timed section over sampling windows."""

    def __init__(self, profile_time: Callable[[], float], clock: Clock = time.perf_counter) -> None:
        self._profile_time = profile_time
        self._timer = Timer(clock)
        self._time = 0.0
        self._accum = 0.0
        self._timestamp = 0.0
        self._samples = 0

    def start(self) -> None:
        """Start timing the section."""
        self._timer.start()

    def stop(self) -> None:
        """Stop timing the section."""
        self._timer.stop()

    def reset(self) -> None:
        """Record a sample and, once a window has passed, update the average."""
        sample = self._timer.elapsed()
        self._accum += sample
        self._samples += 1
        self._timer.reset()

        running = self._profile_time()
        if running - self._timestamp > PROFILE_SAMPLE_DURATION:
            self._timestamp = running
            self._time = self._accum / self._samples
            self._accum = sample
            self._samples = 1

    def seconds(self) -> float:
        """Return the last averaged time in seconds."""
        return self._time


class RenderProfile:
    """Averages render statistics per frame over sampling windows."""

    def __init__(self, profile_time: Callable[[], float]) -> None:
        self._profile_time = profile_time
        self.render_calls = 0
        self.verts = 0
        self.faces = 0
        self.state_changes = 0
        self.render_calls_accum = 0
        self.verts_accum = 0
        self.faces_accum = 0
        self.state_changes_accum = 0
        self.frames = 0
        self._timestamp = 0.0

    def add_render_calls(self, count: int) -> None:
        """Count render calls for this frame."""
        self.render_calls_accum += count

    def add_verts(self, count: int) -> None:
        """Count vertices for this frame."""
        self.verts_accum += count

    def add_faces(self, count: int) -> None:
        """Count faces for this frame."""
        self.faces_accum += count

    def add_state_changes(self, count: int) -> None:
        """Count state changes for this frame."""
        self.state_changes_accum += count

    def reset_all(self) -> None:
        """End a frame and, once a window has passed, update the averages."""
        self.frames += 1
        running = self._profile_time()
        if running - self._timestamp > PROFILE_SAMPLE_DURATION:
            self.render_calls = self.render_calls_accum // self.frames
            self.verts = self.verts_accum // self.frames
            self.faces = self.faces_accum // self.frames
            self.state_changes = self.state_changes_accum // self.frames
            self.render_calls_accum = 0
            self.verts_accum = 0
            self.faces_accum = 0
            self.state_changes_accum = 0
            self.frames = 0
            self._timestamp = running


class Profiler:
    """Holds one profile per :class:`ProfileID` plus the render statistics."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._global = Timer(clock)
        self._profiles = {pid: Profile(self.profile_time, clock) for pid in ProfileID}
        self.render = RenderProfile(self.profile_time)

    def get(self, profile_id: int) -> Profile:
        """Return the profile for ``profile_id``."""
        return self._profiles[ProfileID(profile_id)]

    def profile_time(self) -> float:
        """Return the running time, starting the global clock on first use."""
        if not self._global.is_running():
            self._global.start()
        return self._global.elapsed()

    def reset_all(self) -> None:
        """End a frame for the render statistics and every profile."""
        self.render.reset_all()
        for profile in self._profiles.values():
            profile.reset()