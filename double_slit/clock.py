"""Pausable, rate-scaled simulation clock driven by per-frame ticks."""
import enum
from typing import Optional


class ClockState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class SimulationClock:
    """
    Accumulates simulation time from wall-clock frame timestamps.

    Each RUNNING tick adds (timestamp - previous timestamp) * time_scale.
    The first tick after construction, a reset, or a resume only records the
    timestamp, so time spent paused never shows up as a jump. PAUSED ticks
    leave the time untouched and forget the previous timestamp.
    """

    def __init__(self, time_scale: float = 1.0, paused: bool = False):
        self.time_scale = time_scale
        self._state = ClockState.PAUSED if paused else ClockState.RUNNING
        self._elapsed = 0.0
        self._last_timestamp: Optional[float] = None

    @property
    def elapsed(self) -> float:
        """Accumulated simulation time in seconds."""
        return self._elapsed

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def paused(self) -> bool:
        return self._state is ClockState.PAUSED

    def pause(self):
        self._state = ClockState.PAUSED
        self._last_timestamp = None

    def resume(self):
        if self._state is ClockState.PAUSED:
            self._state = ClockState.RUNNING
            self._last_timestamp = None

    def set_paused(self, paused: bool):
        if paused:
            self.pause()
        else:
            self.resume()

    def reset(self):
        self._elapsed = 0.0
        self._last_timestamp = None

    def rebase(self):
        """Measure the next tick from itself, as after a resume; time is kept."""
        self._last_timestamp = None

    def tick(self, timestamp: float) -> float:
        """Advance by one frame stamped ``timestamp`` (seconds); return the time."""
        if self._state is ClockState.PAUSED:
            self._last_timestamp = None
            return self._elapsed

        if self._last_timestamp is None:
            delta = 0.0
        else:
            # out-of-order stamps must not run the clock backwards
            delta = max(0.0, timestamp - self._last_timestamp)
        self._last_timestamp = timestamp

        self._elapsed += delta * self.time_scale
        return self._elapsed

    def __repr__(self):
        return f"SimulationClock(elapsed={self._elapsed:.3f}, state={self._state.value}, time_scale={self.time_scale})"


__all__ = ["ClockState", "SimulationClock"]
