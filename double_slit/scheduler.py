"""Single-threaded frame loop that drives a Simulation."""
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class FrameLoop:
    """
    Tick ``simulation`` once per frame at roughly ``fps`` frames per second.

    Timing is cooperative: after each tick the loop sleeps for whatever is
    left of the frame period. ``clock`` and ``sleep`` are injectable so tests
    can drive the loop without real waiting.
    """

    def __init__(
        self,
        simulation,
        fps: float = 60,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.simulation = simulation
        self.period = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self._running = False
        self.frames = 0

    @property
    def running(self) -> bool:
        return self._running

    def step(self):
        """Run exactly one tick stamped with the current clock reading."""
        frame = self.simulation.tick(self._clock())
        self.frames += 1
        return frame

    def run(self, frames: Optional[int] = None):
        """Tick until ``stop()`` is called or ``frames`` ticks have run; return the last frame."""
        self._running = True
        # idle time since an earlier run is not simulation time
        self.simulation.clock.rebase()
        last = None
        remaining = frames
        try:
            while self._running and (remaining is None or remaining > 0):
                started = self._clock()
                last = self.step()
                if remaining is not None:
                    remaining -= 1
                leftover = self.period - (self._clock() - started)
                if leftover > 0 and self._running and remaining != 0:
                    self._sleep(leftover)
        finally:
            self._running = False
        logger.debug("Frame loop finished after %d frames", self.frames)
        return last

    def stop(self):
        self._running = False


__all__ = ["FrameLoop"]
