# neonsnake/core/clock.py
from __future__ import annotations
from typing import Callable, Optional

class SimulationClock:
    """Fixed-timestep accumulator.

    Frame timestamps come in from whatever drives the loop (pygame ticks,
    a test, the headless runner). Each frame adds its wall-clock delta to the
    accumulator, then whole move intervals are drained one tick at a time.
    The first observed timestamp only seeds the clock and yields delta 0.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.last_frame_time: Optional[float] = None
        self.accumulator = 0.0
        self.elapsed_ms = 0.0
        self.ticks = 0

    def observe(self, timestamp_ms: float) -> float:
        if self.last_frame_time is None:
            self.last_frame_time = timestamp_ms
        delta = timestamp_ms - self.last_frame_time
        if delta < 0:
            raise ValueError(f"timestamps must not go backwards ({timestamp_ms} < {self.last_frame_time})")
        self.last_frame_time = timestamp_ms
        return delta

    def advance(
        self,
        timestamp_ms: float,
        move_interval_ms: float,
        tick: Callable[[float], bool],
        running: bool = True,
    ) -> int:
        """Run as many ticks as the elapsed time pays for; returns the tick count.

        `tick(delta)` gets the frame delta and returns False to stop draining
        (game over). A frozen clock still observes the timestamp so resuming
        never produces a catch-up burst.
        """
        if move_interval_ms <= 0:
            raise ValueError(f"move interval must be positive, got {move_interval_ms}")
        delta = self.observe(timestamp_ms)
        if not running:
            return 0
        self.elapsed_ms += delta
        self.accumulator += delta
        n = 0
        while self.accumulator >= move_interval_ms:
            self.accumulator -= move_interval_ms
            n += 1
            if not tick(delta):
                break
        self.ticks += n
        return n
