# neonsnake/core/session.py
from __future__ import annotations
from typing import List, Optional
from neonsnake.config import AppConfig
from .achievements import AchievementEvaluator
from .clock import SimulationClock
from .entities import Direction
from .interfaces import Event, PauseEvent, RestartEvent, Snapshot
from .rules import Rules

class Session:
    """Controller that owns one run: rules, clock, and the pending event list.

    Inputs come from the presentation side (`enqueue_direction`, `set_paused`,
    `restart`, `advance_frame`). The session never schedules itself; whoever
    drives the frame loop calls `advance_frame` and then `drain_events`.
    """

    def __init__(self, cfg: AppConfig, achievements: Optional[AchievementEvaluator] = None):
        self.cfg = cfg
        self.rules = Rules(cfg, achievements)
        self.clock = SimulationClock()

    # ---- state shortcuts ----
    @property
    def state(self):
        return self.rules.state

    @property
    def snake(self):
        return self.rules.snake

    @property
    def achievements(self) -> AchievementEvaluator:
        return self.rules.achievements

    @property
    def is_playing(self) -> bool:
        return self.state.is_playing

    # ---- collaborator -> core ----
    def enqueue_direction(self, direction: Direction) -> bool:
        """Buffer a turn for a later tick. Dropped while paused, over, or when the queue is full."""
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {direction!r}")
        if not self.is_playing:
            return False
        return self.snake.enqueue(direction)

    def set_paused(self, paused: bool) -> None:
        st = self.state
        if st.is_game_over or st.is_paused == paused:
            return
        st.is_paused = paused
        self.rules.events.append(PauseEvent(paused))

    def toggle_pause(self) -> None:
        self.set_paused(not self.state.is_paused)

    def restart(self) -> Snapshot:
        self.rules.reset()
        self.clock.reset()
        self.rules.events.append(RestartEvent())
        return self.snapshot()

    def reset_achievements(self) -> None:
        """Full session reset of the unlock flags. `restart()` leaves them alone."""
        self.achievements.reset()

    def advance_frame(self, timestamp_ms: float) -> int:
        """Feed one frame timestamp; returns how many ticks ran."""
        rules = self.rules

        def _tick(delta: float) -> bool:
            rules.elapsed_ms = self.clock.elapsed_ms
            return rules.tick(delta)

        n = self.clock.advance(timestamp_ms, rules.move_interval_ms, _tick, running=self.is_playing)
        rules.elapsed_ms = self.clock.elapsed_ms
        return n

    # ---- core -> collaborator ----
    def drain_events(self) -> List[Event]:
        out = list(self.rules.events)
        self.rules.events.clear()
        return out

    def snapshot(self) -> Snapshot:
        return self.rules.snapshot()
