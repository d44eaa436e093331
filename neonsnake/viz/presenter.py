# neonsnake/viz/presenter.py
from __future__ import annotations
from typing import Callable, Iterable, List, Optional
from neonsnake.core.interfaces import (
    AchievementEvent, CollisionEvent, EatEvent, Event, EventSink, GameOverEvent,
    LevelUpEvent, PauseEvent, PowerUpEvent, RestartEvent,
)
from neonsnake.viz.render_iface import Renderer
from neonsnake.viz.sound import SoundBoard
import neonsnake.viz.renderer_colors as theme

Hook = Callable[[Event], None]

class Presenter(EventSink):
    """Turns drained session events into particles, shakes, sounds and banners.

    Nothing here feeds back into the simulation; extra hooks (the game log,
    a high-score prompt) get every event after the built-in handling.
    """

    def __init__(self, renderer: Renderer, sounds: Optional[SoundBoard] = None,
                 hooks: Iterable[Hook] = ()):
        self.renderer = renderer
        self.sounds = sounds
        self.hooks: List[Hook] = list(hooks)

    def add_hook(self, hook: Hook) -> None:
        self.hooks.append(hook)

    def dispatch(self, events: Iterable[Event]) -> None:
        for ev in events:
            self.handle(ev)

    def _play(self, cue: str) -> None:
        if self.sounds is not None:
            self.sounds.play(cue)

    def handle(self, ev: Event) -> None:
        r = self.renderer
        if isinstance(ev, CollisionEvent):
            r.burst(ev.cell, theme.COLLISION)
            r.shake(15)
            self._play("collision")
        elif isinstance(ev, EatEvent):
            r.burst(ev.cell, theme.FOOD)
            self._play("eat")
        elif isinstance(ev, PowerUpEvent):
            r.burst(ev.cell, theme.POWERUP)
            self._play("powerup")
        elif isinstance(ev, LevelUpEvent):
            r.set_status(f"Level Up! Level {ev.level}", 5000)
            self._play("levelup")
        elif isinstance(ev, AchievementEvent):
            r.set_status(f"Achievement Unlocked: {ev.achievement.name}", 5000)
            self._play("achievement")
        elif isinstance(ev, GameOverEvent):
            r.shake(10)
            self._play("death")
        elif isinstance(ev, PauseEvent):
            if self.sounds is not None:
                if ev.paused:
                    self.sounds.pause_music()
                else:
                    self.sounds.resume_music()
        elif isinstance(ev, RestartEvent):
            if hasattr(r, "clear_effects"):
                r.clear_effects()
            if self.sounds is not None:
                self.sounds.start_music()

        for hook in self.hooks:
            hook(ev)
