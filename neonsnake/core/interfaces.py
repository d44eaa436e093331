# neonsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Protocol, Union
from .grid import Cell
from .entities import Collectible, Direction, PowerUpType

@dataclass(frozen=True)
class AchievementView:
    id: str
    name: str
    description: str
    unlocked: bool
    reward: int

@dataclass(frozen=True)
class Snapshot:
    head: Cell
    body: Tuple[Cell, ...]             # tail -> neck
    heading: Direction
    collectibles: Tuple[Collectible, ...]
    level: int
    score: int
    lives: int
    lives_lost: int
    difficulty: float
    speed: int
    target_len: int
    food_eaten: int
    is_paused: bool
    is_game_over: bool
    powerups: Tuple[Tuple[PowerUpType, float], ...]   # (subtype, remaining ms)
    achievements: Tuple[AchievementView, ...]
    elapsed_ms: float
    grid_w: int
    grid_h: int

    @property
    def unlocked_names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self.achievements if a.unlocked)

# ---- notifications emitted during a tick ----
@dataclass(frozen=True)
class CollisionEvent:
    cell: Cell

@dataclass(frozen=True)
class EatEvent:
    cell: Cell
    value: int

@dataclass(frozen=True)
class PowerUpEvent:
    cell: Cell
    subtype: PowerUpType

@dataclass(frozen=True)
class PowerUpExpiredEvent:
    subtype: PowerUpType

@dataclass(frozen=True)
class LevelUpEvent:
    level: int

@dataclass(frozen=True)
class AchievementEvent:
    achievement: AchievementView

@dataclass(frozen=True)
class GameOverEvent:
    final_score: int
    snapshot: Snapshot

@dataclass(frozen=True)
class PauseEvent:
    paused: bool

@dataclass(frozen=True)
class RestartEvent:
    pass

Event = Union[CollisionEvent, EatEvent, PowerUpEvent, PowerUpExpiredEvent, LevelUpEvent,
              AchievementEvent, GameOverEvent, PauseEvent, RestartEvent]

class EventSink(Protocol):
    def handle(self, event: Event) -> None: ...
