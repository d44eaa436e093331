# neonsnake/core  (pure simulation, no pygame)
from .grid import Cell, Grid
from .entities import (
    ActivePowerUp, Collectible, CollectibleKind, Direction, PowerUpType, RunState, Snake,
)
from .achievements import Achievement, AchievementEvaluator, default_achievements
from .clock import SimulationClock
from .interfaces import (
    AchievementEvent, AchievementView, CollisionEvent, EatEvent, Event, EventSink,
    GameOverEvent, LevelUpEvent, PauseEvent, PowerUpEvent, PowerUpExpiredEvent,
    RestartEvent, Snapshot,
)
from .rules import Rules
from .session import Session
