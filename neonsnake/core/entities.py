# neonsnake/core/entities.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Dict, List, Optional
from .grid import Cell, Grid

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vec(self) -> Cell:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reverse_of(self, other: "Direction") -> bool:
        return self.opposite is other

class CollectibleKind(Enum):
    FOOD = "food"
    POWERUP = "powerup"

class PowerUpType(Enum):
    SPEED = "speed"
    SHIELD = "shield"
    DOUBLE_POINTS = "double_points"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

@dataclass(frozen=True)
class Collectible:
    kind: CollectibleKind
    position: Cell
    value: int = 0                          # score, Food only
    subtype: Optional[PowerUpType] = None   # PowerUp only

    def __post_init__(self):
        if self.kind is CollectibleKind.POWERUP and self.subtype is None:
            raise ValueError("power-up collectible needs a subtype")
        if self.kind is CollectibleKind.FOOD and self.subtype is not None:
            raise ValueError("food collectible cannot carry a power-up subtype")

    @classmethod
    def food(cls, position: Cell, value: int) -> "Collectible":
        return cls(CollectibleKind.FOOD, position, value=value)

    @classmethod
    def powerup(cls, position: Cell, subtype: PowerUpType) -> "Collectible":
        return cls(CollectibleKind.POWERUP, position, subtype=subtype)

    @property
    def is_food(self) -> bool:
        return self.kind is CollectibleKind.FOOD

@dataclass
class ActivePowerUp:
    subtype: PowerUpType
    remaining_ms: float

@dataclass
class Snake:
    """Head cell plus body segments ordered tail -> neck."""
    head: Cell
    heading: Direction
    body: Deque[Cell]
    target_len: int
    speed: int
    pending: Optional[Direction] = None
    queue: Deque[Direction] = field(default_factory=deque)
    queue_max: Optional[int] = None

    def __post_init__(self):
        if self.pending is None:
            self.pending = self.heading
        assert self.target_len >= 0, f"negative target length {self.target_len}"

    @classmethod
    def spawn(cls, grid: Grid, length: int, speed: int, queue_max: Optional[int] = None) -> "Snake":
        """Centered snake facing right, body laid out behind the head."""
        cx, cy = grid.width // 2, grid.height // 2
        # a body longer than the row would wrap into the head
        n = min(length, grid.width - 1)
        body = deque(grid.wrap((cx - i, cy)) for i in range(n, 0, -1))
        return cls(head=(cx, cy), heading=Direction.RIGHT, body=body,
                   target_len=length, speed=speed, queue_max=queue_max)

    # ---- input ----
    def enqueue(self, direction: Direction) -> bool:
        if not isinstance(direction, Direction):
            raise TypeError(f"expected Direction, got {direction!r}")
        if self.queue_max is not None and len(self.queue) >= self.queue_max:
            return False
        self.queue.append(direction)
        return True

    def commit_heading(self) -> Direction:
        """Take the oldest queued turn that is not a reversal; reversals are dropped."""
        while self.queue:
            nxt = self.queue.popleft()
            if not nxt.is_reverse_of(self.heading):
                self.pending = nxt
                break
        self.heading = self.pending
        return self.heading

    # ---- movement ----
    def advance(self, new_head: Cell) -> None:
        self.body.append(self.head)
        while len(self.body) > self.target_len:
            self.body.popleft()
        self.head = new_head

    def hits_body(self, cell: Cell) -> bool:
        return cell in self.body

    def cells(self) -> List[Cell]:
        return [*self.body, self.head]

@dataclass
class RunState:
    level: int = 1
    score: int = 0
    lives: int = 3
    difficulty: float = 1.0
    is_paused: bool = False
    is_game_over: bool = False
    food_eaten: int = 0
    lives_lost: int = 0
    powerups: Dict[PowerUpType, ActivePowerUp] = field(default_factory=dict)

    @property
    def is_playing(self) -> bool:
        return not (self.is_paused or self.is_game_over)
