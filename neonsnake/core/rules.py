# neonsnake/core/rules.py  (pure rules, no pygame)
from __future__ import annotations
import random
from typing import List, Optional, Set
from neonsnake.config import AppConfig
from .grid import Cell, Grid
from .entities import ActivePowerUp, Collectible, PowerUpType, RunState, Snake
from .achievements import AchievementEvaluator
from .interfaces import (
    AchievementEvent, CollisionEvent, EatEvent, Event, GameOverEvent,
    LevelUpEvent, PowerUpEvent, PowerUpExpiredEvent, Snapshot,
)

class Rules:
    """Move / collide / score / level state machine.

    One `tick()` is one grid step. Notifications are appended to `self.events`
    while the tick runs; the caller drains them afterwards.
    """

    def __init__(self, cfg: AppConfig, achievements: Optional[AchievementEvaluator] = None):
        self.cfg = cfg
        self.grid = Grid(cfg.grid_w, cfg.grid_h)
        self.rng = random.Random(cfg.seed)
        self.achievements = achievements if achievements is not None else AchievementEvaluator()
        self.events: List[Event] = []
        self.elapsed_ms = 0.0
        self._reset_state()

    def _reset_state(self):
        self.state = RunState(lives=self.cfg.start_lives)
        self.snake = self._spawn_snake(self.cfg.start_len, self.cfg.start_speed)
        self.collectibles: List[Collectible] = []
        self.elapsed_ms = 0.0
        self._init_collectibles()

    def reset(self) -> Snapshot:
        """Start-of-game values for everything except achievements."""
        self._reset_state()
        self.events.clear()
        return self.snapshot()

    def _spawn_snake(self, length: int, speed: int) -> Snake:
        return Snake.spawn(self.grid, length, speed, queue_max=self.cfg.queue_max)

    # ---- collectibles ----
    def _occupied(self) -> Set[Cell]:
        occ = set(self.snake.cells())
        occ.update(c.position for c in self.collectibles)
        return occ

    def _free_cell(self) -> Optional[Cell]:
        return self.grid.random_free_cell(self.rng, self._occupied())

    def _spawn_food(self) -> Optional[Collectible]:
        pos = self._free_cell()
        if pos is None:
            return None
        item = Collectible.food(pos, self.cfg.food_value)
        self.collectibles.append(item)
        return item

    def _spawn_powerup(self) -> Optional[Collectible]:
        pos = self._free_cell()
        if pos is None:
            return None
        item = Collectible.powerup(pos, self.rng.choice(list(PowerUpType)))
        self.collectibles.append(item)
        return item

    def _spawn_collectible(self) -> Optional[Collectible]:
        if self.rng.random() < self.cfg.food_chance:
            return self._spawn_food()
        return self._spawn_powerup()

    def _init_collectibles(self):
        self.collectibles = []
        for _ in range(self.cfg.initial_food):
            self._spawn_food()
        if self.state.level >= 2:
            self._spawn_powerup()

    # ---- power-ups ----
    def activate_powerup(self, subtype: PowerUpType) -> None:
        active = self.state.powerups.get(subtype)
        if active is not None:
            active.remaining_ms = self.cfg.powerup_ms
        else:
            self.state.powerups[subtype] = ActivePowerUp(subtype, self.cfg.powerup_ms)
        if subtype is PowerUpType.SPEED:
            self.snake.speed = self.cfg.boost_speed
        # SHIELD and DOUBLE_POINTS are tracked but have no effect on play

    def _decay_powerups(self, delta_ms: float) -> None:
        for subtype in list(self.state.powerups):
            active = self.state.powerups[subtype]
            active.remaining_ms -= delta_ms
            if active.remaining_ms <= 0:
                del self.state.powerups[subtype]
                if subtype is PowerUpType.SPEED:
                    self.snake.speed = self.cfg.base_speed
                self.events.append(PowerUpExpiredEvent(subtype))

    # ---- tick ----
    @property
    def move_interval_ms(self) -> float:
        return 1000.0 / self.snake.speed

    def tick(self, frame_delta_ms: float = 0.0) -> bool:
        """Advance one grid step. Returns False once the game is over."""
        st = self.state
        if st.is_game_over:
            return False
        snake = self.snake

        snake.commit_heading()
        new_head = self.grid.step(snake.head, snake.heading.vec)

        if snake.hits_body(new_head):
            self._self_collision(new_head)
            return not st.is_game_over

        snake.advance(new_head)
        assert len(snake.body) <= snake.target_len, "body outgrew target length"

        ate = self._collect(new_head)
        if ate and st.score % self.cfg.level_every == 0:
            self._level_up()

        if len(self.collectibles) < self.cfg.min_collectibles:
            self._spawn_collectible()

        decay = frame_delta_ms if self.cfg.powerup_decay == "frame" else self.cfg.frame_ms
        self._decay_powerups(decay)

        for ach in self.achievements.evaluate(st):
            self.events.append(AchievementEvent(ach.view()))
        return True

    def _self_collision(self, cell: Cell) -> None:
        st = self.state
        st.lives_lost += 1
        if st.lives > 1:
            st.lives -= 1
            length = max(self.cfg.min_len, self.snake.target_len - self.cfg.len_penalty)
            self.snake = self._spawn_snake(length, self.snake.speed)
            self.events.append(CollisionEvent(cell))
        else:
            st.is_game_over = True
            st.is_paused = False
            self.events.append(GameOverEvent(st.score, self.snapshot()))

    def _collect(self, cell: Cell) -> bool:
        st = self.state
        ate = False
        for item in [c for c in self.collectibles if c.position == cell]:
            self.collectibles.remove(item)
            if item.is_food:
                ate = True
                self.snake.target_len += 1
                st.score += item.value
                st.food_eaten += 1
                self.events.append(EatEvent(cell, item.value))
            else:
                self.activate_powerup(item.subtype)
                self.events.append(PowerUpEvent(cell, item.subtype))
        return ate

    def _level_up(self) -> None:
        st = self.state
        st.level += 1
        st.difficulty = round(st.difficulty + self.cfg.difficulty_step, 6)
        self.snake.speed += 1
        self.events.append(LevelUpEvent(st.level))

    # ---- views ----
    def snapshot(self) -> Snapshot:
        st = self.state
        return Snapshot(
            head=self.snake.head,
            body=tuple(self.snake.body),
            heading=self.snake.heading,
            collectibles=tuple(self.collectibles),
            level=st.level,
            score=st.score,
            lives=st.lives,
            lives_lost=st.lives_lost,
            difficulty=st.difficulty,
            speed=self.snake.speed,
            target_len=self.snake.target_len,
            food_eaten=st.food_eaten,
            is_paused=st.is_paused,
            is_game_over=st.is_game_over,
            powerups=tuple((p.subtype, p.remaining_ms) for p in st.powerups.values()),
            achievements=self.achievements.views(),
            elapsed_ms=self.elapsed_ms,
            grid_w=self.grid.width,
            grid_h=self.grid.height,
        )
