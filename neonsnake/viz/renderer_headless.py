# neonsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Tuple
import numpy as np
from neonsnake.config import AppConfig
from neonsnake.core.grid import Cell
from neonsnake.core.interfaces import Snapshot

class HeadlessRenderer:
    """No window. Keeps the last frame as a character grid plus a log of effect cues."""

    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frame: Optional[np.ndarray] = None
        self.frames = 0
        self.bursts: List[Tuple[Cell, tuple]] = []
        self.shakes: List[float] = []
        self.statuses: List[str] = []
        self.overlay: Optional[str] = None

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frame = np.full((cfg.grid_h, cfg.grid_w), ".", dtype="<U1")

    def draw(self, s: Snapshot) -> None:
        grid = np.full((s.grid_h, s.grid_w), ".", dtype="<U1")
        for item in s.collectibles:
            x, y = item.position
            grid[y, x] = "F" if item.is_food else "P"
        for (x, y) in s.body:
            grid[y, x] = "o"
        hx, hy = s.head
        grid[hy, hx] = "H"
        self.frame = grid
        self.frames += 1

    def rows(self) -> List[str]:
        if self.frame is None:
            return []
        return ["".join(row) for row in self.frame]

    def burst(self, cell: Cell, color) -> None:
        self.bursts.append((cell, color))

    def shake(self, intensity: float) -> None:
        self.shakes.append(intensity)

    def set_status(self, text: str, ms: int = 5000) -> None:
        self.statuses.append(text)

    def set_overlay(self, text: Optional[str]) -> None:
        self.overlay = text or ""

    def clear_effects(self) -> None:
        self.bursts.clear()
        self.shakes.clear()

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass
