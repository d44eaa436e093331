# neonsnake/viz/render_iface.py
from __future__ import annotations
from typing import Optional, Protocol, Tuple
from neonsnake.config import AppConfig
from neonsnake.core.grid import Cell
from neonsnake.core.interfaces import Snapshot

Color = Tuple[int, int, int]

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
    # effect cues, fire-and-forget
    def burst(self, cell: Cell, color: Color) -> None: ...
    def shake(self, intensity: float) -> None: ...
    def set_status(self, text: str, ms: int = 5000) -> None: ...
    def set_overlay(self, text: Optional[str]) -> None: ...
