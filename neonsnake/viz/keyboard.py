# neonsnake/viz/keyboard.py
from typing import List, Union
import pygame as pg
from neonsnake.core.entities import Direction

Command = Union[Direction, str]   # Direction, or "pause" / "restart" / "quit"

KEYMAP = {
    pg.K_UP: Direction.UP, pg.K_w: Direction.UP,
    pg.K_DOWN: Direction.DOWN, pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT, pg.K_a: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
    pg.K_SPACE: "pause", pg.K_p: "pause",
    pg.K_r: "restart", pg.K_RETURN: "restart",
    pg.K_ESCAPE: "quit",
}

class Keyboard:
    def poll(self) -> List[Command]:
        """All commands since the last poll, in arrival order."""
        out: List[Command] = []
        for e in pg.event.get():
            if e.type == pg.QUIT:
                out.append("quit")
            elif e.type == pg.KEYDOWN:
                cmd = KEYMAP.get(e.key)
                if cmd is not None:
                    out.append(cmd)
        return out
