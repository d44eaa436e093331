# neonsnake/viz/renderer_pygame.py
from __future__ import annotations
import os
from typing import Optional, Union
import pygame as pg
from neonsnake.config import AppConfig
from neonsnake.core.entities import Direction
from neonsnake.core.grid import Cell
from neonsnake.core.interfaces import Snapshot
from neonsnake.viz.particles import ParticleSystem, ScreenShake
import neonsnake.viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

def _fade(col, t: float):
    # blend toward the background; t=1 keeps the colour
    return tuple(int(b + (c - b) * t) for c, b in zip(col, theme.BG))

def format_clock(ms: float) -> str:
    seconds = int(ms // 1000)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"

def achievement_lines(s: Snapshot):
    return [f"{'[x]' if a.unlocked else '[ ]'} {a.name}" for a in s.achievements]

class PygameRenderer:
    def __init__(self):
        self.cell = 30
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._grid_w = 0
        self._grid_h = 0
        self._frame_idx = 0
        self._recording = False
        self._overlay_text: Optional[str] = None
        self._status: Optional[str] = None
        self._status_until = 0
        self._font: Optional[pg.font.Font] = None
        self._font_big: Optional[pg.font.Font] = None
        self.particles = ParticleSystem()
        self.shaker = ScreenShake()

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg

        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((self._grid_w * self.cell, self._grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        self._start_recording()

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface (embedding, tests); no flip, no clock."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._grid_w, self._grid_h = cfg.grid_w, cfg.grid_h
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False
        self._start_recording()

    # ---- effect cues ----
    def _center_px(self, cell: Cell):
        x, y = cell
        return (x * self.cell + self.cell / 2, y * self.cell + self.cell / 2)

    def burst(self, cell: Cell, color) -> None:
        self.particles.emit(*self._center_px(cell), color)

    def shake(self, intensity: float) -> None:
        self.shaker.trigger(intensity)

    def set_status(self, text: str, ms: int = 5000) -> None:
        self._status = text
        self._status_until = pg.time.get_ticks() + ms

    def clear_effects(self) -> None:
        self.particles.clear()
        self.shaker.intensity = 0.0
        self._status = None

    # ---- frame ----
    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell
        ox, oy = self.shaker.offset()

        surf.fill(theme.BG)

        if self.cfg.render_grid_lines:
            for i in range(s.grid_w + 1):
                pg.draw.line(surf, theme.GRID, (i * c + ox, oy), (i * c + ox, s.grid_h * c + oy))
            for j in range(s.grid_h + 1):
                pg.draw.line(surf, theme.GRID, (ox, j * c + oy), (s.grid_w * c + ox, j * c + oy))

        for item in s.collectibles:
            col = theme.FOOD if item.is_food else theme.POWERUP
            px, py = self._center_px(item.position)
            pg.draw.circle(surf, col, (int(px) + ox, int(py) + oy), c // 3)

        n = len(s.body)
        for i, (x, y) in enumerate(s.body):
            col = _fade(theme.BODY, 0.7 + (i / n) * 0.3)
            pg.draw.rect(surf, col, pg.Rect(x * c + 1 + ox, y * c + 1 + oy, c - 2, c - 2))

        hx, hy = s.head
        pg.draw.rect(surf, theme.HEAD, pg.Rect(hx * c + 2 + ox, hy * c + 2 + oy, c - 4, c - 4), border_radius=4)
        self._draw_eyes(hx * c + ox, hy * c + oy, s.heading)

        for p in self.particles.particles:
            pg.draw.circle(surf, p.color, (int(p.x) + ox, int(p.y) + oy), int(p.radius))
        self.particles.update()

        if self.cfg.render_show_hud:
            self._draw_hud(s)

        if s.is_game_over:
            self._draw_banner("Game Over", f"Your final score was {s.score}. Press R to restart.")
        elif s.is_paused:
            self._draw_banner("Paused", "Press P to resume.")

        if self._overlay_text:
            ovr = self._small_font().render(self._overlay_text, True, theme.TEXT)
            surf.blit(ovr, (6, surf.get_height() - 22))

        if self._auto_flip:
            pg.display.flip()

        if self._recording:
            self._save_surface_frame()

    def _draw_eyes(self, px: int, py: int, heading: Direction) -> None:
        c = self.cell
        size = max(1, c // 6)
        off = c // 3
        far = c - off - size
        near2 = c - int(off * 1.5)
        if heading is Direction.RIGHT:
            eyes = [(far, off), (far, near2)]
        elif heading is Direction.LEFT:
            eyes = [(off, off), (off, near2)]
        elif heading is Direction.UP:
            eyes = [(off, off), (near2, off)]
        else:
            eyes = [(off, far), (near2, far)]
        for ex, ey in eyes:
            pg.draw.rect(self.surf, theme.EYE, pg.Rect(px + ex, py + ey, size, size))

    def _small_font(self) -> pg.font.Font:
        if self._font is None:
            self._font = pg.font.SysFont(None, 22)
        return self._font

    def _draw_hud(self, s: Snapshot) -> None:
        font = self._small_font()
        line = f"Score: {s.score}   Level: {s.level}   Lives: {s.lives}   {format_clock(s.elapsed_ms)}"
        self.surf.blit(font.render(line, True, theme.TEXT), (6, 4))
        if s.powerups:
            pu = "  ".join(f"{t.label} {int(-(-ms // 1000))}" for t, ms in s.powerups)
            self.surf.blit(font.render(pu, True, theme.POWERUP), (6, 24))
        right = self.surf.get_width() - 6
        for i, (ach, label) in enumerate(zip(s.achievements, achievement_lines(s))):
            col = theme.POWERUP if ach.unlocked else theme.GRID
            txt = font.render(label, True, col)
            self.surf.blit(txt, txt.get_rect(topright=(right, 4 + 18 * i)))
        if self._status and pg.time.get_ticks() < self._status_until:
            txt = font.render(self._status, True, theme.TEXT)
            self.surf.blit(txt, txt.get_rect(midtop=(self.surf.get_width() // 2, 62)))

    def _draw_banner(self, title: str, body: str) -> None:
        if self._font_big is None:
            self._font_big = pg.font.SysFont(None, 48)
        w, h = self.surf.get_size()
        shade = pg.Surface((w, h), pg.SRCALPHA)
        shade.fill((*theme.OVERLAY, 170))
        self.surf.blit(shade, (0, 0))
        t = self._font_big.render(title, True, theme.TEXT)
        self.surf.blit(t, t.get_rect(center=(w // 2, h // 2 - 20)))
        b = self._small_font().render(body, True, theme.TEXT)
        self.surf.blit(b, b.get_rect(center=(w // 2, h // 2 + 20)))

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None

    # internals
    def _start_recording(self) -> None:
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        self._recording = False
        if not rec_dir:
            return
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        try:
            os.makedirs(rec_dir, exist_ok=True)
        except OSError as e:
            print(f"[record] cannot create {rec_dir}: {e}")
            return
        self._recording = True

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        fname = os.path.join(self.cfg.render_record_dir, f"frame_{self._frame_idx:06d}.png")
        try:
            pg.image.save(self.surf, fname)
        except (pg.error, OSError) as e:
            # recording stops, the game keeps running
            print(f"[record] frame save failed, recording off: {e}")
            self._recording = False
            return
        self._frame_idx += 1
