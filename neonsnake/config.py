# neonsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

@dataclass(frozen=True, slots=True)
class AppConfig:
    # shared / global
    grid_w: int = 20
    grid_h: int = 16
    seed: Optional[int] = None

    # snake
    start_len: int = 5
    min_len: int = 5
    start_speed: int = 5            # ticks per second
    base_speed: int = 5             # speed restored when a Speed power-up expires
    boost_speed: int = 10
    start_lives: int = 3
    len_penalty: int = 3            # targetLength shrink on a non-fatal self hit
    queue_max: int = 3              # pending direction inputs kept per tick window

    # collectibles
    food_value: int = 10
    food_chance: float = 0.8
    min_collectibles: int = 3
    initial_food: int = 3
    powerup_ms: float = 10_000.0

    # progression
    level_every: int = 50           # score multiple that triggers a level-up
    difficulty_step: float = 0.1

    # clock
    frame_ms: float = 1000.0 / 60.0
    powerup_decay: Literal["frame", "nominal"] = "frame"

    # render
    fps: int = 60
    render_cell: int = 30
    render_title: str = "Neon Snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None
    sound_dir: Optional[str] = None
    sound_volume: float = 0.5
    music_volume: float = 0.5

    # persistence
    highscore_path: str = "runs/highscores.json"
    highscore_limit: int = 10
    game_log_path: Optional[str] = "runs/games.csv"

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
