# neonsnake/runners/run_headless.py
from typing import Any, Dict, List, Optional
from neonsnake.config import AppConfig
from neonsnake.core.game_log import ALL_KEYS, CSVLogger, make_game_logger
from neonsnake.core.interfaces import GameOverEvent
from neonsnake.core.session import Session
from neonsnake.policy import GreedyPolicy, Policy
from neonsnake.viz.presenter import Presenter
from neonsnake.viz.renderer_headless import HeadlessRenderer

def play_games(cfg: AppConfig, games: int = 1, max_frames: int = 20_000,
               policy: Optional[Policy] = None, frame_ms: Optional[float] = None,
               log: bool = False) -> List[Dict[str, Any]]:
    """Drive a session with a fixed frame delta and an autopilot; one summary dict per game."""
    policy = policy or GreedyPolicy()
    frame_ms = cfg.frame_ms if frame_ms is None else frame_ms
    session = Session(cfg)
    rend = HeadlessRenderer()
    rend.open(cfg)
    presenter = Presenter(rend)

    logger = CSVLogger(cfg.game_log_path, ALL_KEYS) if (log and cfg.game_log_path) else None
    if logger is not None:
        presenter.add_hook(make_game_logger(logger))

    results: List[Dict[str, Any]] = []
    t = 0.0
    try:
        for g in range(games):
            if g > 0:
                session.restart()
            over = None
            for _ in range(max_frames):
                snap = session.snapshot()
                d = policy.act(snap)
                if d is not None and d is not snap.heading and not session.snake.queue:
                    session.enqueue_direction(d)
                session.advance_frame(t)
                t += frame_ms
                events = session.drain_events()
                presenter.dispatch(events)
                over = next((e for e in events if isinstance(e, GameOverEvent)), over)
                if over is not None:
                    break
            rend.draw(session.snapshot())
            s = session.snapshot()
            results.append({
                "game": g + 1,
                "score": s.score,
                "level": s.level,
                "lives": s.lives,
                "food_eaten": s.food_eaten,
                "game_over": s.is_game_over,
                "elapsed_ms": s.elapsed_ms,
                "achievements": list(s.unlocked_names),
                "board": rend.rows(),
            })
    finally:
        if logger is not None:
            logger.close()
    return results

def main(cfg: AppConfig, games: int = 1, max_frames: int = 20_000, show_board: bool = False):
    results = play_games(cfg, games=games, max_frames=max_frames, log=True)
    for r in results:
        print(f"[game {r['game']}] score={r['score']} level={r['level']} food={r['food_eaten']} "
              f"over={r['game_over']} achievements={r['achievements']}")
    if show_board and results:
        print("\n".join(results[-1]["board"]))
