# neonsnake/runners/run_game.py
import pygame as pg
from neonsnake.config import AppConfig
from neonsnake.core.entities import Direction
from neonsnake.core.game_log import ALL_KEYS, CSVLogger, make_game_logger
from neonsnake.core.highscores import HighScoreTable
from neonsnake.core.interfaces import GameOverEvent
from neonsnake.core.session import Session
from neonsnake.viz.keyboard import Keyboard
from neonsnake.viz.presenter import Presenter
from neonsnake.viz.render_iface import Renderer
from neonsnake.viz.renderer_pygame import PygameRenderer
from neonsnake.viz.sound import SoundBoard

def make_score_recorder(table: HighScoreTable, name: str, rend: Renderer):
    """Hook that files every finished run; a failed write is reported, never raised."""
    def _record(ev):
        if not isinstance(ev, GameOverEvent):
            return
        rank = table.submit(name, ev.snapshot)
        try:
            table.save()
        except OSError as e:
            print(f"[scores] could not save {table.path}: {e}")
        if rank is not None:
            rend.set_overlay(f"High score #{rank}: {ev.final_score}")
        else:
            rend.set_overlay(f"Best: {table.entries()[0]['score']}")
    return _record

def main(cfg: AppConfig, name: str = "Player"):
    session = Session(cfg)

    rend = PygameRenderer()
    rend.open(cfg)
    sounds = SoundBoard(cfg.sound_dir, cfg.sound_volume, cfg.music_volume)
    sounds.open()
    sounds.start_music()

    table = HighScoreTable(cfg.highscore_path, cfg.highscore_limit).load()
    presenter = Presenter(rend, sounds)

    logger = CSVLogger(cfg.game_log_path, ALL_KEYS) if cfg.game_log_path else None
    if logger is not None:
        presenter.add_hook(make_game_logger(logger))

    presenter.add_hook(make_score_recorder(table, name, rend))

    kbd = Keyboard()
    running = True
    try:
        while running:
            for cmd in kbd.poll():
                if isinstance(cmd, Direction):
                    session.enqueue_direction(cmd)
                elif cmd == "quit":
                    running = False
                elif cmd == "pause":
                    session.toggle_pause()
                elif cmd == "restart" and session.state.is_game_over:
                    session.restart()
                    rend.set_overlay(None)

            session.advance_frame(pg.time.get_ticks())
            presenter.dispatch(session.drain_events())
            rend.draw(session.snapshot())
            rend.tick(cfg.fps)
    finally:
        if logger is not None:
            logger.close()
        sounds.close()
        rend.close()
