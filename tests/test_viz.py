import shutil

import pygame as pg
import pytest

import neonsnake.viz.renderer_colors as theme
from neonsnake.core.entities import Collectible, Direction, PowerUpType
from neonsnake.core.interfaces import (
    AchievementEvent, AchievementView, CollisionEvent, EatEvent, LevelUpEvent,
    PauseEvent, PowerUpEvent, RestartEvent,
)
from neonsnake.viz.keyboard import Keyboard
from neonsnake.viz.particles import ParticleSystem, ScreenShake
from neonsnake.viz.presenter import Presenter
from neonsnake.viz.renderer_headless import HeadlessRenderer
from neonsnake.viz.renderer_pygame import PygameRenderer, achievement_lines, format_clock
from neonsnake.viz.sound import SoundBoard

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def test_headless_board_rows(cfg, rules):
    rules.collectibles = [Collectible.food((0, 0), 10), Collectible.powerup((19, 15), PowerUpType.SPEED)]
    rend = HeadlessRenderer()
    rend.open(cfg)
    rend.draw(rules.snapshot())
    rows = rend.rows()
    assert len(rows) == 16 and all(len(r) == 20 for r in rows)
    assert rows[0][0] == "F"
    assert rows[15][19] == "P"
    assert rows[8][5:11] == "oooooH"
    assert rend.frames == 1

def test_presenter_routes_effects(cfg):
    rend = HeadlessRenderer()
    rend.open(cfg)
    seen = []
    p = Presenter(rend, hooks=[seen.append])
    view = AchievementView("score_100", "Score 100 Points", "", True, 50)
    events = [
        CollisionEvent((1, 2)), EatEvent((3, 4), 10), PowerUpEvent((5, 6), PowerUpType.SHIELD),
        LevelUpEvent(2), AchievementEvent(view), PauseEvent(True),
    ]
    p.dispatch(events)
    assert rend.bursts == [((1, 2), theme.COLLISION), ((3, 4), theme.FOOD), ((5, 6), theme.POWERUP)]
    assert rend.shakes == [15]
    assert rend.statuses == ["Level Up! Level 2", "Achievement Unlocked: Score 100 Points"]
    assert seen == events

def test_restart_clears_effects(cfg):
    rend = HeadlessRenderer()
    rend.open(cfg)
    p = Presenter(rend)
    p.handle(EatEvent((1, 1), 10))
    p.handle(RestartEvent())
    assert rend.bursts == []

def test_silent_soundboard_is_noop():
    sb = SoundBoard(None)
    sb.open()
    assert not sb.enabled
    sb.play("eat")
    sb.start_music(); sb.pause_music(); sb.resume_music(); sb.stop_music()
    sb.close()

def test_soundboard_with_empty_dir(tmp_path):
    sb = SoundBoard(str(tmp_path))
    sb.open()
    assert sb.sounds == {}
    sb.play("death")
    sb.close()

def test_pygame_renderer_draws_head(cfg, rules, screen):
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg)
    rend.draw(rules.snapshot())
    c = cfg.render_cell
    # (5, 5) inside the head cell misses both eyes for a right-facing head
    assert _rgb(screen.get_at((10 * c + 5, 8 * c + 5))) == _rgb(theme.HEAD)

def test_pygame_renderer_food_and_banner(cfg, rules, screen):
    rules.collectibles = [Collectible.food((2, 12), 10)]
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg)
    rend.draw(rules.snapshot())
    c = cfg.render_cell
    assert _rgb(screen.get_at((2 * c + c // 2, 12 * c + c // 2))) == _rgb(theme.FOOD)
    rules.state.is_game_over = True
    rend.draw(rules.snapshot())   # overlay path must not raise

def test_pygame_renderer_effects(cfg, rules, screen):
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg)
    rend.burst((3, 3), theme.FOOD)
    rend.shake(100)
    assert len(rend.particles) == 12
    assert rend.shaker.intensity == 15
    rend.set_status("hi")
    rend.draw(rules.snapshot())
    rend.clear_effects()
    assert len(rend.particles) == 0

def test_draw_requires_open(rules):
    with pytest.raises(AssertionError):
        PygameRenderer().draw(rules.snapshot())

def test_format_clock():
    assert format_clock(0) == "00:00"
    assert format_clock(61_999) == "01:01"
    assert format_clock(600_000) == "10:00"

def test_particles_die_out():
    ps = ParticleSystem()
    ps.emit(10, 10, (1, 2, 3), count=5)
    for _ in range(41):
        ps.update()
    assert len(ps) == 0

def test_shake_decays_to_zero():
    sh = ScreenShake()
    sh.trigger(8)
    for _ in range(100):
        sh.offset()
    assert sh.intensity == 0
    assert sh.offset() == (0, 0)

@pytest.fixture
def display():
    pg.display.set_mode((1, 1))
    pg.event.clear()
    yield
    pg.event.clear()

def test_keyboard_maps_keys(display):
    for key in (pg.K_UP, pg.K_a, pg.K_p, pg.K_r, pg.K_x, pg.K_ESCAPE):
        pg.event.post(pg.event.Event(pg.KEYDOWN, key=key))
    cmds = Keyboard().poll()
    assert cmds == [Direction.UP, Direction.LEFT, "pause", "restart", "quit"]

def test_keyboard_quit_event(display):
    pg.event.post(pg.event.Event(pg.QUIT))
    assert Keyboard().poll() == ["quit"]

def test_recording_writes_frames(tmp_path, cfg, rules, screen):
    rec = tmp_path / "frames"
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg.with_(render_record_dir=str(rec)))
    rend.draw(rules.snapshot())
    assert (rec / "frame_000000.png").exists()

def test_recording_dir_under_a_file_disables_recording(tmp_path, cfg, rules, screen):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg.with_(render_record_dir=str(blocker / "frames")))
    rend.draw(rules.snapshot())
    assert not rend._recording

def test_failed_frame_save_stops_recording(tmp_path, cfg, rules, screen, capsys):
    rec = tmp_path / "frames"
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg.with_(render_record_dir=str(rec)))
    shutil.rmtree(rec)
    rend.draw(rules.snapshot())
    assert not rend._recording
    assert "[record]" in capsys.readouterr().out
    rend.draw(rules.snapshot())

def test_hud_lists_achievements(rules):
    rules.achievements.get("level_5").unlocked = True
    assert achievement_lines(rules.snapshot()) == [
        "[ ] Score 100 Points", "[x] Reach Level 5", "[ ] Eat 50 Food",
    ]

def test_unlocking_recolours_hud_achievement(cfg, rules, screen):
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg)
    w = screen.get_width()

    def strip():
        rend.draw(rules.snapshot())
        return [_rgb(screen.get_at((x, y))) for x in range(w - 200, w) for y in range(22, 40)]

    before = strip()
    rules.achievements.get("level_5").unlocked = True
    assert strip() != before
