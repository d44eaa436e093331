# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so neonsnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from collections import deque

import pygame as pg
import pytest

from neonsnake.config import AppConfig
from neonsnake.core.entities import Direction, Snake
from neonsnake.core.rules import Rules
from neonsnake.core.session import Session

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((20 * 30, 16 * 30), pg.SRCALPHA)

@pytest.fixture
def cfg():
    # nothing spawns on its own, so tests place every collectible themselves
    return AppConfig(seed=1234, initial_food=0, min_collectibles=0, game_log_path=None)

@pytest.fixture
def rules(cfg):
    return Rules(cfg)

@pytest.fixture
def session(cfg):
    return Session(cfg)

@pytest.fixture
def snake_factory():
    def make(head, heading, body, target_len=None, speed=5, queue_max=3):
        body = deque(body)
        return Snake(head=head, heading=heading, body=body,
                     target_len=len(body) if target_len is None else target_len,
                     speed=speed, queue_max=queue_max)
    return make

@pytest.fixture
def hook_snake(snake_factory):
    """Moving left with the neck to its right; turning UP runs into (10, 7)."""
    return snake_factory(
        head=(10, 8), heading=Direction.LEFT,
        body=[(12, 7), (11, 7), (10, 7), (11, 8)], target_len=8,
    )
