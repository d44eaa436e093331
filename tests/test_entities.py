import pytest

from neonsnake.core.entities import Collectible, CollectibleKind, Direction, PowerUpType, Snake
from neonsnake.core.grid import Grid

def test_direction_opposites():
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.RIGHT.is_reverse_of(Direction.LEFT)
    assert not Direction.RIGHT.is_reverse_of(Direction.UP)

def test_spawn_centered_facing_right():
    s = Snake.spawn(Grid(20, 16), 5, 5)
    assert s.head == (10, 8)
    assert s.heading is Direction.RIGHT
    assert list(s.body) == [(5, 8), (6, 8), (7, 8), (8, 8), (9, 8)]
    assert s.target_len == 5
    assert s.head not in s.body

def test_spawn_long_snake_does_not_wrap_into_head():
    s = Snake.spawn(Grid(20, 16), 40, 5)
    assert s.target_len == 40
    assert len(s.body) == 19
    assert s.head not in s.body

def test_reversal_dropped_from_queue():
    s = Snake.spawn(Grid(20, 16), 5, 5)
    s.enqueue(Direction.LEFT)
    assert s.commit_heading() is Direction.RIGHT
    assert not s.queue

def test_first_legal_turn_is_taken():
    s = Snake.spawn(Grid(20, 16), 5, 5)
    s.enqueue(Direction.LEFT)
    s.enqueue(Direction.UP)
    s.enqueue(Direction.LEFT)
    assert s.commit_heading() is Direction.UP
    # LEFT is still queued and legal against UP
    assert s.commit_heading() is Direction.LEFT

def test_queued_reverse_of_new_heading_rejected():
    s = Snake.spawn(Grid(20, 16), 5, 5)
    s.enqueue(Direction.UP)
    s.enqueue(Direction.DOWN)
    assert s.commit_heading() is Direction.UP
    assert s.commit_heading() is Direction.UP

def test_queue_is_capped():
    s = Snake.spawn(Grid(20, 16), 5, 5, queue_max=3)
    assert all(s.enqueue(Direction.UP) for _ in range(3))
    assert s.enqueue(Direction.DOWN) is False
    assert len(s.queue) == 3

def test_enqueue_rejects_non_direction():
    s = Snake.spawn(Grid(20, 16), 5, 5)
    with pytest.raises(TypeError):
        s.enqueue("up")

def test_advance_trims_to_target():
    s = Snake.spawn(Grid(20, 16), 5, 5)
    s.advance((11, 8))
    assert s.head == (11, 8)
    assert len(s.body) == 5
    assert s.body[-1] == (10, 8)
    assert s.body[0] == (6, 8)

def test_collectible_validation():
    f = Collectible.food((1, 1), 10)
    assert f.is_food and f.kind is CollectibleKind.FOOD
    p = Collectible.powerup((2, 2), PowerUpType.SHIELD)
    assert not p.is_food and p.value == 0
    with pytest.raises(ValueError):
        Collectible(CollectibleKind.POWERUP, (0, 0))
    with pytest.raises(ValueError):
        Collectible(CollectibleKind.FOOD, (0, 0), 10, PowerUpType.SPEED)
