# neonsnake/policy.py
from __future__ import annotations
import random
from typing import List, Optional, Protocol
from neonsnake.core.entities import Direction
from neonsnake.core.grid import Cell
from neonsnake.core.interfaces import Snapshot

class Policy(Protocol):
    def act(self, snap: Snapshot) -> Optional[Direction]: ...

def torus_dist(a: Cell, b: Cell, w: int, h: int) -> int:
    dx = abs(a[0] - b[0]); dy = abs(a[1] - b[1])
    return min(dx, w - dx) + min(dy, h - dy)

def safe_moves(snap: Snapshot) -> List[Direction]:
    """Headings that are not a reversal and do not step onto the body next tick."""
    hx, hy = snap.head
    # the tail cell still counts: collision is checked before the tail moves
    body = set(snap.body)
    out = []
    for d in Direction:
        if d.is_reverse_of(snap.heading):
            continue
        dx, dy = d.vec
        nxt = ((hx + dx) % snap.grid_w, (hy + dy) % snap.grid_h)
        if nxt not in body:
            out.append(d)
    return out

class RandomPolicy:
    """Uniform over safe headings; keeps going straight if nothing is safe."""
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def act(self, snap: Snapshot) -> Optional[Direction]:
        moves = safe_moves(snap)
        return self.rng.choice(moves) if moves else None

class GreedyPolicy:
    """Heads for the nearest food on the torus, among safe headings."""
    def act(self, snap: Snapshot) -> Optional[Direction]:
        moves = safe_moves(snap)
        if not moves:
            return None
        foods = [c.position for c in snap.collectibles if c.is_food] or \
                [c.position for c in snap.collectibles]
        if not foods:
            return moves[0]
        w, h = snap.grid_w, snap.grid_h
        hx, hy = snap.head

        def score(d: Direction) -> int:
            dx, dy = d.vec
            nxt = ((hx + dx) % w, (hy + dy) % h)
            return min(torus_dist(nxt, f, w, h) for f in foods)

        return min(moves, key=score)
