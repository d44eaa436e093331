# neonsnake/viz/particles.py
from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: Tuple[int, int, int]
    radius: float

    def update(self) -> bool:
        """Advance one frame, return False once dead"""
        self.x += self.vx
        self.y += self.vy
        self.life -= 1
        return self.life > 0

class ParticleSystem:
    """Short radial bursts, one frame per update (not tied to the sim clock)."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.particles: List[Particle] = []
        self.rng = rng or random.Random()

    def emit(self, x: float, y: float, color, count: int = 12):
        r = self.rng
        for _ in range(count):
            angle = r.uniform(0, 2 * math.pi)
            speed = r.uniform(0.2, 1.5)
            self.particles.append(Particle(
                x=x, y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                life=r.uniform(20, 40),
                color=color,
                radius=r.uniform(2, 4),
            ))

    def update(self):
        self.particles = [p for p in self.particles if p.update()]

    def clear(self):
        self.particles.clear()

    def __len__(self):
        return len(self.particles)

class ScreenShake:
    def __init__(self, cap: float = 15.0, damping: float = 0.85, rng: Optional[random.Random] = None):
        self.intensity = 0.0
        self.cap = cap
        self.damping = damping
        self.rng = rng or random.Random()

    def trigger(self, intensity: float = 8.0):
        self.intensity = min(self.intensity + intensity, self.cap)

    def offset(self) -> Tuple[int, int]:
        if self.intensity <= 0:
            return (0, 0)
        dx = (self.rng.random() - 0.5) * self.intensity
        dy = (self.rng.random() - 0.5) * self.intensity
        self.intensity *= self.damping
        if self.intensity < 0.1:
            self.intensity = 0.0
        return (int(dx), int(dy))
