"""
Explosion particles: spawned in bursts, decay independently of gameplay.
"""

from __future__ import annotations

import itertools
import math
import random
from typing import Callable, List, Optional

from .entities import Particle
from .utils import unit_vector

OPACITY_DECAY = 0.05
SCALE_DECAY = 0.95
ROTATION_STEP = 5.0


class ParticleSystem:
    """Creates and ages particles stored in a list owned by the game state"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_particles: int = 100,
        burst_size: int = 20,
        speed_range=(2.0, 5.0),
        scale_range=(5.0, 15.0),
    ):
        self.rng = rng or random.Random()
        self.max_particles = max_particles
        self.burst_size = burst_size
        self.speed_range = speed_range
        self.scale_range = scale_range
        self._ids = itertools.count(1)

    def spawn_burst(
        self,
        particles: List[Particle],
        x: float,
        y: float,
        count: Optional[int] = None,
        next_id: Optional[Callable[[], int]] = None,
    ):
        """Append a burst at (x, y), then drop the oldest beyond the cap"""
        if count is None:
            count = self.burst_size
        if next_id is None:
            next_id = lambda: next(self._ids)

        for _ in range(count):
            angle = self.rng.uniform(0.0, 2 * math.pi)
            speed = self.rng.uniform(*self.speed_range)
            dx, dy = unit_vector(angle)
            particles.append(Particle(
                x=x,
                y=y,
                vx=dx * speed,
                vy=dy * speed,
                scale=self.rng.uniform(*self.scale_range),
                opacity=1.0,
                rotation=self.rng.uniform(0.0, 360.0),
                id=next_id(),
            ))

        overflow = len(particles) - self.max_particles
        if overflow > 0:
            del particles[:overflow]

    def advance(self, particles: List[Particle]):
        for p in particles:
            p.x += p.vx
            p.y += p.vy
            p.opacity -= OPACITY_DECAY
            p.scale *= SCALE_DECAY
            p.rotation += ROTATION_STEP

        # In place: the caller's list is the one the state exposes
        particles[:] = [p for p in particles if p.opacity > 0]
