"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Enemy:
    """Enemy that converges on the target point"""
    x: float
    y: float
    speed: float  # units per tick
    size: float = 30.0
    rotation: float = 0.0
    opacity: float = 1.0
    health: int = 1
    id: int = 0


@dataclass
class Particle:
    """Short-lived explosion fragment, no gameplay effect"""
    x: float
    y: float
    vx: float
    vy: float
    scale: float
    opacity: float = 1.0
    rotation: float = 0.0
    id: int = 0


@dataclass
class Wave:
    """Spawn parameters for one wave; only enemies_remaining changes"""
    number: int
    enemies_remaining: int
    enemy_speed: float
    spawn_interval: float  # seconds


@dataclass
class Viewport:
    """Screen bounds and the point enemies converge on"""
    width: float
    height: float
    target_x: Optional[float] = None
    target_y: Optional[float] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")
        if self.target_x is None:
            self.target_x = self.width * 0.5
        if self.target_y is None:
            self.target_y = self.height * 0.5

    @property
    def target(self):
        return self.target_x, self.target_y
