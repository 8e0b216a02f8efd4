"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x2 - x1, y2 - y1)


def unit_vector(angle: float) -> Tuple[float, float]:
    """Unit vector for an angle in radians"""
    return math.cos(angle), math.sin(angle)


def make_rng(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> random.Random:
    """Return the given generator, or a new one seeded with `seed`"""
    if rng is not None:
        return rng
    return random.Random(seed)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
