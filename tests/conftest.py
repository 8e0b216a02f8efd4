"""Shared fixtures for the Click-to-Survive test suite."""

import random

import pytest

from game.survive.entities import Enemy
from game.survive.game import Game
from game.survive.scheduler import TaskScheduler


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return TaskScheduler()


@pytest.fixture
def idle_game():
    """800x600 game, target (400, 300), never started"""
    return Game(width=800, height=600, seed=1234)


@pytest.fixture
def game(idle_game):
    idle_game.start()
    return idle_game


def add_enemy(game: Game, x: float, y: float, speed: float = 1.0) -> Enemy:
    """Put an enemy on the board without going through the spawner"""
    enemy = Enemy(x=x, y=y, speed=speed)
    game.state.enemies.append(enemy)
    return enemy
