"""Tests for the spawn scheduler."""

import pytest

from game.survive.entities import Enemy, Viewport
from game.survive.spawner import SpawnScheduler
from game.survive.state import GameState
from game.survive.waves import create_wave


@pytest.fixture
def state():
    s = GameState(viewport=Viewport(800, 600))
    s.wave_number = 1
    s.wave = create_wave(1)
    return s


@pytest.fixture
def spawner(clock, rng):
    return SpawnScheduler(clock, rng)


def _on_edge(enemy):
    return (
        (enemy.y == -50 and 0 <= enemy.x <= 800)
        or (enemy.y == 650 and 0 <= enemy.x <= 800)
        or (enemy.x == -50 and 0 <= enemy.y <= 600)
        or (enemy.x == 850 and 0 <= enemy.y <= 600)
    )


class TestSpawn:
    def test_spawns_outside_an_edge(self, spawner, state):
        enemy = spawner.spawn(state)

        assert state.enemies == [enemy]
        assert _on_edge(enemy)
        assert enemy.speed == pytest.approx(3.5)
        assert enemy.health == 1
        assert state.wave.enemies_remaining == 5

    def test_no_spawn_while_enemy_alive(self, spawner, state):
        spawner.spawn(state)
        assert spawner.spawn(state) is None
        assert len(state.enemies) == 1
        assert state.wave.enemies_remaining == 5

    def test_uses_all_four_edges(self, spawner, state):
        sides = set()
        for _ in range(200):
            state.enemies.clear()
            state.wave.enemies_remaining = 10
            enemy = spawner.spawn(state)
            assert _on_edge(enemy)
            if enemy.y == -50:
                sides.add("top")
            elif enemy.x == 850:
                sides.add("right")
            elif enemy.y == 650:
                sides.add("bottom")
            else:
                sides.add("left")
        assert sides == {"top", "right", "bottom", "left"}

    @pytest.mark.parametrize("wave_number, health", [(1, 1), (2, 2), (3, 3), (9, 3)])
    def test_health_follows_wave(self, spawner, state, wave_number, health):
        state.wave_number = wave_number
        state.wave = create_wave(wave_number)
        assert spawner.spawn(state).health == health

    def test_exhausted_wave_completes_and_disarms(self, spawner, state):
        spawner.arm(state)
        state.wave.enemies_remaining = 0

        assert spawner.spawn(state) is None
        assert state.is_wave_complete
        assert not spawner.armed

        # Idempotent
        spawner.spawn(state)
        assert state.is_wave_complete

    def test_exhausted_wave_with_enemy_alive_is_not_complete(self, spawner, state):
        state.wave.enemies_remaining = 0
        state.enemies.append(Enemy(x=0.0, y=0.0, speed=1.0))

        spawner.spawn(state)
        assert not state.is_wave_complete


class TestArm:
    def test_fires_on_wave_interval(self, spawner, state, clock):
        spawner.arm(state)

        clock.advance(1.0)
        assert state.enemies == []

        clock.advance(0.5)
        assert len(state.enemies) == 1

    def test_never_more_than_one_enemy(self, spawner, state, clock):
        spawner.arm(state)
        for _ in range(20):
            clock.advance(state.wave.spawn_interval)
            assert len(state.enemies) <= 1
        assert state.wave.enemies_remaining == 5

    def test_disarm(self, spawner, state, clock):
        spawner.arm(state)
        spawner.disarm()
        clock.advance(10.0)
        assert state.enemies == []
