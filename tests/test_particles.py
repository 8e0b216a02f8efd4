"""Tests for the particle system."""

import math

import pytest

from game.survive.particles import ParticleSystem


@pytest.fixture
def system(rng):
    return ParticleSystem(rng)


class TestSpawnBurst:
    def test_burst_properties(self, system):
        particles = []
        system.spawn_burst(particles, 10.0, 20.0)

        assert len(particles) == 20
        for p in particles:
            assert (p.x, p.y) == (10.0, 20.0)
            assert p.opacity == 1.0
            assert 2.0 - 1e-9 <= math.hypot(p.vx, p.vy) <= 5.0 + 1e-9
            assert 5.0 <= p.scale <= 15.0
            assert 0.0 <= p.rotation <= 360.0

    def test_custom_count(self, system):
        particles = []
        system.spawn_burst(particles, 0.0, 0.0, count=3)
        assert len(particles) == 3

    def test_cap_drops_oldest(self, system):
        particles = []
        for _ in range(5):
            system.spawn_burst(particles, 0.0, 0.0)
        oldest_ids = {p.id for p in particles[:20]}

        system.spawn_burst(particles, 1.0, 1.0)

        assert len(particles) == 100
        assert all(p.x == 1.0 for p in particles[-20:])
        assert not oldest_ids & {p.id for p in particles}


class TestAdvance:
    def test_single_step(self, system):
        particles = []
        system.spawn_burst(particles, 0.0, 0.0, count=1)
        p = particles[0]
        vx, vy, scale, rotation = p.vx, p.vy, p.scale, p.rotation

        system.advance(particles)

        assert (p.x, p.y) == pytest.approx((vx, vy))
        assert p.opacity == pytest.approx(0.95)
        assert p.scale == pytest.approx(scale * 0.95)
        assert p.rotation == pytest.approx(rotation + 5.0)

    def test_opacity_strictly_decreases_until_removed(self, system):
        particles = []
        system.spawn_burst(particles, 0.0, 0.0)

        previous = {p.id: p.opacity for p in particles}
        for _ in range(25):
            system.advance(particles)
            for p in particles:
                assert p.opacity < previous[p.id]
                assert p.opacity > 0
                previous[p.id] = p.opacity

        assert particles == []

    def test_advance_keeps_list_identity(self, system):
        particles = []
        system.spawn_burst(particles, 0.0, 0.0)
        before = particles
        system.advance(particles)
        assert particles is before
