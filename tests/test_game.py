"""Tests for the game orchestrator."""

import pytest

from game.survive.game import Game
from game.survive.waves import create_wave

from tests.conftest import add_enemy


class TestStart:
    def test_fresh_session(self, game):
        s = game.state
        assert s.wave_number == 1
        assert s.enemies_remaining == 6
        assert s.health == 100
        assert s.score == 0
        assert s.combo_multiplier == 1
        assert s.is_playing
        assert not s.game_over
        assert not s.is_wave_complete
        assert s.enemies == []
        assert s.particles == []

    def test_first_spawn_after_interval(self, game):
        game.advance_time(1.0)
        assert game.state.enemies == []

        game.advance_time(1.0)
        assert len(game.state.enemies) == 1
        assert game.state.enemies_remaining == 5

    def test_restart_after_game_over(self, game):
        game.state.health = 10
        add_enemy(game, 459.0, 300.0, speed=3.0)
        game.tick()
        assert game.state.game_over

        game.start()
        s = game.state
        assert s.is_playing and not s.game_over
        assert s.health == 100
        assert s.wave_number == 1
        assert s.particles == []

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            Game(particle_interval=0)
        with pytest.raises(ValueError):
            Game(next_wave_delay=-1.0)


class TestIdle:
    def test_commands_before_start_are_noops(self, idle_game):
        enemy = add_enemy(idle_game, 450.0, 300.0)
        idle_game.tick()
        assert (enemy.x, enemy.y) == (450.0, 300.0)
        assert idle_game.defend() == 0
        assert idle_game.state.score == 0
        assert idle_game.state.enemies == [enemy]


class TestTick:
    def test_enemy_moves_toward_center(self, game):
        enemy = add_enemy(game, 0.0, 300.0, speed=3.0)
        game.tick()
        assert enemy.x == pytest.approx(3.0)
        assert enemy.y == pytest.approx(300.0)
        assert game.state.health == 100

    def test_collision_damages_and_removes(self, game):
        add_enemy(game, 459.0, 300.0, speed=3.0)
        game.tick()

        s = game.state
        assert s.health == 90
        assert s.enemies == []
        assert len(s.particles) == 20
        assert s.breaches == 1
        assert not s.game_over

    def test_enemy_on_target_collides(self, game):
        add_enemy(game, 400.0, 300.0, speed=3.0)
        game.tick()
        assert game.state.health == 90
        assert game.state.enemies == []

    def test_one_collision_per_tick(self, game):
        add_enemy(game, 450.0, 300.0)
        second = add_enemy(game, 400.0, 350.0)

        game.tick()
        assert game.state.health == 90
        assert game.state.enemies == [second]
        assert second.y == 350.0

        game.tick()
        assert game.state.health == 80
        assert game.state.enemies == []

    def test_shockwave_decays(self, game):
        add_enemy(game, 0.0, 0.0)
        game.defend()
        assert game.state.shockwave == 100

        game.tick()
        assert game.state.shockwave == 99

    def test_wave_complete_flag(self, game):
        game.state.wave.enemies_remaining = 0
        game.tick()
        assert game.state.is_wave_complete

    def test_wave_not_complete_while_enemy_alive(self, game):
        game.state.wave.enemies_remaining = 0
        add_enemy(game, 0.0, 0.0)
        game.tick()
        assert not game.state.is_wave_complete

    def test_range_measured_before_moving(self, game):
        # 61 units out: moves to 58 this tick, collides on the next
        enemy = add_enemy(game, 461.0, 300.0, speed=3.0)
        game.tick()
        assert game.state.health == 100
        assert game.state.enemies == [enemy]
        assert enemy.x == pytest.approx(458.0)

        game.tick()
        assert game.state.health == 90
        assert game.state.enemies == []

    def test_burst_at_position_before_move(self, game):
        add_enemy(game, 459.0, 300.0, speed=3.0)
        game.tick()

        particles = game.state.particles
        assert len(particles) == 20
        assert all(p.x == 459.0 and p.y == 300.0 for p in particles)


class TestGameOver:
    def test_lethal_collision_ends_game(self, game):
        game.state.health = 10
        add_enemy(game, 459.0, 300.0, speed=3.0)
        game.tick()

        s = game.state
        assert s.health == 0
        assert s.game_over
        assert not s.is_playing
        assert game.clock.pending() == 0
        assert not game.spawner.armed

    def test_no_mutation_after_game_over(self, game):
        game.state.health = 10
        add_enemy(game, 459.0, 300.0, speed=3.0)
        game.tick()
        opacities = [p.opacity for p in game.state.particles]

        enemy = add_enemy(game, 100.0, 300.0)
        game.tick()
        game.advance_particles()
        game.advance_time(5.0)

        assert (enemy.x, enemy.y) == (100.0, 300.0)
        assert [p.opacity for p in game.state.particles] == opacities
        assert game.defend() == 0
        assert game.state.enemies == [enemy]

    def test_health_never_negative(self, game):
        game.state.health = 5
        add_enemy(game, 459.0, 300.0, speed=3.0)
        game.tick()
        assert game.state.health == 0
        assert game.state.game_over


class TestDefend:
    def test_no_enemies_is_noop(self, game):
        assert game.defend() == 0
        s = game.state
        assert s.score == 0
        assert s.combo_multiplier == 1
        assert s.enemies == []
        assert s.shockwave == 0

    def test_scores_and_clears(self, game):
        for x in (0.0, 100.0, 200.0):
            add_enemy(game, x, 0.0)

        assert game.defend() == 100
        s = game.state
        assert s.score == 100
        assert s.combo_multiplier == 2
        assert s.enemies == []
        assert s.enemies_defeated == 3
        assert len(s.particles) == 60

    def test_particles_capped(self, game):
        for x in range(6):
            add_enemy(game, float(x), 0.0)
        game.defend()
        assert len(game.state.particles) == 100

    def test_wave_three_with_combo(self, game):
        s = game.state
        s.wave_number = 3
        s.wave = create_wave(3)
        s.combo_multiplier = 2
        add_enemy(game, 0.0, 0.0)

        assert game.defend() == 600
        assert s.score == 600
        assert s.combo_multiplier == 3

    def test_combo_capped_at_eight(self, game):
        for _ in range(10):
            add_enemy(game, 0.0, 0.0)
            game.defend()

        assert game.state.combo_multiplier == 8
        assert game.state.score == 100 * (sum(range(1, 9)) + 8 + 8)

    def test_mid_wave_defend_does_not_advance(self, game):
        add_enemy(game, 0.0, 0.0)
        game.defend()
        game.advance_time(3.0)
        assert game.state.wave_number == 1


class TestNextWave:
    def _clear_last_enemy(self, game):
        game.state.wave.enemies_remaining = 0
        add_enemy(game, 0.0, 0.0)
        game.defend()

    def test_starts_after_delay(self, game):
        self._clear_last_enemy(game)

        game.advance_time(1.0)
        assert game.state.wave_number == 1

        game.advance_time(1.0)
        s = game.state
        assert s.wave_number == 2
        assert s.enemies_remaining == 7
        assert not s.is_wave_complete
        assert game.spawner.armed

    def test_manual_start_replaces_pending_wave(self, game):
        self._clear_last_enemy(game)
        game.start_new_wave()
        assert game.state.wave_number == 2

        game.advance_time(2.0)
        assert game.state.wave_number == 2

    def test_cancelled_by_restart(self, game):
        self._clear_last_enemy(game)
        stale = game._next_wave_task

        game.start()
        stale.func()
        game.advance_time(2.0)
        assert game.state.wave_number == 1

    def test_cancelled_by_game_over(self, game):
        self._clear_last_enemy(game)
        game.end_game()
        game.advance_time(2.0)
        assert game.state.wave_number == 1

    def test_stalls_without_auto_advance(self, game):
        game.state.wave.enemies_remaining = 0
        game.tick()
        game.advance_time(5.0)
        game.tick()
        assert game.state.wave_number == 1
        assert game.state.is_wave_complete

    def test_auto_advance_after_breach(self):
        game = Game(seed=1, auto_advance=True)
        game.start()
        game.state.wave.enemies_remaining = 0
        game.tick()
        assert game.state.is_wave_complete

        game.advance_time(1.5)
        assert game.state.wave_number == 2


class TestEntityIds:
    def _first_enemy_id(self, seed):
        game = Game(seed=seed)
        game.start()
        game.advance_time(5.0)
        return game.state.enemies[0].id

    def test_ids_repeat_across_seeded_games(self):
        first = self._first_enemy_id(7)

        other = Game(seed=99)
        other.start()
        other.advance_time(5.0)
        add_enemy(other, 0.0, 0.0)
        other.defend()

        assert self._first_enemy_id(7) == first

    def test_restart_resets_ids(self, game):
        game.advance_time(5.0)
        first = game.state.enemies[0].id
        game.defend()
        assert all(p.id > first for p in game.state.particles)

        game.start()
        game.advance_time(5.0)
        assert game.state.enemies[0].id == first


class TestViewport:
    def test_custom_target(self, game):
        game.set_viewport(200, 200, target=(0.0, 0.0))
        enemy = add_enemy(game, 100.0, 0.0, speed=5.0)
        game.tick()
        assert enemy.x == pytest.approx(95.0)

    def test_default_target_is_center(self, game):
        game.set_viewport(1000, 500)
        assert game.state.viewport.target == (500.0, 250.0)

    def test_invalid_viewport(self, game):
        with pytest.raises(ValueError):
            game.set_viewport(0, 100)


class TestSnapshot:
    def test_snapshot_is_a_copy(self, game):
        add_enemy(game, 10.0, 10.0)
        snap = game.snapshot()

        assert snap["wave_number"] == 1
        assert snap["target"] == (400.0, 300.0)
        snap["enemies"][0].x = 999.0
        assert game.state.enemies[0].x == 10.0


class TestFullRun:
    def test_unattended_run_ends_in_game_over(self):
        game = Game(seed=7, auto_advance=True)
        game.start()

        for _ in range(20000):
            game.update(1 / 60)
            assert len(game.state.enemies) <= 1
            assert len(game.state.particles) <= 100
            assert game.state.health >= 0
            if game.state.game_over:
                break

        s = game.state
        assert s.game_over
        assert s.health == 0
        assert s.breaches == 10
        assert s.wave_number >= 2
