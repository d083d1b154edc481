"""
Tests for obstacle spawning, scrolling and pruning.
"""

import random

import pytest

from spikehop.domain.config import GameConfig
from spikehop.domain.obstacles import ObstacleField


class TestSpawn:
    def test_single_spawn_at_right_edge(self, config, scripted_rng):
        field = ObstacleField(config, scripted_rng(randoms=[0.5]))
        spawned = field.spawn()

        assert len(spawned) == 1
        o = spawned[0]
        assert o.x == 760
        assert o.y == 360
        assert o.size == 40
        assert field.obstacles == spawned

    def test_probability_boundary_is_single(self, config, scripted_rng):
        field = ObstacleField(config, scripted_rng(randoms=[0.3]))
        assert len(field.spawn()) == 1

    def test_group_of_two(self, config, scripted_rng):
        field = ObstacleField(config, scripted_rng(randoms=[0.1], ints=[2]))
        assert [o.x for o in field.spawn()] == [760, 800]

    def test_group_of_three(self, config, scripted_rng):
        field = ObstacleField(config, scripted_rng(randoms=[0.1], ints=[3]))
        assert [o.x for o in field.spawn()] == [760, 780, 800]

    def test_spawns_append_in_order(self, config, scripted_rng):
        field = ObstacleField(config, scripted_rng(randoms=[0.5, 0.1], ints=[2]))
        field.spawn()
        field.tick()
        field.spawn()

        assert [o.x for o in field] == [757, 760, 800]

    def test_group_invariant_with_real_rng(self, config):
        field = ObstacleField(config, random.Random(42))
        groups = 0
        for _ in range(500):
            spawned = field.spawn()
            assert len(spawned) in (1, 2, 3)
            if len(spawned) > 1:
                groups += 1
                gap = config.obstacle_size / (len(spawned) - 1)
                assert spawned[0].x == config.width - config.obstacle_size
                for i, o in enumerate(spawned):
                    assert o.x == pytest.approx(spawned[0].x + i * gap)
            field.clear()

        assert 0 < groups < 500

    def test_never_groups_with_zero_probability(self):
        field = ObstacleField(GameConfig(spike_group_probability=0.0), random.Random(7))
        for _ in range(100):
            assert len(field.spawn()) == 1

    def test_clear(self, config, singles_only):
        field = ObstacleField(config, singles_only)
        field.spawn()
        field.spawn()
        field.clear()
        assert len(field) == 0


class TestTick:
    def test_moves_by_speed_each_tick(self, config, scripted_rng):
        field = ObstacleField(config, scripted_rng(randoms=[0.1], ints=[3]))
        field.spawn()

        prev = [o.x for o in field]
        for _ in range(100):
            field.tick()
            now = [o.x for o in field]
            assert now == [x - config.obstacle_speed for x in prev]
            prev = now

    def test_right_edge_at_zero_is_kept(self, singles_only):
        config = GameConfig(obstacle_speed=4.0)
        field = ObstacleField(config, singles_only)
        field.spawn()

        # 760 -> -40 in 200 ticks
        for _ in range(200):
            field.tick()
        assert [o.x for o in field] == [-40]

        removed = field.tick()
        assert len(field) == 0
        assert [o.x for o in removed] == [-44]

    def test_removes_all_offscreen_in_one_tick(self, config, singles_only):
        field = ObstacleField(config, singles_only)
        for _ in range(5):
            field.spawn()

        for _ in range(266):
            field.tick()
        assert len(field) == 5

        removed = field.tick()
        assert len(removed) == 5
        assert len(field) == 0

    def test_survivor_after_removed_run_is_not_skipped(self, config, singles_only):
        field = ObstacleField(config, singles_only)
        field.spawn()
        field.spawn()
        for _ in range(100):
            field.tick()
        field.spawn()

        for _ in range(167):
            field.tick()

        # Both early ones gone, the late one moved every tick.
        assert [o.x for o in field] == [760 - 167 * 3]
