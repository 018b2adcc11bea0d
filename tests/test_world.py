import random
import unittest
from unittest.mock import patch

import config
from config import (
    COIN_SIZE, GRAVITY, INITIAL_RANDOM_STEPS, JUMP_POWER, SCATTERED_COINS,
    TUTORIAL_FRONTIER,
)
from entities import BLOCK, GROUND, RANDOM_KINDS
from world import TUTORIAL_LAYOUT, WorldGenerator, WorldState, jump_apex


class ScriptedRng:
    """random() replays ``values`` then returns 0.99; choice() picks the first item."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0) if self.values else 0.99

    def choice(self, seq):
        return seq[0]


class InitialWorldTests(unittest.TestCase):
    def setUp(self):
        self.world = WorldGenerator(random.Random(42)).build_initial()

    def test_tutorial_layout_comes_first(self):
        self.assertEqual(tuple(self.world.platforms[:5]), TUTORIAL_LAYOUT)
        doors = [p.door for p in self.world.platforms[1:5]]
        self.assertEqual(doors, ["about", "skills", "experience", "projects"])
        self.assertEqual([p.x for p in self.world.platforms[1:5]], [250, 420, 620, 840])

    def test_single_wide_ground_at_origin(self):
        grounds = [p for p in self.world.platforms if p.kind == GROUND]
        self.assertEqual(len(grounds), 1)
        self.assertEqual(grounds[0].x, 0)
        self.assertEqual(grounds[0].width, 600)

    def test_doors_within_single_jump(self):
        ground = self.world.platforms[0]
        apex = jump_apex(JUMP_POWER, GRAVITY)
        self.assertAlmostEqual(apex, 160.0)
        for p in self.world.platforms[1:5]:
            with self.subTest(door=p.door):
                self.assertLess(ground.y - p.y, apex)

    def test_randomised_steps_follow_bounds(self):
        randoms = self.world.platforms[5:]
        self.assertEqual(len(randoms), INITIAL_RANDOM_STEPS)
        previous_right = TUTORIAL_FRONTIER
        for p in randoms:
            with self.subTest(x=p.x):
                gap = p.x - previous_right
                self.assertGreaterEqual(gap, 100)
                self.assertLess(gap, 200)
                self.assertGreaterEqual(p.y, 350)
                self.assertLess(p.y, 470)
                self.assertGreaterEqual(p.width, 90)
                self.assertLess(p.width, 160)
                self.assertEqual(p.height, 30)
                self.assertIn(p.kind, RANDOM_KINDS)
                self.assertIsNone(p.door)
            previous_right = p.right
        self.assertEqual(self.world.frontier_x, previous_right)

    def test_platforms_sorted_by_x(self):
        xs = [p.x for p in self.world.platforms]
        self.assertEqual(xs, sorted(xs))

    def test_scattered_coins_and_clouds(self):
        self.assertGreaterEqual(len(self.world.coins), SCATTERED_COINS)
        self.assertEqual(len(self.world.clouds), 15)
        self.assertFalse(any(c.collected for c in self.world.coins))

    def test_same_seed_same_world(self):
        other = WorldGenerator(random.Random(42)).build_initial()
        self.assertEqual(other.platforms, self.world.platforms)
        self.assertEqual([(c.x, c.y) for c in other.coins],
                         [(c.x, c.y) for c in self.world.coins])


class StepTests(unittest.TestCase):
    def test_step_places_both_coins(self):
        # gap, y, width, coin-above roll, arc-coin roll
        gen = WorldGenerator(ScriptedRng([0.5, 0.5, 0.5, 0.1, 0.1]))
        world = WorldState(frontier_x=1000.0)
        platform = gen.step(world)

        self.assertEqual(platform.x, 1150.0)
        self.assertEqual(platform.y, 410.0)
        self.assertEqual(platform.width, 125.0)
        self.assertEqual(platform.kind, BLOCK)
        self.assertEqual(world.frontier_x, 1275.0)

        above, arc = world.coins
        self.assertEqual((above.x, above.y), (1150 + 62.5 - COIN_SIZE / 2, 360.0))
        self.assertEqual((arc.x, arc.y), (1150 - 75 - COIN_SIZE / 2, 340.0))

    def test_coin_above_stays_inside_a_weak_jump(self):
        # apex = 8 * 8 / 1.6 = 40, so the coin sits COIN_SIZE below it
        gen = WorldGenerator(ScriptedRng([0.5, 0.5, 0.5, 0.1, 0.9]), jump_power=-8.0, gravity=0.8)
        world = WorldState(frontier_x=1000.0)
        platform = gen.step(world)
        (coin,) = world.coins
        self.assertAlmostEqual(platform.y - coin.y, jump_apex(-8.0, 0.8) - COIN_SIZE)
        self.assertEqual(WorldGenerator(ScriptedRng([])).coin_lift, 50)

    def test_no_arc_coin_for_short_gap(self):
        # gap = 100 + 0.1 * 100 = 110 <= 120
        gen = WorldGenerator(ScriptedRng([0.1, 0.5, 0.5, 0.9, 0.0]))
        world = WorldState(frontier_x=0.0)
        gen.step(world)
        self.assertEqual(world.coins, [])

    def test_frontier_never_moves_back(self):
        world = WorldState(frontier_x=500.0)
        with self.assertRaises(ValueError):
            world.advance_frontier(499.0)


class EnsureGeneratedTests(unittest.TestCase):
    def setUp(self):
        self.gen = WorldGenerator(random.Random(3))
        self.world = self.gen.build_initial()

    def test_extends_past_viewport_plus_margin(self):
        before = self.world.frontier_x
        added = self.gen.ensure_generated(self.world, 50000.0, 1280)
        self.assertGreater(added, 0)
        self.assertEqual(added % 3, 0)
        self.assertGreaterEqual(self.world.frontier_x, 50000.0 + 1280 + 500)
        self.assertGreater(self.world.frontier_x, before)

    def test_noop_when_far_enough(self):
        frontier = self.world.frontier_x
        self.assertEqual(self.gen.ensure_generated(self.world, 0.0, 1280), 0)
        self.assertEqual(self.world.frontier_x, frontier)

    def test_frontier_monotonic_over_camera_sweep(self):
        last = self.world.frontier_x
        for offset in range(0, 20000, 250):
            self.gen.ensure_generated(self.world, float(offset), 1280)
            self.assertGreaterEqual(self.world.frontier_x, last)
            self.assertGreaterEqual(self.world.frontier_x, offset + 1280)
            last = self.world.frontier_x

    def test_rejects_bad_viewport(self):
        with self.assertRaises(ValueError):
            self.gen.ensure_generated(self.world, 0.0, 0)

    def test_generation_logged_only_when_enabled(self):
        with patch.object(config, "LOG_ENABLED", False), patch("world.log_debug") as log:
            self.assertGreater(self.gen.ensure_generated(self.world, 50000.0, 1280), 0)
        log.assert_not_called()
        with patch.object(config, "LOG_ENABLED", True), patch("world.log_debug") as log:
            self.assertGreater(self.gen.ensure_generated(self.world, 90000.0, 1280), 0)
        log.assert_called_once()


class CloudTests(unittest.TestCase):
    def test_clouds_refilled_ahead_and_pruned_behind(self):
        gen = WorldGenerator(random.Random(9))
        world = gen.build_initial()
        # parallax view starts at 10000 * 0.5: every initial cloud is behind
        gen.update_clouds(world, 10000.0, 1280)
        self.assertEqual(len(world.clouds), 1)
        self.assertGreaterEqual(world.clouds[0].x, 5000.0 + 1280)

    def test_no_new_cloud_at_target(self):
        gen = WorldGenerator(random.Random(9))
        world = gen.build_initial()
        for _ in range(10):
            gen.update_clouds(world, 0.0, 1280)
        self.assertEqual(len(world.clouds), 20)


if __name__ == "__main__":
    unittest.main()
