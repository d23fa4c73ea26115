"""
Tests for the spawn policy: placement, value distribution and exhaustion.
"""

from collections import Counter
from unittest import TestCase, main

from numpy.random import default_rng

from slidingtiles.core.grid import Grid
from slidingtiles.core.spawn import TILE_SPAWN_PROBS, draw_empty_cell, draw_value, spawn_tile


class TestSpawnPlacement(TestCase):
    """Test where new tiles land."""

    def test_spawn_one_tile_on_empty_cell(self):
        """Exactly one tile of value 2 or 4 appears on a previously empty cell."""
        grid = Grid(tiles={(0, 0): 2, (1, 0): 4})
        spawned = spawn_tile(grid, default_rng(0))

        self.assertIsNotNone(spawned)
        cell, value = spawned
        self.assertNotIn(cell, {(0, 0), (1, 0)})
        self.assertIn(value, (2, 4))
        self.assertEqual(grid.get(cell), value)
        self.assertEqual(len(grid), 3)

    def test_full_grid_spawns_nothing(self):
        """A full grid reports no spawn and is left untouched."""
        tiles = {(index % 4, index // 4): 2 ** (index + 1) for index in range(16)}
        grid = Grid(tiles=tiles)

        with self.assertLogs('slidingtiles.core.spawn', level='WARNING'):
            self.assertIsNone(spawn_tile(grid, default_rng(0)))
        self.assertEqual(grid, Grid(tiles=tiles))
        self.assertIsNone(draw_empty_cell(grid, default_rng(0)))

    def test_single_empty_cell_found(self):
        """The only empty cell is always chosen."""
        for seed in range(20):
            tiles = {(index % 4, index // 4): 2 ** (index + 1) for index in range(16) if index != 9}
            grid = Grid(tiles=tiles)
            cell, _ = spawn_tile(grid, default_rng(seed))
            self.assertEqual(cell, (1, 2))
            self.assertTrue(grid.is_full)

    def test_uniform_over_cells(self):
        """Every empty cell of an empty board gets picked."""
        rng = default_rng(3)
        counts = Counter(draw_empty_cell(Grid(size=4), rng) for _ in range(1600))

        self.assertEqual(len(counts), 16)
        self.assertTrue(all(50 < count < 150 for count in counts.values()))

    def test_seed_reproducibility(self):
        """The same seed produces the same spawn sequence."""
        sequences = []
        for _ in range(2):
            rng = default_rng(42)
            grid = Grid(size=4)
            sequences.append([spawn_tile(grid, rng) for _ in range(10)])

        self.assertEqual(sequences[0], sequences[1])


class TestSpawnValues(TestCase):
    """Test the value distribution of new tiles."""

    def test_default_probabilities(self):
        """Default distribution is 90% twos, 10% fours."""
        self.assertEqual(TILE_SPAWN_PROBS, {2: 0.9, 4: 0.1})

    def test_distribution(self):
        """Over many draws the proportion of fours converges to 10%."""
        rng = default_rng(2024)
        draws = Counter(draw_value(rng) for _ in range(10_000))

        self.assertEqual(set(draws), {2, 4})
        self.assertAlmostEqual(draws[4] / 10_000, 0.1, delta=0.02)
        self.assertAlmostEqual(draws[2] / 10_000, 0.9, delta=0.02)

    def test_custom_probability(self):
        """A probability of 1 for twos never draws a four."""
        rng = default_rng(5)
        self.assertTrue(all(draw_value(rng, two_probability=1.0) == 2 for _ in range(500)))
        self.assertTrue(all(draw_value(rng, two_probability=0.0) == 4 for _ in range(500)))


if __name__ == '__main__':
    main()
