"""
Spawn policy: place one new tile on a random empty cell after a turn that changed the board.
"""

import logging

from numpy.random import Generator

from slidingtiles.core.grid import Cell, Grid

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Rejection sampling draws per cell of the board before falling back to a direct draw.
_ATTEMPTS_PER_CELL = 4

_logger = logging.getLogger(__name__)


def draw_value(rng: Generator, two_probability: float = TILE_SPAWN_PROBS[2]) -> int:
    """
    Draw the value of a new tile.

    Parameters
    ----------
    rng : Generator
        Random source.
    two_probability : float, optional
        Probability of drawing a 2, otherwise a 4 (default is 0.9).

    Returns
    -------
    int
        Either 2 or 4.
    """
    return int(rng.choice([2, 4], p=[two_probability, 1.0 - two_probability]))


def draw_empty_cell(grid: Grid, rng: Generator) -> Cell | None:
    """
    Pick a uniformly random empty cell by rejection sampling.

    Parameters
    ----------
    grid : Grid
        The grid to inspect.
    rng : Generator
        Random source.

    Returns
    -------
    Cell or None
        A random empty cell, or None when the grid is full.

    Notes
    -----
    - Sampling stops after ``4 * size**2`` occupied draws and picks directly among the enumerated
      empty cells, so the loop is bounded even on an almost full board.
    - Both strategies are uniform over the empty cells.
    """
    if grid.is_full:
        return None

    for _ in range(_ATTEMPTS_PER_CELL * grid.size * grid.size):
        col, row = rng.integers(0, grid.size, size=2)
        cell = (int(col), int(row))
        if cell not in grid:
            return cell

    empty = grid.empty_cells()
    return empty[int(rng.integers(len(empty)))]


def spawn_tile(grid: Grid, rng: Generator, two_probability: float = TILE_SPAWN_PROBS[2]) -> tuple[Cell, int] | None:
    """
    Add exactly one new tile to a random empty cell.

    Parameters
    ----------
    grid : Grid
        The grid to fill. **Modified in-place.**
    rng : Generator
        Random source.
    two_probability : float, optional
        Probability of spawning a 2, otherwise a 4 (default is 0.9).

    Returns
    -------
    tuple[Cell, int] or None
        The cell and value of the new tile, or None if the grid had no empty cell.
    """
    cell = draw_empty_cell(grid, rng)
    if cell is None:
        _logger.warning('No empty cell left on a %dx%d grid, no tile spawned', grid.size, grid.size)
        return None

    value = draw_value(rng, two_probability)
    grid.set(cell, value)
    _logger.debug('Spawned %d at %s', value, cell)
    return cell, value
