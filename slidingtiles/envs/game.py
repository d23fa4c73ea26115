"""Sliding-tile game: one board, one random source, one turn per directional input."""

import logging
from collections.abc import Mapping
from typing import NamedTuple

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from slidingtiles.config import GameConfig
from slidingtiles.core.direction import Direction
from slidingtiles.core.engine import legal_directions, move
from slidingtiles.core.grid import Cell, Grid
from slidingtiles.core.spawn import spawn_tile
from slidingtiles.utils.keys import key_to_direction

_logger = logging.getLogger(__name__)


class TurnResult(NamedTuple):
    """
    Outcome of one turn.

    Attributes
    ----------
    grid : Grid
        Snapshot of the board after the turn, spawn included.
    changed : bool
        True if the move changed the board.
    spawned : tuple[Cell, int] or None
        Cell and value of the new tile, None when nothing was spawned.
    """

    grid: Grid
    changed: bool
    spawned: tuple[Cell, int] | None = None


class SlidingTiles:
    """
    Sliding-tile game.

    This class owns the grid state and the random source of a single game. Several instances can run side by
    side without sharing anything.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None, rng: Generator | None = None):
        """
        Initialize the game and place the seed tile.

        Parameters
        ----------
        config : GameConfig, optional
            Board size and spawn distribution (default is a 4x4 board spawning 2 with probability 0.9).
        seed : int, optional
            Seed of the random source, ignored if ``rng`` is given.
        rng : Generator, optional
            Random source used for every spawn.
        """
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else self._make_rng(seed)
        self._grid = Grid(size=self.config.size)

        self.reset()

    @staticmethod
    def _make_rng(seed: int | None) -> Generator:
        return default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    @property
    def size(self) -> int:
        """Side of the board."""
        return self.config.size

    @property
    def grid(self) -> Grid:
        """Copy of the current grid state."""
        return self._grid.copy()

    @property
    def observation(self) -> ndarray:
        """
        Get the current state of the board.

        Returns
        -------
        ndarray
            The board as a 2D array indexed as ``board[row, col]``, 0 meaning empty.
        """
        return self._grid.to_array()

    @property
    def legal_directions(self) -> list[Direction]:
        """Directions that would change the board."""
        return legal_directions(self._grid)

    def snapshot(self) -> list[tuple[Cell, int]]:
        """
        Read-only enumeration of the occupied cells, sufficient to redraw the whole board.

        Returns
        -------
        list[tuple[Cell, int]]
            (cell, value) pairs in row-major order.
        """
        return self._grid.items()

    def reset(self, seed: int | None = None) -> Grid:
        """
        Start a new game on an empty board holding a single seed tile.

        Parameters
        ----------
        seed : int, optional
            If given, replace the random source with a generator seeded with it.

        Returns
        -------
        Grid
            Copy of the new grid state.
        """
        if seed is not None:
            self._rng = self._make_rng(seed)

        self._grid = Grid(size=self.config.size)
        spawn_tile(self._grid, self._rng, self.config.two_probability)

        _logger.info('New %dx%d game, seed tile %s', self.size, self.size, self._grid.items())
        return self.grid

    def load(self, tiles: Mapping[Cell, int]) -> Grid:
        """
        Replace the board with the given tiles.

        Parameters
        ----------
        tiles : Mapping[Cell, int]
            Occupied cells and their values.

        Returns
        -------
        Grid
            Copy of the new grid state.
        """
        self._grid = Grid(size=self.config.size, tiles=tiles)
        return self.grid

    def step(self, direction: Direction) -> TurnResult:
        """
        Play one turn in the given direction.

        Parameters
        ----------
        direction : Direction
            Direction to push the tiles.

        Returns
        -------
        TurnResult
            The board after the turn, whether the move changed it, and the spawned tile if any.

        Notes
        -----
        - The next state is computed apart, then replaces the current one in a single assignment.
        - A move that changes nothing spawns no tile.
        """
        result = move(self._grid, direction)
        if not result.changed:
            _logger.debug('Move %s changed nothing', direction.name)
            return TurnResult(grid=self.grid, changed=False)

        next_grid = result.grid
        spawned = spawn_tile(next_grid, self._rng, self.config.two_probability)
        self._grid = next_grid

        _logger.debug('Move %s: %d merge(s), spawned %s', direction.name, result.merges, spawned)
        return TurnResult(grid=self.grid, changed=True, spawned=spawned)

    def handle_key(self, key: str | None) -> TurnResult | None:
        """
        Play the turn bound to a key.

        Parameters
        ----------
        key : str or None
            Key identifier as reported by the platform.

        Returns
        -------
        TurnResult or None
            The turn result, or None if the key is not bound to a direction.
        """
        _logger.debug('Key pressed: %s', key)
        direction = key_to_direction(key)
        if direction is None:
            return None
        return self.step(direction)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self.observation.tolist():
            print(' \t'.join(map(str, row)))
