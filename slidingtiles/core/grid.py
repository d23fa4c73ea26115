"""
Authoritative grid state: a mapping from occupied cells to tile values.
"""

from collections.abc import Iterator, Mapping
from numbers import Integral

from numpy import argwhere, int64, ndarray, zeros

# ##>: A cell is addressed as (column, row), origin in the top-left corner.
Cell = tuple[int, int]


def is_integer(value: object) -> bool:
    """Check if a value is an integer (Python or numpy), booleans excluded."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def is_tile_value(value: int) -> bool:
    """
    Check if a value can be held by a tile.

    Parameters
    ----------
    value : int
        The candidate value.

    Returns
    -------
    bool
        True if the value is an integer power of two greater or equal to 2.
    """
    if not is_integer(value):
        return False
    value = int(value)
    return value >= 2 and value & (value - 1) == 0


class Grid:
    """
    Square board of side ``size`` holding at most one tile per cell.

    Absence of a cell means the cell is empty. The grid does not police the rules of the game, it only
    guarantees that every stored cell is inside the board and every stored value is a valid tile value.

    Parameters
    ----------
    size : int, optional
        Side of the board (default is 4).
    tiles : Mapping[Cell, int], optional
        Initial tiles, copied into the grid.
    """

    __slots__ = ('size', '_tiles')

    def __init__(self, size: int = 4, tiles: Mapping[Cell, int] | None = None):
        if size < 1:
            raise ValueError(f'Grid size must be positive, got {size}')
        self.size = size
        self._tiles: dict[Cell, int] = {}
        for cell, value in (tiles or {}).items():
            self.set(cell, value)

    @classmethod
    def from_array(cls, board: ndarray) -> 'Grid':
        """
        Build a grid from a square array indexed as ``board[row, col]``, 0 meaning empty.

        Parameters
        ----------
        board : ndarray
            Square 2D array of tile values.

        Returns
        -------
        Grid
            The equivalent grid.
        """
        rows, cols = board.shape
        if rows != cols:
            raise ValueError(f'Board must be square, got shape {board.shape}')
        grid = cls(size=rows)
        for row, col in argwhere(board != 0):
            grid.set((int(col), int(row)), int(board[row, col]))
        return grid

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies inside the board."""
        col, row = cell
        return 0 <= col < self.size and 0 <= row < self.size

    def clamp(self, cell: Cell) -> Cell:
        """Clamp both coordinates of a cell to ``[0, size - 1]``."""
        col, row = cell
        upper = self.size - 1
        return min(max(col, 0), upper), min(max(row, 0), upper)

    def get(self, cell: Cell) -> int | None:
        """Return the value at a cell, or None if the cell is empty."""
        return self._tiles.get(cell)

    def set(self, cell: Cell, value: int) -> None:
        """
        Insert or overwrite the tile at a cell.

        Parameters
        ----------
        cell : Cell
            The (column, row) coordinate to write.
        value : int
            Tile value, a power of two greater or equal to 2.

        Raises
        ------
        ValueError
            If the cell is not a pair of integers inside the board or the value is not a tile value.
        """
        if len(cell) != 2 or not all(is_integer(coordinate) for coordinate in cell):
            raise ValueError(f'Cell coordinates must be integers, got {cell}')
        cell = (int(cell[0]), int(cell[1]))
        if not self.in_bounds(cell):
            raise ValueError(f'Cell {cell} is outside a {self.size}x{self.size} grid')
        if not is_tile_value(value):
            raise ValueError(f'Tile value must be a power of two >= 2, got {value}')
        self._tiles[cell] = int(value)

    def remove(self, cell: Cell) -> None:
        """Delete the tile at a cell; no-op if the cell is empty."""
        self._tiles.pop(cell, None)

    def occupied_cells(self) -> frozenset[Cell]:
        """Snapshot of the occupied cells, detached from the live mapping."""
        return frozenset(self._tiles)

    def empty_cells(self) -> list[Cell]:
        """Empty cells in row-major order."""
        return [(col, row) for row in range(self.size) for col in range(self.size) if (col, row) not in self._tiles]

    def items(self) -> list[tuple[Cell, int]]:
        """Snapshot of the (cell, value) pairs in row-major order, sufficient to redraw the board."""
        return sorted(self._tiles.items(), key=lambda item: (item[0][1], item[0][0]))

    @property
    def is_full(self) -> bool:
        """True when every cell holds a tile."""
        return len(self._tiles) == self.size * self.size

    def copy(self) -> 'Grid':
        """Independent copy of the grid."""
        clone = Grid(size=self.size)
        clone._tiles = dict(self._tiles)
        return clone

    def to_array(self) -> ndarray:
        """
        Export the grid as a 2D array.

        Returns
        -------
        ndarray
            Array of shape (size, size) indexed as ``board[row, col]``, 0 meaning empty.
        """
        board = zeros((self.size, self.size), dtype=int64)
        for (col, row), value in self._tiles.items():
            board[row, col] = value
        return board

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, cell: object) -> bool:
        return cell in self._tiles

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.occupied_cells())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f'Grid(size={self.size}, tiles={dict(self.items())})'
