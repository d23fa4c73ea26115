"""
Move engine for the sliding-tile board: ordering, merge resolution and slide resolution.
"""

from collections.abc import Iterable
from typing import NamedTuple

from slidingtiles.core.direction import Direction
from slidingtiles.core.grid import Cell, Grid


class MoveResult(NamedTuple):
    """
    Outcome of one application of the move engine.

    Attributes
    ----------
    grid : Grid
        The next grid state, after merges and slides, before any spawn.
    changed : bool
        True if any tile moved or merged.
    merges : int
        Number of merges performed during the move.
    """

    grid: Grid
    changed: bool
    merges: int = 0


def ordered_cells(cells: Iterable[Cell], direction: Direction) -> list[Cell]:
    """
    Sort cells so that the ones furthest along the direction of travel come first.

    Parameters
    ----------
    cells : Iterable[Cell]
        The cells to order.
    direction : Direction
        Direction of travel.

    Returns
    -------
    list[Cell]
        Cells sorted descending along the moving axis for right/down, ascending for left/up.

    Notes
    -----
    Ties along the moving axis are broken by the other coordinate so the order is deterministic.
    """
    axis = direction.axis
    forward = direction.step > 0
    return sorted(cells, key=lambda cell: (-cell[axis] if forward else cell[axis], cell[1 - axis]))


def _neighbour(cell: Cell, direction: Direction) -> Cell:
    """Cell immediately next to ``cell`` in the direction of travel (may lie off the board)."""
    dx, dy = direction.delta
    return cell[0] + dx, cell[1] + dy


def _merge(tiles: dict[Cell, int], direction: Direction, size: int) -> int:
    """
    Merge every tile into an equal-valued immediate neighbour, at most once per tile.

    Parameters
    ----------
    tiles : dict[Cell, int]
        Working copy of the board, modified in place.
    direction : Direction
        Direction of travel.
    size : int
        Side of the board.

    Returns
    -------
    int
        Number of merges performed.
    """
    merged: set[Cell] = set()
    merges = 0

    for cell in ordered_cells(list(tiles), direction):
        # ##: Consumed by an earlier merge.
        if cell not in tiles:
            continue

        neighbour = _neighbour(cell, direction)
        if not (0 <= neighbour[0] < size and 0 <= neighbour[1] < size):
            continue

        # ##>: A tile produced by a merge does not merge again this turn.
        if cell in merged or neighbour in merged:
            continue

        if tiles.get(neighbour) == tiles[cell]:
            tiles[neighbour] = tiles.pop(cell) * 2
            merged.add(neighbour)
            merges += 1

    return merges


def _slide(tiles: dict[Cell, int], direction: Direction, grid: Grid) -> None:
    """
    Advance tiles one cell at a time until a full pass moves nothing.

    Parameters
    ----------
    tiles : dict[Cell, int]
        Working copy of the board, modified in place.
    direction : Direction
        Direction of travel.
    grid : Grid
        Grid providing the board boundary.

    Notes
    -----
    Each pass processes tiles in travel order, so the loop reaches its fixed point after at most
    ``size - 1`` moving passes.
    """
    dx, dy = direction.delta
    while True:
        moved = False
        for cell in ordered_cells(list(tiles), direction):
            target = grid.clamp((cell[0] + dx, cell[1] + dy))
            if target == cell or target in tiles:
                continue
            tiles[target] = tiles.pop(cell)
            moved = True
        if not moved:
            return


def move(grid: Grid, direction: Direction) -> MoveResult:
    """
    Compute the next grid state after pushing every tile in a direction.

    Parameters
    ----------
    grid : Grid
        The current grid state. It is never modified.
    direction : Direction
        Direction of travel.

    Returns
    -------
    MoveResult
        The next grid state, whether anything changed, and the number of merges.

    Notes
    -----
    - Merges are resolved before slides, between immediate neighbours only.
    - The next state is built in a fresh grid, so the transition applies as a whole or not at all.
    - No tile is spawned here.
    """
    tiles = dict(grid.items())

    merges = _merge(tiles, direction, grid.size)
    _slide(tiles, direction, grid)

    next_grid = Grid(size=grid.size, tiles=tiles)
    changed = merges > 0 or next_grid != grid
    return MoveResult(grid=next_grid, changed=changed, merges=merges)


def can_move(grid: Grid, direction: Direction) -> bool:
    """
    Check if pushing the tiles in a direction would change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to probe.
    direction : Direction
        Direction to probe.

    Returns
    -------
    bool
        True if the move changes the grid.
    """
    return move(grid, direction).changed


def legal_directions(grid: Grid) -> list[Direction]:
    """
    Determine the directions that would change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to probe.

    Returns
    -------
    list[Direction]
        Directions in declaration order (up, down, left, right) whose move changes the grid.
    """
    return [direction for direction in Direction if can_move(grid, direction)]
