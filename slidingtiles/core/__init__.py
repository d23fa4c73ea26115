# -*- coding: utf-8 -*-
"""
Core of the sliding-tile puzzle: grid state, move engine and spawn policy.

It includes the `Grid` mapping of occupied cells to tile values, the `Direction` enumeration, the pure `move`
function computing the next grid after an input, and `spawn_tile` replenishing the board after a changed turn.
"""

from .direction import Direction
from .engine import MoveResult, can_move, legal_directions, move, ordered_cells
from .grid import Cell, Grid, is_tile_value
from .spawn import TILE_SPAWN_PROBS, draw_empty_cell, draw_value, spawn_tile

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "MoveResult",
    "TILE_SPAWN_PROBS",
    "can_move",
    "draw_empty_cell",
    "draw_value",
    "is_tile_value",
    "legal_directions",
    "move",
    "ordered_cells",
    "spawn_tile",
]
