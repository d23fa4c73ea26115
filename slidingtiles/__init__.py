# -*- coding: utf-8 -*-
"""
2048-style sliding-tile puzzle engine.
"""

from .config import GameConfig
from .core import Direction, Grid, MoveResult, move, spawn_tile
from .envs import SlidingTiles, TurnResult

__all__ = ["Direction", "GameConfig", "Grid", "MoveResult", "SlidingTiles", "TurnResult", "move", "spawn_tile"]
