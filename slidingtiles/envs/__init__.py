# -*- coding: utf-8 -*-
"""
Python implementation of the sliding-tile game.

This module provides the `SlidingTiles` class, which owns the board and random source of one game and plays
one turn per directional input.
"""

from .game import SlidingTiles, TurnResult

__all__ = ["SlidingTiles", "TurnResult"]
