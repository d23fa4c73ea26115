# -*- coding: utf-8 -*-
"""
This module provides the collaborators around the game core.

It includes `key_to_direction`, which maps platform key identifiers to directions, and the `WindowBoard`
class drawing board snapshots with Matplotlib.
"""

from .keys import KEY_BINDINGS, key_to_direction
from .windows import FALLBACK_COLOR, TILE_COLORS, WindowBoard, release_keymaps, tile_color

__all__ = [
    "KEY_BINDINGS",
    "key_to_direction",
    "FALLBACK_COLOR",
    "TILE_COLORS",
    "WindowBoard",
    "release_keymaps",
    "tile_color",
]
