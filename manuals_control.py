# -*- coding: utf-8 -*-
"""
Play the sliding-tile game
"""
import logging
from typing import Any

from slidingtiles.envs import SlidingTiles
from slidingtiles.utils import WindowBoard


def redraw(window: WindowBoard, game: SlidingTiles):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    game: SlidingTiles
        Game whose board is drawn
    """
    window.show_image(game.snapshot())


def reset(game: SlidingTiles, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    game: SlidingTiles
        The game

    window: WindowBoard
        Class to draw the game board
    """
    game.reset()
    redraw(window, game)


def key_handler(game: SlidingTiles, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: SlidingTiles
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(game, window)
        return None

    result = game.handle_key(event.key)
    if result is not None and result.changed:
        redraw(window, game)
    return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = SlidingTiles()

    window_board = WindowBoard(title="2048 Game", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    reset(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
