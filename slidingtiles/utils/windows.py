# -*- coding: utf-8 -*-
"""
Display the board in a window.
"""
from collections.abc import Callable, Iterable
from typing import Any

from matplotlib import pyplot as plt

from slidingtiles.core.grid import Cell
from slidingtiles.utils.keys import KEY_BINDINGS

# ##: Colors
TILE_COLORS = {
    2: "#EEE4DA",
    4: "#EDE0C8",
    8: "#F2B179",
    16: "#F59563",
    32: "#F67C5F",
    64: "#F65E3B",
    128: "#EDCF72",
    256: "#EDCC61",
    512: "#EDC850",
    1024: "#EDC53F",
    2048: "#EDC22E",
}
EMPTY_COLOR = "#FFFFFF"
FALLBACK_COLOR = "#CDC1B4"
TEXT_COLOR = "#776E65"
BACKGROUND_COLOR = "#BBADA0"


def tile_color(value: int) -> str:
    """
    Look up the background color of a tile.

    Parameters
    ----------
    value: int
        Tile value

    Returns
    -------
    str
        Hex color of the tile, the fallback color for values without an entry
    """
    return TILE_COLORS.get(int(value), FALLBACK_COLOR)


def release_keymaps(keys: Iterable[str]):
    """
    Unbind keys from the default Matplotlib shortcuts (save, back, forward, ...).

    Parameters
    ----------
    keys: Iterable[str]
        Keys that must only reach the registered key handler
    """
    keys = set(keys)
    for name in [param for param in plt.rcParams if param.startswith("keymap.")]:
        plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in keys]


class WindowBoard:
    """
    Window to draw the board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    def __init__(self, title: str, size: int):
        self.size = size

        # ## ----> Keep the game keys away from the toolbar shortcuts.
        release_keymaps(KEY_BINDINGS)

        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor(BACKGROUND_COLOR)
        self.fig.canvas.manager.set_window_title(title)

        self.axe.xaxis.set_ticks_position("none")
        self.axe.yaxis.set_ticks_position("none")
        _ = self.axe.set_xticklabels([])
        _ = self.axe.set_yticklabels([])

        # ## ----> Add one cell per board position, row-major.
        self.textes = []
        self.axes = [self.fig.add_subplot(size, size, index + 1) for index in range(size * size)]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="bold",
                color=TEXT_COLOR,
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def show_image(self, snapshot: Iterable[tuple[Cell, int]]):
        """
        Redraw the whole board from a snapshot.

        Parameters
        ----------
        snapshot: Iterable[tuple[Cell, int]]
            (cell, value) pairs of every occupied cell
        """
        # ## ----> Clear every cell.
        for _ax, text in zip(self.axes, self.textes):
            text.set_text("")
            _ax.set_facecolor(EMPTY_COLOR)

        # ## ----> Draw the occupied cells.
        for (col, row), value in snapshot:
            index = row * self.size + col
            self.textes[index].set_text(str(int(value)))
            self.axes[index].set_facecolor(tile_color(value))

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable[[Any], Any]):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable[[Any], Any]
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
