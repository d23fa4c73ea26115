"""
Directions of travel for the sliding-tile board, each carrying its unit delta.
"""

from enum import Enum


class Direction(Enum):
    """
    One of the four directions a player can push the tiles.

    The value of each member is its unit delta ``(dx, dy)`` where ``x`` is the column and ``y`` the row,
    with the origin in the top-left corner.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        """Unit delta ``(dx, dy)`` of the direction."""
        return self.value

    @property
    def axis(self) -> int:
        """Index of the moving coordinate in a cell: 0 for columns, 1 for rows."""
        return 0 if self.value[0] != 0 else 1

    @property
    def step(self) -> int:
        """Sign of the motion along the moving axis."""
        return self.value[self.axis]

    @classmethod
    def from_name(cls, name: str) -> 'Direction':
        """
        Look up a direction by its name, ignoring case.

        Parameters
        ----------
        name : str
            One of ``up``, ``down``, ``left`` or ``right``.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name does not match any direction.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as error:
            raise ValueError(f'Unknown direction: {name!r}') from error
