"""
Configuration of a sliding-tile game.

Both parameters are fixed when the game is built; a running game never changes them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """
    Construction-time parameters of a game.

    Attributes
    ----------
    size : int
        Side of the square board.
    two_probability : float
        Probability that a spawned tile is a 2 rather than a 4.
    """

    size: int = 4  # 4x4 board
    two_probability: float = 0.9  # 10% of spawns are 4s

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not 0.0 <= self.two_probability <= 1.0:
            raise ValueError(f'two_probability must be in [0, 1], got {self.two_probability}')

    @property
    def tile_probabilities(self) -> dict[int, float]:
        """Spawn distribution as a mapping from tile value to probability."""
        return {2: self.two_probability, 4: 1.0 - self.two_probability}
