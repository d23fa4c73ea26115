"""
Input adapter: map platform key identifiers to directions.
"""

from slidingtiles.core.direction import Direction

# ##>: Matplotlib key names, browser ``KeyboardEvent.key`` names and WASD.
KEY_BINDINGS: dict[str, Direction] = {
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}


def key_to_direction(key: str | None) -> Direction | None:
    """
    Translate a key identifier into a direction.

    Parameters
    ----------
    key : str or None
        Key identifier as reported by the platform (matplotlib reports None for some keys).

    Returns
    -------
    Direction or None
        The bound direction, or None for an unrecognized key.
    """
    if key is None:
        return None
    return KEY_BINDINGS.get(key)
