from unittest import TestCase, main

from slidingtiles.core.direction import Direction
from slidingtiles.utils.keys import KEY_BINDINGS, key_to_direction


class TestKeys(TestCase):
    def test_arrow_keys(self):
        """
        Test if arrow keys map to their direction in both naming schemes.
        """
        self.assertEqual(key_to_direction('up'), Direction.UP)
        self.assertEqual(key_to_direction('ArrowDown'), Direction.DOWN)
        self.assertEqual(key_to_direction('a'), Direction.LEFT)
        self.assertEqual(key_to_direction('right'), Direction.RIGHT)

    def test_unknown_keys(self):
        """
        Test if unrecognized keys map to None.
        """
        for key in ('escape', 'Enter', '', 'UP', None):
            self.assertIsNone(key_to_direction(key))

    def test_every_direction_bound(self):
        """
        Test if every direction has at least one key.
        """
        self.assertEqual(set(KEY_BINDINGS.values()), set(Direction))


class TestDirection(TestCase):
    def test_deltas(self):
        """
        Test the unit delta, axis and step of each direction.
        """
        self.assertEqual(Direction.UP.delta, (0, -1))
        self.assertEqual(Direction.DOWN.delta, (0, 1))
        self.assertEqual(Direction.LEFT.delta, (-1, 0))
        self.assertEqual(Direction.RIGHT.delta, (1, 0))

        self.assertEqual((Direction.LEFT.axis, Direction.LEFT.step), (0, -1))
        self.assertEqual((Direction.DOWN.axis, Direction.DOWN.step), (1, 1))

    def test_from_name(self):
        """
        Test the case-insensitive lookup by name.
        """
        self.assertEqual(Direction.from_name('Left'), Direction.LEFT)
        with self.assertRaises(ValueError):
            Direction.from_name('forward')


if __name__ == '__main__':
    main()
