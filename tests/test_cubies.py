'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Lattice model tests.

'''

import unittest

from nxcube.cubies import (
    CUBE_COLORS,
    Cubelet,
    classify,
    coord_to_index,
    index_to_coord,
    is_core,
    solved_colors,
)


class TestLattice(unittest.TestCase):

    def test_index_coord_round_trip(self):
        for n in (2, 3, 4, 5):
            for i in range(n):
                self.assertEqual(coord_to_index(index_to_coord(i, n), n), i)
        self.assertEqual([index_to_coord(i, 4) for i in range(4)], [-1.5, -0.5, 0.5, 1.5])

    def test_core(self):
        self.assertTrue(is_core(1, 1, 1, 3))
        self.assertFalse(is_core(1, 1, 0, 3))
        self.assertFalse(is_core(1, 1, 1, 4))

    def test_classify(self):
        self.assertEqual(classify((1.0, 1.0, 1.0), 3), "corner")
        self.assertEqual(classify((1.0, 0.0, -1.0), 3), "edge")
        self.assertEqual(classify((0.0, -1.0, 0.0), 3), "center")
        self.assertEqual(classify((0.5, -0.5, 0.5), 4), "inner")

    def test_solved_colors_of_a_corner(self):
        colors = solved_colors((1.0, 1.0, 1.0), 3)
        self.assertEqual(colors, {"U": CUBE_COLORS["U"], "D": None, "L": None,
                                  "R": CUBE_COLORS["R"], "F": CUBE_COLORS["F"], "B": None})


class TestCubelet(unittest.TestCase):

    def test_copy_is_deep_enough(self):
        c = Cubelet(id="2-2-2", position=(1.0, 1.0, 1.0), colors=solved_colors((1.0, 1.0, 1.0), 3), kind="corner")
        d = c.copy()
        d.colors["U"] = None
        self.assertEqual(c.colors["U"], CUBE_COLORS["U"])
        self.assertEqual(d.id, c.id)

    def test_stickers_and_repr(self):
        c = Cubelet(id="2-2-1", position=(1.0, 1.0, 0.0), colors=solved_colors((1.0, 1.0, 0.0), 3), kind="edge")
        self.assertEqual(c.stickers(), [CUBE_COLORS["U"], CUBE_COLORS["R"]])
        self.assertIn("faces=UR", repr(c))


if __name__ == "__main__":
    unittest.main()
