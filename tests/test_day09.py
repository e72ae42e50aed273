import unittest
from pathlib import Path

import day09

DATA = Path(__file__).parent / "data"


class TileLoopTests(unittest.TestCase):
    def setUp(self):
        self.points = day09.parse((DATA / "day09.txt").read_text())
        self.walls = day09.Walls(self.points)

    def test_example(self):
        self.assertEqual(day09.solve((DATA / "day09.txt").read_text()), (50, 24))

    def test_area_counts_tiles(self):
        self.assertEqual(day09.area((2, 5), (11, 1)), 50)
        self.assertEqual(day09.area((3, 3), (3, 3)), 1)

    def test_specific_points(self):
        self.assertTrue(self.walls.is_inside((2, 4)))  # on a wall
        self.assertTrue(self.walls.is_inside((8, 3)))  # enclosed
        self.assertTrue(self.walls.is_inside((11, 1)))  # vertex
        self.assertFalse(self.walls.is_inside((3, 1)))
        self.assertFalse(self.walls.is_inside((5, 6)))
        self.assertFalse(self.walls.is_inside((0, 0)))

    def test_best_rectangle_tiles_are_all_inside(self):
        rect = day09.best_inside_rectangle(self.points)
        self.assertEqual(rect.area, 24)
        xs = sorted((rect.a[0], rect.b[0]))
        ys = sorted((rect.a[1], rect.b[1]))
        for x in range(xs[0], xs[1] + 1):
            for y in range(ys[0], ys[1] + 1):
                self.assertTrue(self.walls.is_inside((x, y)), (x, y))

    def test_u_shaped_notch_is_rejected(self):
        # The notch [2,8]x[5,10] has all four corners on the loop but is outside.
        points = [(0, 0), (10, 0), (10, 10), (8, 10), (8, 5), (2, 5), (2, 10), (0, 10)]
        walls = day09.Walls(points)
        self.assertFalse(walls.crosses_interior((2, 5), (8, 10)))
        self.assertFalse(walls.rectangle_inside((2, 5), (8, 10)))
        self.assertTrue(walls.rectangle_inside((0, 0), (10, 5)))
        self.assertEqual(day09.part_2(points), 9 * 6)

    def test_wall_through_interior(self):
        self.assertTrue(self.walls.crosses_interior((2, 5), (11, 1)))
        self.assertFalse(self.walls.crosses_interior((9, 5), (2, 3)))

    def test_diagonal_edge_is_rejected(self):
        with self.assertRaisesRegex(ValueError, "axis aligned"):
            day09.Walls([(0, 0), (5, 0), (5, 5), (1, 4)])


if __name__ == "__main__":
    unittest.main()
