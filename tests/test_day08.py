import unittest
from pathlib import Path

import day08

DATA = Path(__file__).parent / "data"


class CircuitTests(unittest.TestCase):
    def setUp(self):
        self.points = day08.parse((DATA / "day08.txt").read_text())

    def test_example(self):
        self.assertEqual(day08.part_1(self.points, pairs=10), 40)
        self.assertEqual(day08.part_2(self.points), 25272)

    def test_solve_forwards_pair_count(self):
        text = (DATA / "day08.txt").read_text()
        self.assertEqual(day08.solve(text, pairs=10), (40, 25272))

    def test_closest_pair_of_example(self):
        closest = min(
            (day08.distance(a, b), a, b)
            for i, a in enumerate(self.points)
            for b in self.points[i + 1 :]
        )
        self.assertEqual({closest[1], closest[2]}, {(162, 817, 812), (425, 690, 689)})

    def test_circuits_union_and_sizes(self):
        circuits = day08.Circuits(5)
        self.assertTrue(circuits.union(0, 1))
        self.assertTrue(circuits.union(1, 2))
        self.assertFalse(circuits.union(2, 0))
        self.assertEqual(circuits.count, 3)
        self.assertEqual(circuits.sizes(), [3, 1, 1])

    def test_singletons_count_as_circuits(self):
        points = [(0, 0, 0), (1, 0, 0), (100, 0, 0), (200, 0, 0)]
        self.assertEqual(day08.part_1(points, pairs=1), 2 * 1 * 1)

    def test_part_2_needs_two_boxes(self):
        with self.assertRaises(ValueError):
            day08.part_2([(1, 2, 3)])

    def test_parse_rejects_bad_lines(self):
        with self.assertRaisesRegex(ValueError, "x,y,z"):
            day08.parse("1,2")


if __name__ == "__main__":
    unittest.main()
