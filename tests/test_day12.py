import unittest
from pathlib import Path

import day12
import solver_backends

DATA = Path(__file__).parent / "data"

CPSAT_AVAILABLE = solver_backends.CPSAT_AVAILABLE


class PackingTests(unittest.TestCase):
    def setUp(self):
        self.farm = day12.parse((DATA / "day12.txt").read_text())

    def test_parse(self):
        self.assertEqual(len(self.farm.shapes), 6)
        self.assertEqual([len(s) for s in self.farm.shapes], [7] * 6)
        self.assertEqual(
            [(r.width, r.height) for r in self.farm.regions], [(4, 4), (12, 5), (12, 5)]
        )
        self.assertEqual(self.farm.regions[2].counts, [1, 0, 1, 0, 3, 2])

    def test_orientations(self):
        square = frozenset({(0, 0), (0, 1), (1, 0), (1, 1)})
        self.assertEqual(day12.orientations(square), [square])
        ell = frozenset({(0, 0), (1, 0), (2, 0), (2, 1)})
        self.assertEqual(len(day12.orientations(ell)), 8)
        for variant in day12.orientations(self.farm.shapes[4]):
            self.assertEqual(min(r for r, _ in variant), 0)
            self.assertEqual(min(c for _, c in variant), 0)

    def test_quick_verdicts(self):
        shapes = self.farm.shapes
        self.assertTrue(day12.quick_verdict(day12.Region(6, 6, [4]), shapes))
        self.assertFalse(day12.quick_verdict(day12.Region(4, 4, [3]), shapes))
        self.assertIsNone(day12.quick_verdict(self.farm.regions[0], shapes))

    def test_part_2_counts_undecided_regions(self):
        self.assertEqual(day12.part_2(self.farm), 3)

    @unittest.skipUnless(CPSAT_AVAILABLE, "ortools not installed")
    def test_example(self):
        self.assertEqual(day12.part_1(self.farm, time_limit=30.0), 2)

    @unittest.skipUnless(CPSAT_AVAILABLE, "ortools not installed")
    def test_exact_fit(self):
        shapes = self.farm.shapes
        self.assertTrue(day12.exact_fit(self.farm.regions[0], shapes))
        self.assertTrue(day12.exact_fit(day12.Region(3, 3, [0, 0, 0, 0, 1]), shapes))
        # A 3x3 box cannot take two 7-cell presents.
        self.assertFalse(day12.exact_fit(day12.Region(3, 3, [0, 0, 0, 0, 2]), shapes))
        self.assertFalse(day12.exact_fit(day12.Region(2, 2, [1]), shapes))

    def test_unknown_shape_in_region(self):
        with self.assertRaisesRegex(ValueError, "unknown shapes"):
            day12.parse("0:\n#\n\n2x2: 0 1\n")


if __name__ == "__main__":
    unittest.main()
