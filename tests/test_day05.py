import random
import unittest
from pathlib import Path

import day05

DATA = Path(__file__).parent / "data"


class RangeTreeTests(unittest.TestCase):
    def test_example(self):
        self.assertEqual(day05.solve((DATA / "day05.txt").read_text()), (3, 14))

    def test_overlapping_inserts_fuse(self):
        tree = day05.RangeTree()
        tree.insert(10, 14)
        tree.insert(16, 20)
        tree.insert(12, 18)
        self.assertEqual(tree.ranges(), [(10, 20)])
        self.assertEqual(tree.size(), 11)

    def test_fusion_swallows_nested_subtree_ranges(self):
        tree = day05.RangeTree()
        tree.insert(10, 20)
        tree.insert(1, 2)
        tree.insert(5, 6)  # right child of 1-2
        tree.insert(30, 40)
        tree.insert(25, 26)  # left child of 30-40
        tree.insert(4, 32)
        self.assertEqual(tree.ranges(), [(1, 2), (4, 40)])
        self.assertEqual(tree.size(), 2 + 37)
        self.assertTrue(tree.contains(5))
        self.assertFalse(tree.contains(3))

    def test_adjacent_ranges_stay_separate_but_count_once(self):
        tree = day05.RangeTree()
        tree.insert(1, 2)
        tree.insert(3, 4)
        self.assertEqual(tree.ranges(), [(1, 2), (3, 4)])
        self.assertEqual(tree.size(), 4)

    def test_matches_set_of_covered_ids(self):
        rng = random.Random(5)
        for _ in range(50):
            tree = day05.RangeTree()
            covered = set()
            for _ in range(rng.randint(1, 25)):
                lower = rng.randint(0, 200)
                upper = lower + rng.randint(0, 30)
                tree.insert(lower, upper)
                covered.update(range(lower, upper + 1))
            self.assertEqual(tree.size(), len(covered))
            for value in range(0, 240):
                self.assertEqual(tree.contains(value), value in covered)
            ranges = tree.ranges()
            for (_, upper), (lower, _) in zip(ranges, ranges[1:]):
                self.assertLess(upper, lower)

    def test_covering_range_fuses_long_ascending_chain(self):
        tree = day05.RangeTree()
        for i in range(1200):
            tree.insert(3 * i, 3 * i + 1)
        tree.insert(-5, 10**6)
        self.assertEqual(tree.ranges(), [(-5, 10**6)])
        self.assertEqual(tree.size(), 10**6 + 6)

    def test_covering_range_fuses_long_descending_chain(self):
        tree = day05.RangeTree()
        for i in reversed(range(1200)):
            tree.insert(3 * i, 3 * i + 1)
        tree.insert(1, 10**6)
        self.assertEqual(tree.ranges(), [(0, 10**6)])

    def test_parse_requires_blank_line(self):
        with self.assertRaisesRegex(ValueError, "blank line"):
            day05.parse("3-5\n10-14\n")


if __name__ == "__main__":
    unittest.main()
