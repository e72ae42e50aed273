import random
import unittest
from pathlib import Path

import day01

DATA = Path(__file__).parent / "data"


def brute_force_hits(position, turn):
    step = 1 if turn > 0 else -1
    return sum(
        1 for k in range(1, abs(turn) + 1) if (position + k * step) % day01.DIAL_SIZE == 0
    )


class DialTests(unittest.TestCase):
    def test_example(self):
        self.assertEqual(day01.solve((DATA / "day01.txt").read_text()), (3, 6))

    def test_parse_signs_rotations(self):
        self.assertEqual(day01.parse("L68\nR48\n"), [-68, 48])

    def test_parse_rejects_unknown_direction(self):
        with self.assertRaisesRegex(ValueError, "L or R"):
            day01.parse("U12")

    def test_parse_rejects_signed_amounts(self):
        for line in ("L-5", "R+3", "L"):
            with self.assertRaisesRegex(ValueError, "invalid rotation amount"):
                day01.parse(line)

    def test_rotate_lands_exactly_on_zero_twice(self):
        self.assertEqual(day01.rotate(50, 150), (0, 2))

    def test_leaving_zero_is_not_a_hit(self):
        self.assertEqual(day01.rotate(0, -5), (95, 0))
        self.assertEqual(day01.rotate(0, 100), (0, 1))

    def test_rotate_matches_click_by_click_count(self):
        rng = random.Random(2025)
        for _ in range(2000):
            position = rng.randrange(day01.DIAL_SIZE)
            turn = rng.randint(-1000, 1000)
            new_position, hits = day01.rotate(position, turn)
            self.assertEqual(hits, brute_force_hits(position, turn), (position, turn))
            self.assertEqual((position + turn - new_position) % day01.DIAL_SIZE, 0)


if __name__ == "__main__":
    unittest.main()
