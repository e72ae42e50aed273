import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from answers import answers_path, save_answers


class AnswerRecordTests(unittest.TestCase):
    def test_save_answers_includes_metadata(self):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "day05.json"
            save_answers(
                5,
                3,
                14,
                path,
                runtime=0.25,
                input_path=Path("inputs/day05.txt"),
                timings={"parse": 0.05, "part 1": 0.1, "part 2": 0.1},
            )
            data = json.loads(path.read_text())
        self.assertEqual(data["day"], 5)
        self.assertEqual(data["part_1"], 3)
        self.assertEqual(data["part_2"], 14)
        self.assertEqual(data["runtime_seconds"], 0.25)
        self.assertEqual(data["input"], "inputs/day05.txt")
        self.assertEqual(data["timings"]["parse"], 0.05)

    def test_optional_fields_are_null(self):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "day01.json"
            save_answers(1, 3, 6, path, runtime=None)
            data = json.loads(path.read_text())
        self.assertIsNone(data["runtime_seconds"])
        self.assertIsNone(data["timings"])
        self.assertIsNone(data["input"])

    def test_answers_path(self):
        self.assertEqual(answers_path(Path("answers"), 7), Path("answers/day07.json"))


if __name__ == "__main__":
    unittest.main()
