import os
import tempfile
import unittest
from pathlib import Path

from jrandom import JavaRandom, JavaRandomRun
from jrandom.comparison import ComparisonStatus


class JavaRandomRunTests(unittest.TestCase):

    def test_run_then_load_rounds(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            run = JavaRandomRun(seed=12345, count=25, output_dir=tmp_dir).run()

            frame = run.to_dataframe()
            self.assertEqual(frame.shape, (25, 7))
            self.assertEqual(frame["nextInt"].iloc[0], 1553932502)
            self.assertEqual(frame["nextInt100"].iloc[0], 2)
            self.assertTrue(frame["nextInt100"].between(0, 99).all())
            self.assertTrue(frame["nextDouble"].between(0.0, 1.0, inclusive="left").all())

            random = JavaRandom(12345)
            random.next_int()
            random.next_float()
            self.assertEqual(frame["nextLong"].iloc[0], random.next_long())

    def test_compare_with_reference(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            reference = JavaRandomRun(seed=9, count=5, output_dir=tmp_dir, run_name="java").run()
            candidate = JavaRandomRun(seed=9, count=5, output_dir=tmp_dir, run_name="py").run()
            self.assertTrue(candidate.compare_with(reference.output_path).passed)

            other = JavaRandomRun(seed=10, count=5, output_dir=tmp_dir, run_name="other").run()
            result = other.compare_with(reference.output_path)
            self.assertEqual(result.status, ComparisonStatus.MISMATCH)
            self.assertEqual(result.line, 1)

    def test_explicit_seed_wins_over_environment(self):
        saved = {key: os.environ.get(key) for key in ("RANDOM_SEED", "RANDOM_COUNT", "RUN_NAME")}
        os.environ["RANDOM_SEED"] = "1"
        os.environ["RANDOM_COUNT"] = "50"
        os.environ["RUN_NAME"] = "env_name"
        try:
            with tempfile.TemporaryDirectory() as tmp_dir:
                run = JavaRandomRun(seed=12345, count=2, mode="ints", output_dir=tmp_dir).run()
                lines = Path(run.output_path).read_text().splitlines()
                self.assertEqual(Path(run.output_path).parent.name, "sample")
        finally:
            for key, value in saved.items():
                if value is None:
                    os.environ.pop(key, None)
                else:
                    os.environ[key] = value

        self.assertEqual(lines, ["1553932502", "-2090749135"])

    def test_results_need_a_run(self):
        run = JavaRandomRun(count=1)
        with self.assertRaises(RuntimeError):
            run.to_dataframe()
        with self.assertRaises(RuntimeError):
            run.compare_with("java.txt")

    def test_ints_mode_has_no_rounds_frame(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            run = JavaRandomRun(count=3, mode="ints", output_dir=tmp_dir).run()
            self.assertEqual(Path(run.output_path).read_text().splitlines()[0], "1553932502")
            with self.assertRaises(ValueError):
                run.to_dataframe()


if __name__ == "__main__":
    unittest.main()
