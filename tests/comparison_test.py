import tempfile
import unittest
from pathlib import Path

from jrandom.comparison import (
    ComparisonStatus,
    compare_files,
    compare_lines,
    is_double_hex,
    lines_match,
    ulp_distance,
)

REFERENCE = ["1553932502", "3f0361b3", "-1236052134575208584", "3feaa8af304d277c", "false", "2", "bff39318653b97f7"]


class ComparisonTests(unittest.TestCase):

    def _write(self, directory, name, lines):
        path = Path(directory) / name
        path.write_text("".join(f"{line}\n" for line in lines))
        return path

    def test_identical_streams_pass(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            ref = self._write(tmp_dir, "java.txt", REFERENCE)
            other = self._write(tmp_dir, "py.txt", REFERENCE)
            result = compare_files(ref, other, "python")
            self.assertTrue(result.passed)
            self.assertIn("PASS: python", result.describe())

    def test_double_fields_within_tolerance_pass(self):
        candidate = list(REFERENCE)
        candidate[6] = "bff39318653b97fa"
        self.assertTrue(compare_lines(REFERENCE, candidate, ulp_tolerance=3).passed)

    def test_double_fields_beyond_tolerance_fail(self):
        candidate = list(REFERENCE)
        candidate[6] = "bff39318653b97fb"
        result = compare_lines(REFERENCE, candidate, name="python", ulp_tolerance=3)
        self.assertEqual(result.status, ComparisonStatus.MISMATCH)
        self.assertEqual(result.line, 7)
        self.assertEqual(result.reference_value, "bff39318653b97f7")
        self.assertEqual(result.candidate_value, "bff39318653b97fb")
        self.assertEqual(
            result.describe(),
            "First difference at line 7: ref='bff39318653b97f7' python='bff39318653b97fb'",
        )

    def test_non_double_fields_need_exact_match(self):
        candidate = list(REFERENCE)
        candidate[0] = "1553932503"
        result = compare_lines(REFERENCE, candidate)
        self.assertEqual(result.status, ComparisonStatus.MISMATCH)
        self.assertEqual(result.line, 1)

        # Float fields are 8 hex digits: no ULP slack.
        self.assertFalse(lines_match("3f0361b3", "3f0361b4"))

    def test_first_mismatch_is_reported(self):
        candidate = list(REFERENCE)
        candidate[4] = "true"
        candidate[5] = "3"
        result = compare_lines(REFERENCE, candidate)
        self.assertEqual(result.line, 5)

    def test_line_count_mismatch(self):
        result = compare_lines(REFERENCE, REFERENCE[:-1], name="python")
        self.assertEqual(result.status, ComparisonStatus.LINE_COUNT_MISMATCH)
        self.assertEqual(result.describe(), "FAIL: line count mismatch (reference 7, python 6)")

    def test_missing_candidate_is_a_crashed_producer(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            ref = self._write(tmp_dir, "java.txt", REFERENCE)
            result = compare_files(ref, Path(tmp_dir) / "absent.txt", "ikvm")
            self.assertEqual(result.status, ComparisonStatus.PRODUCER_CRASHED)
            self.assertFalse(result.passed)
            self.assertEqual(result.describe(), "FAIL: ikvm output missing or empty")

    def test_empty_candidate_is_a_crashed_producer(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            ref = self._write(tmp_dir, "java.txt", REFERENCE)
            empty = Path(tmp_dir) / "empty.txt"
            empty.write_text("")
            result = compare_files(ref, empty)
            self.assertEqual(result.status, ComparisonStatus.PRODUCER_CRASHED)

    def test_missing_reference_raises(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            other = self._write(tmp_dir, "py.txt", REFERENCE)
            with self.assertRaises(FileNotFoundError):
                compare_files(Path(tmp_dir) / "java.txt", other)

    def test_ulp_helpers(self):
        self.assertTrue(is_double_hex("3feaa8af304d277c"))
        self.assertFalse(is_double_hex("3FEAA8AF304D277C"))
        self.assertFalse(is_double_hex("3f0361b3"))
        self.assertFalse(is_double_hex("1553932502123456"[:15]))
        self.assertEqual(ulp_distance("ffffffffffffffff", "fffffffffffffffd"), 2)


if __name__ == "__main__":
    unittest.main()
