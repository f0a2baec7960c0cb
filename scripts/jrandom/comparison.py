"""Line-by-line comparison of two canonical streams.

Doubles are written as 16 hex digits of their bit pattern. Two such
fields are accepted when their patterns, read as unsigned 64-bit
integers, are at most ``ulp_tolerance`` apart: runtimes may round
``log``/``sqrt`` in the Gaussian differently by a few units in the last
place. Every other field must match exactly.
"""

from __future__ import annotations

import enum
import logging
import os
import re
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_ULP_TOLERANCE = 3

_DOUBLE_HEX = re.compile(r"^[0-9a-f]{16}$")


class ComparisonStatus(enum.Enum):
    PASS = "pass"
    PRODUCER_CRASHED = "producer_crashed"
    LINE_COUNT_MISMATCH = "line_count_mismatch"
    MISMATCH = "mismatch"


@dataclass
class ComparisonResult:
    status: ComparisonStatus
    name: str = "candidate"
    line: Optional[int] = None
    reference_value: Optional[str] = None
    candidate_value: Optional[str] = None
    reference_lines: int = 0
    candidate_lines: int = 0
    ulp_tolerance: int = DEFAULT_ULP_TOLERANCE

    @property
    def passed(self) -> bool:
        return self.status is ComparisonStatus.PASS

    def describe(self) -> str:
        if self.status is ComparisonStatus.PASS:
            return f"PASS: {self.name} matches reference (within {self.ulp_tolerance} ULP for doubles)"
        if self.status is ComparisonStatus.PRODUCER_CRASHED:
            return f"FAIL: {self.name} output missing or empty"
        if self.status is ComparisonStatus.LINE_COUNT_MISMATCH:
            return (
                f"FAIL: line count mismatch (reference {self.reference_lines}, "
                f"{self.name} {self.candidate_lines})"
            )
        return (
            f"First difference at line {self.line}: "
            f"ref='{self.reference_value}' {self.name}='{self.candidate_value}'"
        )


def is_double_hex(text: str) -> bool:
    return _DOUBLE_HEX.match(text) is not None


def ulp_distance(a_hex: str, b_hex: str) -> int:
    return abs(int(a_hex, 16) - int(b_hex, 16))


def lines_match(reference: str, candidate: str, ulp_tolerance: int = DEFAULT_ULP_TOLERANCE) -> bool:
    if reference == candidate:
        return True
    if is_double_hex(reference) and is_double_hex(candidate):
        return ulp_distance(reference, candidate) <= ulp_tolerance
    return False


def compare_lines(reference_lines: List[str], candidate_lines: List[str], name: str = "candidate",
                  ulp_tolerance: int = DEFAULT_ULP_TOLERANCE) -> ComparisonResult:
    result = ComparisonResult(
        status=ComparisonStatus.PASS,
        name=name,
        reference_lines=len(reference_lines),
        candidate_lines=len(candidate_lines),
        ulp_tolerance=ulp_tolerance,
    )
    if len(reference_lines) != len(candidate_lines):
        result.status = ComparisonStatus.LINE_COUNT_MISMATCH
        return result

    for number, (reference, candidate) in enumerate(zip(reference_lines, candidate_lines), start=1):
        if not lines_match(reference, candidate, ulp_tolerance):
            result.status = ComparisonStatus.MISMATCH
            result.line = number
            result.reference_value = reference
            result.candidate_value = candidate
            break
    return result


def _read_lines(path) -> List[str]:
    with open(path, "r", encoding="utf-8") as rf:
        return rf.read().splitlines()


def compare_files(reference_path, candidate_path, name: str = "candidate",
                  ulp_tolerance: int = DEFAULT_ULP_TOLERANCE) -> ComparisonResult:
    """Diff ``candidate_path`` against ``reference_path``.

    A missing or empty candidate is reported as a crashed producer rather
    than a pass. A missing reference raises ``FileNotFoundError``.
    """
    reference_lines = _read_lines(reference_path)

    if not os.path.isfile(candidate_path) or os.path.getsize(candidate_path) == 0:
        result = ComparisonResult(
            status=ComparisonStatus.PRODUCER_CRASHED,
            name=name,
            reference_lines=len(reference_lines),
            ulp_tolerance=ulp_tolerance,
        )
    else:
        result = compare_lines(reference_lines, _read_lines(candidate_path), name, ulp_tolerance)

    if result.passed:
        logger.info(result.describe())
    else:
        logger.warning(result.describe())
    return result
