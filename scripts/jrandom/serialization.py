"""Canonical text form of generated values.

One value per line, rounds of seven draws in a fixed order. Integers and
longs are signed decimal, booleans ``true``/``false``; floats and doubles
are written as the lowercase hex of their raw IEEE-754 bit pattern so two
runtimes can be diffed without any decimal formatting in between.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np
import pandas as pd

ROUND_FIELDS = (
    "nextInt",
    "nextFloat",
    "nextLong",
    "nextDouble",
    "nextBoolean",
    "nextInt100",
    "nextGaussian",
)

ROUND_SIZE = len(ROUND_FIELDS)

_FLOAT_FIELDS = frozenset({"nextFloat"})
_DOUBLE_FIELDS = frozenset({"nextDouble", "nextGaussian"})
_BOOLEAN_FIELDS = frozenset({"nextBoolean"})


def float_to_hex(value: float) -> str:
    bits = np.array([value], dtype=np.float32).view(np.uint32)[0]
    return f"{int(bits):08x}"


def hex_to_float(text: str) -> float:
    bits = np.array([int(text, 16)], dtype=np.uint32)
    return float(bits.view(np.float32)[0])


def double_to_hex(value: float) -> str:
    bits = np.array([value], dtype=np.float64).view(np.uint64)[0]
    return f"{int(bits):016x}"


def hex_to_double(text: str) -> float:
    bits = np.array([int(text, 16)], dtype=np.uint64)
    return float(bits.view(np.float64)[0])


def format_boolean(value: bool) -> str:
    return "true" if value else "false"


def parse_boolean(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"Not a canonical boolean: '{text}'")


def draw_round(random) -> tuple:
    """Draw one round from ``random`` in canonical field order."""
    return (
        random.next_int(),
        random.next_float(),
        random.next_long(),
        random.next_double(),
        random.next_boolean(),
        random.next_int(100),
        random.next_gaussian(),
    )


def format_value(field: str, value) -> str:
    if field in _FLOAT_FIELDS:
        return float_to_hex(value)
    if field in _DOUBLE_FIELDS:
        return double_to_hex(value)
    if field in _BOOLEAN_FIELDS:
        return format_boolean(value)
    return str(int(value))


def parse_value(field: str, text: str):
    text = text.strip()
    if field in _FLOAT_FIELDS:
        return hex_to_float(text)
    if field in _DOUBLE_FIELDS:
        return hex_to_double(text)
    if field in _BOOLEAN_FIELDS:
        return parse_boolean(text)
    return int(text)


def format_round(values: Sequence) -> List[str]:
    if len(values) != ROUND_SIZE:
        raise ValueError(f"A round has {ROUND_SIZE} values, got {len(values)}")
    return [format_value(field, value) for field, value in zip(ROUND_FIELDS, values)]


def parse_round(lines: Sequence[str]) -> tuple:
    if len(lines) != ROUND_SIZE:
        raise ValueError(f"A round has {ROUND_SIZE} lines, got {len(lines)}")
    return tuple(parse_value(field, line) for field, line in zip(ROUND_FIELDS, lines))


def load_rounds(path) -> pd.DataFrame:
    """Load a rounds stream into a DataFrame, one row per round."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if len(lines) % ROUND_SIZE != 0:
        raise ValueError(
            f"{path}: {len(lines)} lines is not a whole number of {ROUND_SIZE}-value rounds"
        )

    rows = [
        parse_round(lines[start:start + ROUND_SIZE])
        for start in range(0, len(lines), ROUND_SIZE)
    ]
    frame = pd.DataFrame(rows, columns=list(ROUND_FIELDS))
    return frame.astype({
        "nextInt": "int64",
        "nextFloat": "float32",
        "nextLong": "int64",
        "nextDouble": "float64",
        "nextBoolean": "bool",
        "nextInt100": "int64",
        "nextGaussian": "float64",
    })
