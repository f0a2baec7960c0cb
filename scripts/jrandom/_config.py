"""Configuration dataclass for a generate-and-diff run."""

from __future__ import annotations

from dataclasses import dataclass

VALID_MODES = frozenset({"rounds", "ints"})

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


@dataclass
class GeneratorConfig:
    """Every parameter needed to produce one canonical sequence.

    Every field has a usable default: only pass what you want to change.
    ``mode`` is ``"rounds"`` for rounds of seven mixed draws, or ``"ints"``
    for plain ``nextInt()`` values.
    """

    # --- General ---
    seed: int = 12345
    count: int = 100
    mode: str = "rounds"
    run_name: str = "sample"

    # --- Output ---
    output_dir: str = "outputs"
    output_file: str = "py_java_random.txt"
    buffer_size: int = 10000
    line_limit: int = 0

    # --- Comparison ---
    ulp_tolerance: int = 3

    def __post_init__(self) -> None:
        if not _INT64_MIN <= self.seed <= _INT64_MAX:
            raise ValueError("seed must be a signed 64-bit integer")
        if self.count < 0:
            raise ValueError("count must be >= 0")
        if self.mode not in VALID_MODES:
            raise ValueError(
                f"Unknown mode: '{self.mode}'. "
                f"Valid: {sorted(VALID_MODES)}"
            )
        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")
        if self.line_limit < 0:
            raise ValueError("line_limit must be >= 0 (0 means no limit)")
        if self.ulp_tolerance < 0:
            raise ValueError("ulp_tolerance must be >= 0")

    def to_conf_dict(self) -> dict:
        """Build the dictionary equivalent of ``conf.json``."""
        return {
            "general": {
                "random_seed": self.seed,
                "count": self.count,
                "mode": self.mode,
                "run_name": self.run_name,
            },
            "output": {
                "directory": self.output_dir,
                "sequence": self.output_file,
                "buffer_size": self.buffer_size,
                "line_limit": self.line_limit,
            },
            "compare": {
                "ulp_tolerance": self.ulp_tolerance,
            },
        }
