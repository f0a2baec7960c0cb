"""Statistical sanity checks over drawn samples.

These do not prove bit-exactness (the golden vectors do that); they catch
a generator that is deterministic but badly distributed, e.g. a broken
bounded-int reduction.
"""

import numpy as np
import pandas as pd
from scipy import stats as scipy_stats


def uniformity_pvalue(values, bound: int) -> float:
    """Chi-square p-value of ``values`` against uniform on ``[0, bound)``."""
    samples = np.asarray(values, dtype=np.int64)
    if samples.size == 0:
        raise ValueError("need at least one sample")
    if samples.min() < 0 or samples.max() >= bound:
        raise ValueError(f"samples fall outside [0, {bound})")
    observed = np.bincount(samples, minlength=bound)
    return float(scipy_stats.chisquare(observed).pvalue)


def normality_pvalue(values) -> float:
    """Kolmogorov-Smirnov p-value of ``values`` against the standard normal."""
    samples = np.asarray(values, dtype=np.float64)
    if samples.size == 0:
        raise ValueError("need at least one sample")
    return float(scipy_stats.kstest(samples, "norm").pvalue)


def summarize_rounds(frame: pd.DataFrame) -> pd.DataFrame:
    """Mean, standard deviation, min and max of each numeric column."""
    numeric = frame.select_dtypes(include=[np.number]).astype(np.float64)
    return numeric.agg(["mean", "std", "min", "max"]).T
