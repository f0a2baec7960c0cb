from jrandom.java_random import JavaRandom
from jrandom.runner import JavaRandomRun

__all__ = ["JavaRandom", "JavaRandomRun"]
