import math
import threading
import time
from typing import Optional


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _to_int64(value):
    value &= 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value >= (1 << 63) else value


class JavaRandom:
    """java.util.Random-compatible generator.

    Reproduces the 48-bit linear congruential generator and the derived
    value formulas bit for bit, so a Python run seeded like a Java run
    emits the same sequence. Every public draw holds the instance lock for
    its whole duration: concurrent callers see disjoint state transitions
    and two-draw operations (``next_long``, ``next_double``,
    ``next_gaussian``) are never interleaved.

    Not suitable for anything security related.
    """

    _MULT = 0x5DEECE66D
    _ADD = 0xB
    _MASK = (1 << 48) - 1

    _UNIQUIFIER_MULT = 1181783497276652981
    _seed_uniquifier = 8682522807148012
    _uniquifier_lock = threading.Lock()

    def __init__(self, seed=None):
        self._lock = threading.RLock()
        self._seed = 0
        self._next_next_gaussian: Optional[float] = None
        if seed is None:
            seed = self.seed_uniquifier() ^ time.monotonic_ns()
        self.set_seed(seed)

    @classmethod
    def seed_uniquifier(cls):
        with cls._uniquifier_lock:
            cls._seed_uniquifier = _to_int64(cls._seed_uniquifier * cls._UNIQUIFIER_MULT)
            return cls._seed_uniquifier

    @property
    def seed(self):
        """Current 48-bit internal state."""
        return self._seed

    def set_seed(self, seed):
        with self._lock:
            self._seed = (int(seed) ^ self._MULT) & self._MASK
            self._next_next_gaussian = None

    def next(self, bits):
        with self._lock:
            self._seed = (self._seed * self._MULT + self._ADD) & self._MASK
            return _to_int32(self._seed >> (48 - bits))

    def next_int(self, bound=None):
        if bound is None:
            return self.next(32)

        bound = int(bound)
        if bound <= 0:
            raise ValueError("bound must be positive")
        if bound > 0x7FFFFFFF:
            raise ValueError("bound must fit in a signed 32-bit integer")

        with self._lock:
            r = self.next(31)
            m = bound - 1
            if (bound & m) == 0:
                return (bound * r) >> 31

            u = r
            r = u % bound
            # Java retries while u - r + m overflows int.
            while _to_int32(u - r + m) < 0:
                u = self.next(31)
                r = u % bound
            return r

    def next_long(self):
        with self._lock:
            upper = self.next(32)
            lower = self.next(32)
        return _to_int64((upper << 32) + lower)

    def next_boolean(self):
        return self.next(1) != 0

    def next_float(self):
        # 24 significant bits: the quotient is exact in single precision.
        return self.next(24) / float(1 << 24)

    def next_double(self):
        with self._lock:
            high = self.next(26)
            low = self.next(27)
        return ((high << 27) + low) / float(1 << 53)

    def next_gaussian(self):
        with self._lock:
            if self._next_next_gaussian is not None:
                value = self._next_next_gaussian
                self._next_next_gaussian = None
                return value

            while True:
                v1 = 2 * self.next_double() - 1
                v2 = 2 * self.next_double() - 1
                s = v1 * v1 + v2 * v2
                if 0 < s < 1:
                    break

            multiplier = math.sqrt(-2 * math.log(s) / s)
            self._next_next_gaussian = v2 * multiplier
            return v1 * multiplier
