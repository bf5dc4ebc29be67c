import math

import numpy as np

from .constants import MULTIPLIER, ADDEND, MASK, STATE_BITS, F32_DIV, F64_DIV, INT32_MAX
from .utils import to_i32, to_i64, to_u64, is_power_of_two, ieee754_log


class Generator:
    """48-bit linear congruential generator with the java.util.Random sequence.

    Every derived value is a pure function of the seed and the exact sequence of
    prior calls on the instance. Instances hold no lock; give each worker its own
    generator (see ``clone``).
    """

    def __init__(self, seed=0):
        self._state = (seed ^ MULTIPLIER) & MASK
        self._pending_gaussian = None

    @classmethod
    def new(cls, seed):
        return cls(seed)

    @property
    def state(self):
        """Current 48-bit state."""
        return self._state

    @property
    def pending_gaussian(self):
        """Second value of the last Gaussian pair, or None."""
        return self._pending_gaussian

    def set_seed(self, seed):
        """Reinitialize as if freshly constructed with ``seed``."""
        self.__init__(seed)

    def clone(self):
        other = type(self).__new__(type(self))
        other.__dict__ = self.__dict__.copy()
        return other

    __copy__ = clone

    def __eq__(self, other):
        if not isinstance(other, Generator):
            return NotImplemented
        return (self._state == other._state
                and self._pending_gaussian == other._pending_gaussian)

    __hash__ = None

    def __repr__(self):
        return f"Generator(state=0x{self._state:012x}, pending_gaussian={self._pending_gaussian!r})"

    def next(self, bits):
        """Advance the state and return its top ``bits`` bits."""
        if bits < 0 or bits > STATE_BITS:
            raise ValueError(f"Bits must be in [0, {STATE_BITS}], got {bits}")

        self._state = (self._state * MULTIPLIER + ADDEND) & MASK
        return self._state >> (STATE_BITS - bits)

    def next_i32(self):
        return to_i32(self.next(32))

    def next_u32(self):
        return self.next(32)

    def next_u64(self):
        """Two 32-bit draws concatenated, high word first."""
        high = self.next(32)
        low = self.next(32)
        return to_u64((high << 32) + low)

    def next_i64(self):
        return to_i64(self.next_u64())

    def next_bool(self):
        return self.next(1) == 1

    def next_bytes(self, buffer):
        """Fill ``buffer`` with random bytes, four per 32-bit draw, low byte first.

        If ``buffer`` is an int, a new ``bytes`` object of that length is returned.
        """
        if isinstance(buffer, int):
            return bytes(self.next_bytes(bytearray(buffer)))

        length = len(buffer)
        for start in range(0, length, 4):
            block = self.next_u32()
            for i in range(start, min(start + 4, length)):
                buffer[i] = block & 0xFF
                block >>= 8
        return buffer

    def next_i32_bound(self, max):
        """Uniform integer in [0, max) using rejection sampling.

        Raises ValueError if ``max`` is not in [1, 2^31).
        """
        if max <= 0:
            raise ValueError(f"Maximum must be > 0, got {max}")
        if max > INT32_MAX:
            raise ValueError(f"Maximum must fit in a signed 32-bit integer, got {max}")

        if is_power_of_two(max):
            return (max * self.next(31)) >> 31

        bits = self.next(31)
        val = bits % max
        while to_i32(bits - val + (max - 1)) < 0:
            bits = self.next(31)
            val = bits % max
        return val

    def next_u32_bound(self, max):
        """Unsigned variant of ``next_i32_bound``; ``max`` must stay below 2^31."""
        return self.next_i32_bound(to_i32(max))

    def next_f32(self):
        """Uniform float32 in [0.0, 1.0)."""
        return np.float32(self.next(24)) / np.float32(F32_DIV)

    def next_f64(self):
        """Uniform float in [0.0, 1.0); the 26-bit draw comes first."""
        high = self.next(26) << 27
        low = self.next(27)
        return float(high + low) / F64_DIV

    def _next_gaussian_pair(self):
        """Polar Box-Muller: two independent deviates from one accepted candidate."""
        while True:
            x = 2 * self.next_f64() - 1
            y = 2 * self.next_f64() - 1
            s = x * x + y * y
            if s < 1.0 and s != 0.0:
                break

        multiplier = math.sqrt(-2 * ieee754_log(s) / s)
        return x * multiplier, y * multiplier

    def next_gaussian(self):
        """Gaussian deviate with mean 0.0 and standard deviation 1.0."""
        if self._pending_gaussian is not None:
            value = self._pending_gaussian
            self._pending_gaussian = None
            return value

        v0, v1 = self._next_gaussian_pair()
        self._pending_gaussian = v1
        return v0
