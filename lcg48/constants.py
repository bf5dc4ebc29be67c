"""Constants of the 48-bit linear congruential generator."""

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB

STATE_BITS = 48
MASK = (1 << STATE_BITS) - 1

# Float divisors: 24 bits of mantissa for f32, 53 for f64
F32_DIV = float(1 << 24)
F64_DIV = float(1 << 53)

INT32_MAX = (1 << 31) - 1
