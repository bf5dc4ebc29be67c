try:
    import numpy as np
except ImportError as e:
    raise ImportError(
        "numpy is required but not installed. "
        "Please install it using: pip install numpy"
    ) from e


def to_u32(value):
    """Truncate an integer to its low 32 bits (unsigned)."""
    return value & 0xFFFFFFFF


def to_i32(value):
    """Reinterpret the low 32 bits of an integer as a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def to_u64(value):
    """Truncate an integer to its low 64 bits (unsigned)."""
    return value & 0xFFFFFFFFFFFFFFFF


def to_i64(value):
    """Reinterpret the low 64 bits of an integer as a signed 64-bit value."""
    value &= 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value & 0x8000000000000000 else value


def is_power_of_two(value):
    return value > 0 and (value & -value) == value


def f32_bits(value):
    """IEEE-754 bit pattern of a single-precision float."""
    return int(np.array(value, dtype=np.float32).view(np.uint32).item())


def f64_bits(value):
    """IEEE-754 bit pattern of a double-precision float."""
    return int(np.array(value, dtype=np.float64).view(np.uint64).item())


def f32_from_bits(bits):
    return np.array(bits, dtype=np.uint32).view(np.float32)[()]


def f64_from_bits(bits):
    return float(np.array(bits, dtype=np.uint64).view(np.float64)[()])


def parse_seed(text):
    """Parse a seed given as decimal, hexadecimal (0x...) or negative text."""
    if isinstance(text, int):
        return text
    s = str(text).strip().replace('_', '')
    if not s:
        raise ValueError("Seed cannot be empty")
    try:
        return int(s, 0)
    except ValueError as e:
        raise ValueError(f"Invalid seed: '{text}'") from e


# fdlibm e_log.c constants (the StrictMath log)
_LN2_HI = f64_from_bits(0x3FE62E42FEE00000)
_LN2_LO = f64_from_bits(0x3DEA39EF35793C76)
_TWO54 = f64_from_bits(0x4350000000000000)
_LG1 = f64_from_bits(0x3FE5555555555593)
_LG2 = f64_from_bits(0x3FD999999997FA04)
_LG3 = f64_from_bits(0x3FD2492494229359)
_LG4 = f64_from_bits(0x3FCC71C51D8E78AF)
_LG5 = f64_from_bits(0x3FC7466496CB03DE)
_LG6 = f64_from_bits(0x3FC39A09D078C69F)
_LG7 = f64_from_bits(0x3FC2F112DF3E5244)


def _high_word(x):
    return to_i32(f64_bits(x) >> 32)


def _with_high_word(x, hx):
    return f64_from_bits(((hx & 0xFFFFFFFF) << 32) | (f64_bits(x) & 0xFFFFFFFF))


def ieee754_log(x):
    """Natural logarithm, bit-for-bit with fdlibm ``__ieee754_log``.

    The host libm may differ in the last bit; Gaussian output depends on
    matching the StrictMath result exactly.
    """
    hx = _high_word(x)
    lx = f64_bits(x) & 0xFFFFFFFF

    k = 0
    if hx < 0x00100000:
        if ((hx & 0x7FFFFFFF) | lx) == 0:
            return float('-inf')
        if hx < 0:
            return float('nan')
        # subnormal, scale up
        k -= 54
        x *= _TWO54
        hx = _high_word(x)
    if hx >= 0x7FF00000:
        return x + x

    k += (hx >> 20) - 1023
    hx &= 0x000FFFFF
    i = (hx + 0x95F64) & 0x100000
    # normalize x or x/2
    x = _with_high_word(x, hx | (i ^ 0x3FF00000))
    k += i >> 20
    f = x - 1.0

    if (0x000FFFFF & (2 + hx)) < 3:
        # |f| < 2**-20
        if f == 0.0:
            if k == 0:
                return 0.0
            dk = float(k)
            return dk * _LN2_HI + dk * _LN2_LO
        R = f * f * (0.5 - 0.33333333333333333 * f)
        if k == 0:
            return f - R
        dk = float(k)
        return dk * _LN2_HI - ((R - dk * _LN2_LO) - f)

    s = f / (2.0 + f)
    dk = float(k)
    z = s * s
    i = hx - 0x6147A
    w = z * z
    j = 0x6B851 - hx
    t1 = w * (_LG2 + w * (_LG4 + w * _LG6))
    t2 = z * (_LG1 + w * (_LG3 + w * (_LG5 + w * _LG7)))
    i |= j
    R = t2 + t1
    if i > 0:
        hfsq = 0.5 * f * f
        if k == 0:
            return f - (hfsq - s * (hfsq + R))
        return dk * _LN2_HI - ((hfsq - (s * (hfsq + R) + dk * _LN2_LO)) - f)
    if k == 0:
        return f - s * (f - R)
    return dk * _LN2_HI - ((s * (f - R) - dk * _LN2_LO) - f)
