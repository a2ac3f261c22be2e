import operator
from typing import Any

U64_BITS = 64
U64_MAX = (1 << U64_BITS) - 1
SIGN_BIT = 1 << (U64_BITS - 1)

# smallest value still accepted as a signed 64-bit bit pattern
S64_MIN = -SIGN_BIT


def to_unsigned(value: Any) -> int:
    """
    Normalize an integer-like value to its unsigned 64-bit magnitude.

    Negative values down to -2**63 are read as signed 64-bit bit patterns, so -1 becomes 2**64 - 1.

    :param value: Any object implementing __index__ (int, numpy integer scalar, ...).
    :return: The value as an int in [0, 2**64 - 1].
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid 64-bit values.")

    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(f"Expected an integer, got {type(value).__name__}.") from None

    if number < S64_MIN or number > U64_MAX:
        raise ValueError(f"{number} does not fit into 64 bits.")

    return number & U64_MAX


def to_signed(value: Any) -> int:
    number = to_unsigned(value)
    if number & SIGN_BIT:
        return number - (1 << U64_BITS)
    return number


def ucomp(a: Any, b: Any) -> int:
    """
    Three-way comparison of two 64-bit values as unsigned magnitudes.

    :return: -1 if a < b, 0 if both bit patterns are identical and 1 if a > b.
    """
    a = to_unsigned(a)
    b = to_unsigned(b)

    if a == b:
        return 0

    # a set sign bit puts the value into the upper half of the unsigned domain
    a_upper = bool(a & SIGN_BIT)
    b_upper = bool(b & SIGN_BIT)
    if a_upper != b_upper:
        return 1 if a_upper else -1

    return -1 if a < b else 1


def umin(a: Any, b: Any) -> int:
    return to_unsigned(a) if ucomp(a, b) <= 0 else to_unsigned(b)


def umax(a: Any, b: Any) -> int:
    return to_unsigned(a) if ucomp(a, b) >= 0 else to_unsigned(b)


def format_hex(value: Any) -> str:
    return f"0x{to_unsigned(value):016x}"
