"""Personal account pension divisor (计发月数)."""

import math
from types import MappingProxyType

# 个人账户养老金计发月数表（退休年龄 → 月数）
PENSION_DIVISOR_TABLE = MappingProxyType({
    40: 233, 41: 230, 42: 226, 43: 223, 44: 220,
    45: 216, 46: 212, 47: 208, 48: 204, 49: 199,
    50: 195, 51: 190, 52: 185, 53: 180, 54: 175,
    55: 170, 56: 164, 57: 158, 58: 152, 59: 145,
    60: 139, 61: 132, 62: 125, 63: 117, 64: 109,
    65: 101, 66: 93, 67: 84, 68: 75, 69: 65,
    70: 56,
})

MIN_DIVISOR_AGE = 40
MAX_DIVISOR_AGE = 70
FALLBACK_DIVISOR = 139  # 60岁


def pension_divisor(age: float) -> int:
    """Return divisor for claim age. Floors to whole years, then clamps to the table."""
    clamped = max(MIN_DIVISOR_AGE, min(MAX_DIVISOR_AGE, math.floor(age)))
    return PENSION_DIVISOR_TABLE.get(clamped, FALLBACK_DIVISOR)
