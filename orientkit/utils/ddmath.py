"""Double-double arithmetic built from error-free float transforms.

A double-double value is a pair (hi, lo) with |lo| <= ulp(hi) / 2 whose
unevaluated sum carries roughly 106 bits of precision. The transforms are
exact only while no intermediate overflows or underflows; callers must keep
operands inside the range checked by ``in_safe_range``.
"""

from __future__ import annotations

DD = tuple[float, float]

# Dekker splitter for 53-bit doubles: 2**27 + 1
SPLITTER = 134217729.0

SAFE_MIN = 1e-100
SAFE_MAX = 1e150


def in_safe_range(*values: float) -> bool:
    """True if every nonzero value has magnitude in [SAFE_MIN, SAFE_MAX]."""
    for v in values:
        a = abs(v)
        if a != 0.0 and not (SAFE_MIN <= a <= SAFE_MAX):
            return False
    return True


def fast_two_sum(a: float, b: float) -> DD:
    # requires |a| >= |b|
    s = a + b
    return s, b - (s - a)


def two_sum(a: float, b: float) -> DD:
    s = a + b
    bv = s - a
    av = s - bv
    return s, (a - av) + (b - bv)


def two_diff(a: float, b: float) -> DD:
    d = a - b
    bv = a - d
    av = d + bv
    return d, (a - av) + (bv - b)


def split(a: float) -> DD:
    c = SPLITTER * a
    hi = c - (c - a)
    return hi, a - hi


def two_product(a: float, b: float) -> DD:
    p = a * b
    ahi, alo = split(a)
    bhi, blo = split(b)
    err = ((ahi * bhi - p) + ahi * blo + alo * bhi) + alo * blo
    return p, err


def dd_mul(a: DD, b: DD) -> DD:
    p, e = two_product(a[0], b[0])
    e += a[0] * b[1] + a[1] * b[0]
    return fast_two_sum(p, e)


def dd_sub(a: DD, b: DD) -> DD:
    s, e = two_diff(a[0], b[0])
    e += a[1] - b[1]
    return fast_two_sum(s, e)
