"""
Approximate comparisons for callers and tests.

The vector type itself compares exactly; these helpers are for code that
needs to absorb floating-point rounding (single precision in particular).
"""
from __future__ import annotations

import math

from .structural import SupportsXY

_METHODS = ("asymmetric", "strong", "weak", "average")


def is_close(
    a: float,
    b: float,
    rel_tol: float = 1e-6,
    abs_tol: float = 0.0,
    method: str = "weak",
) -> bool:
    if method not in _METHODS:
        raise ValueError('method must be one of: "asymmetric","strong","weak","average"')
    if rel_tol < 0.0 or abs_tol < 0.0:
        raise ValueError("error tolerances must be non-negative")
    a = float(a)
    b = float(b)
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    diff = abs(b - a)
    if diff <= abs_tol:
        return True
    if method == "asymmetric":
        return diff <= abs(rel_tol * b)
    if method == "strong":
        return diff <= abs(rel_tol * b) and diff <= abs(rel_tol * a)
    if method == "weak":
        return diff <= abs(rel_tol * b) or diff <= abs(rel_tol * a)
    # average
    return diff <= abs(rel_tol * (a + b) * 0.5)


def near_zero(val: float, abs_tol: float = 1e-6) -> bool:
    return is_close(val, 0.0, rel_tol=0.0, abs_tol=abs_tol)


def vectors_close(a: SupportsXY, b: SupportsXY, rel_tol: float = 1e-6, abs_tol: float = 1e-6) -> bool:
    return is_close(a.x, b.x, rel_tol=rel_tol, abs_tol=abs_tol) and is_close(a.y, b.y, rel_tol=rel_tol, abs_tol=abs_tol)


def is_unit(v: SupportsXY, abs_tol: float = 1e-6) -> bool:
    return near_zero(math.hypot(float(v.x), float(v.y)) - 1.0, abs_tol=abs_tol)
