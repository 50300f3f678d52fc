"""
Free functions over any value with ``x`` and ``y`` attributes.

Arguments may be ``Vec2`` instances or foreign types, and two arguments may be
of different types. Vector results take the concrete type of the first vector
argument; scalar results are of the configured ``precision.Real`` type.
Nothing here raises on floating-point degeneracies: a zero-length input
yields inf/NaN.
"""
from __future__ import annotations

import numbers
from typing import Any, Union

import numpy as np

from .precision import Real
from .structural import SupportsXY, V, construct, rebuild, result_coercer

Scalar = Union[float, np.floating]


def _div(a: Any, b: Any) -> Any:
    # integer division by zero keeps Python's ZeroDivisionError
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        return a / b
    return np.true_divide(a, b)


def _divide_field(like: SupportsXY, name: str, a: Any, b: Any) -> Any:
    # integer result fields keep exact quotients, truncated toward zero
    coercer = result_coercer(like, name)
    if (
        coercer is not None
        and issubclass(coercer, numbers.Integral)
        and isinstance(a, numbers.Integral)
        and isinstance(b, numbers.Integral)
    ):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return _div(a, b)


def _round_half_away(value: Any) -> Any:
    if isinstance(value, numbers.Integral):
        return value
    t = np.trunc(value)
    if np.abs(value - t) >= 0.5:
        return t + np.copysign(1.0, value)
    return t


def convert(target: Any, source: SupportsXY) -> Any:
    """
    Reinterpret ``source`` as ``target``.

    ``target`` is either a compatible type or an instance of one; in the
    latter case its field types decide the coercion when the type carries no
    annotations. Narrowing follows the target numeric type (``int`` truncates).
    """
    if isinstance(target, type):
        return construct(target, source.x, source.y)
    return construct(type(target), source.x, source.y, target)


def norm_squared(v: SupportsXY) -> Scalar:
    return Real(v.x * v.x + v.y * v.y)


def norm(v: SupportsXY) -> Scalar:
    return Real(np.sqrt(Real(v.x * v.x + v.y * v.y)))


def unit_vector(v: V) -> V:
    n = norm(v)
    return rebuild(v, _div(v.x, n), _div(v.y, n))


def round(v: V) -> V:
    """Round each component to the nearest integer, halves away from zero."""
    return rebuild(v, _round_half_away(v.x), _round_half_away(v.y))


def absolute(v: V) -> V:
    return rebuild(v, abs(v.x), abs(v.y))


def negate(v: V) -> V:
    return rebuild(v, -v.x, -v.y)


def add(a: V, b: SupportsXY) -> V:
    return rebuild(a, a.x + b.x, a.y + b.y)


def subtract(a: V, b: SupportsXY) -> V:
    return rebuild(a, a.x - b.x, a.y - b.y)


def multiply(v: V, factor: Any) -> V:
    return rebuild(v, v.x * factor, v.y * factor)


def divide(v: V, divisor: Any) -> V:
    return rebuild(v, _divide_field(v, "x", v.x, divisor), _divide_field(v, "y", v.y, divisor))


def multiply_components(a: V, b: SupportsXY) -> V:
    return rebuild(a, a.x * b.x, a.y * b.y)


def divide_components(a: V, b: SupportsXY) -> V:
    return rebuild(a, _divide_field(a, "x", a.x, b.x), _divide_field(a, "y", a.y, b.y))


def dot_product(a: SupportsXY, b: SupportsXY) -> Scalar:
    return Real(a.x * b.x + a.y * b.y)


def signed_area(a: SupportsXY, b: SupportsXY) -> Scalar:
    """Positive when ``b`` lies counter-clockwise of ``a``."""
    return Real(a.x * b.y - a.y * b.x)


def cross_product(a: SupportsXY, b: SupportsXY) -> Scalar:
    """z component of the 3D cross product of ``a`` and ``b`` in the xy-plane."""
    return signed_area(a, b)


def rectangle_area(v: SupportsXY) -> Scalar:
    return Real(abs(v.x * v.y))


def rhombus_area(a: SupportsXY, b: SupportsXY) -> Scalar:
    """Area of the parallelogram spanned by ``a`` and ``b``."""
    return Real(abs(signed_area(a, b)))


def triangle_area(a: SupportsXY, b: SupportsXY) -> Scalar:
    return Real(rhombus_area(a, b) / 2)


def vector_angle_radians(v: SupportsXY) -> Scalar:
    """Signed angle from the positive x-axis, in (-pi, pi]."""
    return Real(np.arctan2(Real(v.y), Real(v.x)))


def rotate_vector_radians(v: V, angle: Any) -> V:
    angle = Real(angle)
    c = np.cos(angle)
    s = np.sin(angle)
    return rebuild(v, c * v.x - s * v.y, s * v.x + c * v.y)


def angle_between_vectors(a: SupportsXY, b: SupportsXY) -> Scalar:
    """Unsigned angle in [0, pi]; NaN when either vector has zero length."""
    return Real(np.arccos(_div(dot_product(a, b), norm(a) * norm(b))))


def lerp(start: V, end: SupportsXY, alpha: Any) -> V:
    """Linear interpolation; ``alpha`` outside [0, 1] extrapolates."""
    return rebuild(
        start,
        start.x * (1 - alpha) + end.x * alpha,
        start.y * (1 - alpha) + end.y * alpha,
    )


def reflect_unit(v: V, normal: SupportsXY) -> V:
    """
    Reflect ``v`` off a line with the given normal.

    ``normal`` must already be of unit length; use ``reflect`` otherwise.
    """
    d = dot_product(v, normal)
    return rebuild(v, v.x - normal.x * 2 * d, v.y - normal.y * 2 * d)


def reflect(v: V, normal: SupportsXY) -> V:
    return reflect_unit(v, unit_vector(normal))


def make_vector(end: V, start: SupportsXY) -> V:
    return subtract(end, start)


def distance(start: SupportsXY, end: SupportsXY) -> Scalar:
    return norm(make_vector(end, start))


def rotate90ccw(v: V) -> V:
    return rebuild(v, -v.y, v.x)


def rotate90cw(v: V) -> V:
    return rebuild(v, v.y, -v.x)
