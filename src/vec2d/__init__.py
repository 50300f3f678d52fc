from . import linalg
from .linalg import convert
from .precision import PRECISION, Real
from .structural import SupportsXY, is_vector
from .tolerances import is_close, near_zero, vectors_close, is_unit
from .vector import Vec2, Vec2f, Vec2i, vec2_type

__all__ = [
    "linalg",
    "convert",
    "PRECISION",
    "Real",
    "SupportsXY",
    "is_vector",
    "is_close",
    "near_zero",
    "vectors_close",
    "is_unit",
    "Vec2",
    "Vec2f",
    "Vec2i",
    "vec2_type",
]
