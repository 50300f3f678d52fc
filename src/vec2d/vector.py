from __future__ import annotations

import numbers
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar, Iterator

from . import linalg
from .precision import Real
from .structural import SupportsXY, is_vector, numeric_coercer


@dataclass(slots=True, eq=False)
class Vec2:
    """
    Mutable 2D vector whose components are always of type ``scalar``.

    Any object with ``x`` and ``y`` attributes can be added to, subtracted
    from, compared with and converted to or from a ``Vec2`` without adapters.
    Binary operators return the type of the left operand.

    Invariants:
      - ``x`` and ``y`` are coerced to ``scalar`` on every assignment made
        through the vector's own operations
      - equality is exact, component-wise
    """
    x: Any = 0
    y: Any = 0

    scalar: ClassVar[type] = Real
    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        self.x = self.scalar(self.x)
        self.y = self.scalar(self.y)

    @classmethod
    def from_vector(cls, vector: SupportsXY) -> "Vec2":
        return cls(vector.x, vector.y)

    def to(self, target: Any) -> Any:
        """Convert to a compatible type (or to the type of an example instance)."""
        return linalg.convert(target, self)

    def copy(self) -> "Vec2":
        return type(self)(self.x, self.y)

    def _assign(self, other: SupportsXY) -> "Vec2":
        self.x = self.scalar(other.x)
        self.y = self.scalar(other.y)
        return self

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __eq__(self, other: object) -> bool:
        if not is_vector(other):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y)  # type: ignore[attr-defined]

    def __neg__(self) -> "Vec2":
        return linalg.negate(self)

    def __add__(self, other: Any) -> Any:
        if not is_vector(other):
            return NotImplemented
        return linalg.add(self, other)

    def __radd__(self, other: Any) -> Any:
        if not is_vector(other):
            return NotImplemented
        return linalg.add(other, self)

    def __sub__(self, other: Any) -> Any:
        if not is_vector(other):
            return NotImplemented
        return linalg.subtract(self, other)

    def __rsub__(self, other: Any) -> Any:
        if not is_vector(other):
            return NotImplemented
        return linalg.subtract(other, self)

    def __mul__(self, factor: Any) -> Any:
        # vector * vector is undefined, see multiply_components
        if not isinstance(factor, numbers.Number):
            return NotImplemented
        return linalg.multiply(self, factor)

    def __rmul__(self, factor: Any) -> Any:
        return self.__mul__(factor)

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, numbers.Number):
            return linalg.divide(self, other)
        if is_vector(other):
            return linalg.divide_components(self, other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        if not is_vector(other):
            return NotImplemented
        return linalg.divide_components(other, self)

    def __iadd__(self, other: Any) -> Any:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __isub__(self, other: Any) -> Any:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imul__(self, factor: Any) -> Any:
        result = self.__mul__(factor)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __itruediv__(self, other: Any) -> Any:
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def length_squared(self) -> linalg.Scalar:
        return linalg.norm_squared(self)

    def length(self) -> linalg.Scalar:
        return linalg.norm(self)

    def unit_vector(self) -> "Vec2":
        return linalg.unit_vector(self)

    def round(self) -> "Vec2":
        return linalg.round(self)

    def absolute(self) -> "Vec2":
        return linalg.absolute(self)

    def rectangle_area(self) -> linalg.Scalar:
        return linalg.rectangle_area(self)

    def angle(self) -> linalg.Scalar:
        """Signed angle from the positive x-axis, in radians."""
        return linalg.vector_angle_radians(self)

    # in-place operations

    def scale(self, factor: Any) -> None:
        self._assign(linalg.multiply(self, factor))

    def rotate_radians(self, angle: Any) -> None:
        self._assign(linalg.rotate_vector_radians(self, angle))

    def multiply_components(self, other: SupportsXY) -> None:
        self._assign(linalg.multiply_components(self, other))


class Vec2i(Vec2):
    """Integer vector; division truncates toward zero and dividing by zero raises."""
    __slots__ = ()
    scalar: ClassVar[type] = int


Vec2f = Vec2


@lru_cache(maxsize=None)
def vec2_type(scalar: type) -> type[Vec2]:
    """The ``Vec2`` class whose components are of type ``scalar``."""
    if numeric_coercer(scalar) is None:
        raise TypeError(f"scalar must be a numeric type, got {scalar!r}")
    if scalar is Real:
        return Vec2
    if scalar is int:
        return Vec2i
    name = f"Vec2_{scalar.__name__}"
    return type(name, (Vec2,), {"__slots__": (), "scalar": scalar, "__module__": __name__, "__qualname__": name})
