from __future__ import annotations

import logging
import numbers
import typing
from functools import lru_cache
from typing import Any, Callable, Optional, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

Coercer = Optional[Callable[[Any], Any]]


@runtime_checkable
class SupportsXY(Protocol):
    """Anything with readable numeric ``x`` and ``y`` attributes."""

    x: Any
    y: Any


V = TypeVar("V", bound=SupportsXY)


def is_vector(obj: object) -> bool:
    return hasattr(obj, "x") and hasattr(obj, "y")


def numeric_coercer(tp: object) -> Coercer:
    if isinstance(tp, type) and issubclass(tp, numbers.Number):
        return tp
    return None


@lru_cache(maxsize=256)
def field_annotations(cls: type) -> dict[str, object]:
    """Resolved ``x``/``y`` annotations of ``cls`` (empty when it has none)."""
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        logger.debug("cannot resolve annotations of %s (%s), fields left as is", cls.__qualname__, exc)
        return {}
    return {name: hints[name] for name in ("x", "y") if name in hints}


def _field_coercer(hints: dict[str, object], name: str, sample: object) -> Coercer:
    if name in hints:
        coercer = numeric_coercer(hints[name])
        if coercer is not None:
            return coercer
    if sample is not None:
        return numeric_coercer(type(getattr(sample, name)))
    return None


def result_coercer(like: SupportsXY, name: str) -> Coercer:
    """Coercer applied to field ``name`` when rebuilding a value like ``like``."""
    return _field_coercer(field_annotations(type(like)), name, like)


def construct(cls: type[V], x: Any, y: Any, sample: Optional[SupportsXY] = None) -> V:
    """
    Build an instance of the compatible type ``cls`` from two components.

    Each component is coerced to the field type of ``cls``: the annotated type
    of ``x``/``y`` when it names a numeric type, else (missing or non-numeric
    annotations such as ``Optional[float]``) the runtime type of the matching
    field of ``sample``. Values are passed through otherwise.
    ``cls`` must accept ``x=`` and ``y=`` keyword arguments.
    """
    hints = field_annotations(cls)
    cx = _field_coercer(hints, "x", sample)
    cy = _field_coercer(hints, "y", sample)
    if cx is not None:
        x = cx(x)
    if cy is not None:
        y = cy(y)
    return cls(x=x, y=y)


def rebuild(like: V, x: Any, y: Any) -> V:
    """New value of the same concrete type as ``like``."""
    return construct(type(like), x, y, like)
