from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from vec2d import Vec2, Vec2i, linalg
from vec2d.structural import field_annotations, result_coercer


@dataclass
class Marker:
    x: Optional[float]
    y: float | None


def test_annotation_cache_is_bounded():
    assert field_annotations.cache_info().maxsize == 256


def test_non_numeric_annotation_falls_back_to_field_type():
    assert result_coercer(Marker(1.0, 2.0), "x") is float
    assert result_coercer(Marker(1.0, 2.0), "y") is float
    r = linalg.add(Marker(1.0, 2.0), Vec2(1, 1))
    assert type(r) is Marker
    assert type(r.x) is float and type(r.y) is float
    assert r == Marker(2.0, 3.0)


def test_result_coercer_of_vec2_types():
    assert result_coercer(Vec2i(1, 2), "x") is int
    assert result_coercer(Vec2(1, 2), "y") is type(Vec2().y)
