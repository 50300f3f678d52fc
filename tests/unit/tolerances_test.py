import math

from pytest import raises

from vec2d import Vec2, is_close, is_unit, near_zero, vectors_close


def test_is_close():
    assert is_close(1.0, 1.0 + 1e-9)
    assert not is_close(1.0, 1.1)
    assert is_close(1.0, 1.05, rel_tol=0.1)
    assert is_close(0.0, 1e-8, abs_tol=1e-7)
    assert not is_close(math.inf, 1e300)
    assert not is_close(math.nan, math.nan)


def test_is_close_methods():
    # diff 0.1 is 10% of 1.0 but under 10% of 1.1
    assert not is_close(1.0, 1.1, rel_tol=0.095, method="strong")
    assert is_close(1.0, 1.1, rel_tol=0.095, method="weak")
    assert is_close(1.0, 1.1, rel_tol=0.095, method="asymmetric")
    assert is_close(1.0, 1.1, rel_tol=0.1, method="average")


def test_is_close_rejects_bad_arguments():
    with raises(ValueError):
        is_close(1.0, 1.0, method="loose")
    with raises(ValueError):
        is_close(1.0, 1.0, rel_tol=-1.0)


def test_near_zero():
    assert near_zero(1e-7)
    assert not near_zero(1e-3)


def test_vectors_close_and_is_unit():
    assert vectors_close(Vec2(1, 2), Vec2(1.0000001, 2))
    assert not vectors_close(Vec2(1, 2), Vec2(1.1, 2))
    assert is_unit(Vec2(0.6, 0.8))
    assert not is_unit(Vec2(1, 1))
