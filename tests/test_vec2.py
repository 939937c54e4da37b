import math
import warnings

import numpy as np
import pytest

from vec2 import Vec2, Vec2f


def test_defaults_and_coercion():
    v = Vec2()
    assert (v.x, v.y) == (0.0, 0.0)
    v.x = 3
    assert isinstance(v.x, float)
    assert Vec2(np.float64(1.5), 2).x == 1.5


def test_fixed_length_indexing():
    v = Vec2(1, 2)
    assert len(v) == 2
    assert v[0] == 1.0 and v[1] == 2.0
    v[1] = 7
    assert v.y == 7.0
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[2] = 0


def test_iter_and_repr():
    assert tuple(Vec2(1, 2)) == (1.0, 2.0)
    assert repr(Vec2(1, 2)) == "Vec2(x=1.0, y=2.0)"
    assert repr(Vec2f(1, 2)) == "Vec2f(x=1.0, y=2.0)"


def test_equality_is_exact():
    assert Vec2(1, 2) == Vec2(1, 2)
    assert Vec2(1, 2) != Vec2(1, 2 + 1e-12)
    assert Vec2(1, 2) != (1, 2)
    nan = float("nan")
    assert Vec2(nan, 0) != Vec2(nan, 0)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vec2())


def test_operators_return_new_vectors():
    a, b = Vec2(1, 2), Vec2(3, 4)
    assert a + b == Vec2(4, 6)
    assert b - a == Vec2(2, 2)
    assert -a == Vec2(-1, -2)
    assert a * 2 == Vec2(2, 4)
    assert 2 * a == Vec2(2, 4)
    assert (a.x, a.y, b.x, b.y) == (1.0, 2.0, 3.0, 4.0)
    assert a.dot(b) == 11.0
    assert Vec2(3, 4).length() == 5.0


def test_vec2f_rounds_to_single_precision():
    v = Vec2f(0.1, 1 / 3)
    assert v.x == float(np.float32(0.1))
    assert v.y == float(np.float32(1 / 3))
    assert v.x != 0.1
    v[0] = 0.2
    assert v.x == float(np.float32(0.2))
    assert Vec2f(0.5, 0.25) == Vec2(0.5, 0.25)


def test_vec2f_rejects_what_float_rejects():
    with pytest.raises(TypeError):
        Vec2f(None, 0)
    with pytest.raises(TypeError):
        Vec2(None, 0)
    with pytest.raises(ValueError):
        Vec2f("abc", 0)


def test_vec2f_overflow_stores_inf_silently():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        v = Vec2f(1e300, -1e300)
    assert v.x == math.inf
    assert v.y == -math.inf


def test_scale_by_numpy_scalar_returns_vec2():
    a = Vec2(1, 2)
    out = a * np.float32(2)
    assert isinstance(out, Vec2)
    assert out == Vec2(2, 4)
    assert isinstance(a * np.float64(0.5), Vec2)


def test_length_matches_sqrt():
    v = Vec2(1, 1)
    assert v.length() == math.sqrt(2)
