"""
Functions for operating on 2 element double precision vectors.

The last parameter is typically the output vector (``result``) and a
vector can be both an input and the output of every function except
where noted. Mutating functions return ``result`` so calls can be chained.
"""
import math
from typing import Sequence

import numpy

from vec2 import Vec2


def create() -> Vec2:
    """Creates a vector with both components initialized to zero."""
    return Vec2()


def set_from_values(vec: Vec2, v0: float, v1: float) -> Vec2:
    vec.x = v0
    vec.y = v1
    return vec


def set_from_vector(vec: Vec2, src: Vec2) -> Vec2:
    """
    Copies src into vec.
    src may be of another precision (e.g. a Vec2f); the value is widened
    or rounded by vec on assignment.
    """
    vec.x = src.x
    vec.y = src.y
    return vec


def set_from_sequence(vec: Vec2, src: Sequence[float]) -> Vec2:
    """Copies the first two elements of any indexable sequence into vec."""
    vec.x = src[0]
    vec.y = src[1]
    return vec


def add(vec0: Vec2, vec1: Vec2, result: Vec2) -> Vec2:
    result.x = vec0.x + vec1.x
    result.y = vec0.y + vec1.y
    return result


def subtract(vec0: Vec2, vec1: Vec2, result: Vec2) -> Vec2:
    """Stores vec0 - vec1 into result."""
    result.x = vec0.x - vec1.x
    result.y = vec0.y - vec1.y
    return result


def negate(vec0: Vec2, result: Vec2) -> Vec2:
    result.x = -vec0.x
    result.y = -vec0.y
    return result


def scale(vec0: Vec2, scalar: float, result: Vec2) -> Vec2:
    result.x = vec0.x * scalar
    result.y = vec0.y * scalar
    return result


def magnitude_squared(vec0: Vec2) -> float:
    x, y = vec0.x, vec0.y
    return x * x + y * y


def magnitude(vec0: Vec2) -> float:
    return math.sqrt(magnitude_squared(vec0))


def normalize(vec0: Vec2, result: Vec2) -> Vec2:
    """
    Stores the unit vector of vec0 into result.
    A zero vector is not guarded against: its components come out as NaN.
    """
    with numpy.errstate(divide='ignore', invalid='ignore'):
        ilen = numpy.float64(1.0) / numpy.float64(magnitude(vec0))
        x = vec0.x * ilen
        y = vec0.y * ilen
    result.x = x
    result.y = y
    return result


def dot(vec0: Vec2, vec1: Vec2) -> float:
    return vec0.x * vec1.x + vec0.y * vec1.y


def distance_squared(vec0: Vec2, vec1: Vec2) -> float:
    x = vec0.x - vec1.x
    y = vec0.y - vec1.y
    return x * x + y * y


def distance(vec0: Vec2, vec1: Vec2) -> float:
    return math.sqrt(distance_squared(vec0, vec1))


def direction(vec0: Vec2, vec1: Vec2, result: Vec2) -> Vec2:
    """
    Stores the unit vector pointing from point vec0 to point vec1.
    If the points are equal, or either has a NaN component, the result is
    all zeros.
    """
    x = vec1.x - vec0.x
    y = vec1.y - vec0.y
    d = math.sqrt(x * x + y * y)
    if d and not math.isnan(d):
        d = 1 / d
        result.x = x * d
        result.y = y * d
    else:
        result.x = result.y = 0
    return result


def lerp(vec0: Vec2, vec1: Vec2, f: float, result: Vec2) -> Vec2:
    """
    Linearly interpolates from vec0 to vec1 by f.
    f should be in [0, 1]; it is not clamped and results outside that
    range are undefined.
    """
    x, y = vec0.x, vec0.y
    result.x = (vec1.x - x) * f + x
    result.y = (vec1.y - y) * f + y
    return result


def equals(vec0: Vec2, vec1: Vec2) -> bool:
    """Exact component equality, no tolerance."""
    return vec0.x == vec1.x and vec0.y == vec1.y
