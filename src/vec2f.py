"""
Single precision twin of vec2d.

Precision lives in the output record: every function below writes into a
Vec2f, which rounds each component to float32 on assignment, so the
arithmetic itself is shared with vec2d.
"""
from vec2 import Vec2f
from vec2d import (
    set_from_values, set_from_vector, set_from_sequence,
    add, subtract, negate, scale,
    magnitude_squared, magnitude, normalize,
    dot, distance_squared, distance, direction,
    lerp, equals,
)

__all__ = [
    'create',
    'set_from_values', 'set_from_vector', 'set_from_sequence',
    'add', 'subtract', 'negate', 'scale',
    'magnitude_squared', 'magnitude', 'normalize',
    'dot', 'distance_squared', 'distance', 'direction',
    'lerp', 'equals',
]


def create() -> Vec2f:
    return Vec2f()
