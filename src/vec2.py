import math
import numbers
from dataclasses import dataclass

import numpy


@dataclass(eq=False)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def __setattr__(self, name: str, value) -> None:
        super().__setattr__(name, float(value))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"{type(self).__name__} index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError(f"{type(self).__name__} index out of range: {index}")

    def __iter__(self):
        return iter((self.x, self.y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Vec2) and self.x == other.x and self.y == other.y

    __hash__ = None  # mutable

    def __add__(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vec2':
        return Vec2(-self.x, -self.y)

    def __mul__(self, other) -> 'Vec2':
        if isinstance(other, numbers.Real):  # Scalar multiplication
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other) -> 'Vec2':
        return self.__mul__(other)

    def dot(self, other: 'Vec2') -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)


class Vec2f(Vec2):
    """Vec2 whose components are stored at single precision."""

    def __setattr__(self, name: str, value) -> None:
        # rounded to float32, stored as a python float by Vec2.__setattr__
        with numpy.errstate(over='ignore'):
            value = numpy.float32(float(value))
        super().__setattr__(name, value)
