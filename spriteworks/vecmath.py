"""2D vectors, integer points, colours, transforms and collision tests."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from spriteworks.debug import EngineError

__all__ = [
    "clamp",
    "clamp_max",
    "clamp_min",
    "lerp",
    "Vector2D",
    "IntPoint",
    "Color",
    "CollisionType",
    "Transform",
    "collision",
    "point_to_circle",
    "point_to_rect",
    "rect_to_rect",
    "rect_to_circle",
    "circle_to_circle",
    "circle_to_rect",
]


def clamp(value, min_value, max_value):
    """Limit value to the closed range [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def clamp_max(value, max_value):
    """Limit value from above."""
    return max_value if value > max_value else value


def clamp_min(value, min_value):
    """Limit value from below."""
    return min_value if value < min_value else value


def lerp(a, b, alpha):
    """Linear interpolation between a and b."""
    return a * (1 - alpha) + b * alpha


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class _Const:
    """Class-level constant that hands out a fresh copy on every access."""

    def __init__(self, factory, *args):
        self._factory = factory
        self._args = args

    def __get__(self, obj, owner):
        return self._factory(*self._args)


@dataclass(eq=False)
class Vector2D:
    """Mutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)

    def ix(self):
        return int(self.x)

    def iy(self):
        return int(self.y)

    def hx(self):
        return self.x * 0.5

    def hy(self):
        return self.y * 0.5

    def is_zeroed(self):
        """True when either component is zero."""
        return self.x == 0.0 or self.y == 0.0

    def half(self):
        return Vector2D(self.x * 0.5, self.y * 0.5)

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def convert_to_point(self):
        return IntPoint(self.ix(), self.iy())

    def normalize(self):
        """Scale this vector to unit length in place; zero vectors are left alone."""
        length = self.length()
        if 0.0 < length and not math.isnan(length):
            self.x /= length
            self.y /= length

    def normalized(self):
        """Return a unit-length copy."""
        result = self.copy()
        result.normalize()
        return result

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def equal_to_int(self, other):
        return self.ix() == other.ix() and self.iy() == other.iy()

    def copy(self):
        return Vector2D(self.x, self.y)

    def __add__(self, other):
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vector2D(-self.x, -self.y)

    def __mul__(self, value):
        return Vector2D(self.x * value, self.y * value)

    def __truediv__(self, other):
        if isinstance(other, Vector2D):
            return Vector2D(self.x / other.x, self.y / other.y)
        return Vector2D(self.x / other, self.y / other)

    def __iadd__(self, other):
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other):
        if isinstance(other, Vector2D):
            self.x *= other.x
            self.y *= other.y
        else:
            self.x *= other
            self.y *= other
        return self

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __str__(self):
        return f"X : [{self.x:f}] Y : [{self.y:f}]"


Vector2D.ZERO = _Const(Vector2D, 0.0, 0.0)
Vector2D.LEFT = _Const(Vector2D, -1.0, 0.0)
Vector2D.RIGHT = _Const(Vector2D, 1.0, 0.0)
Vector2D.UP = _Const(Vector2D, 0.0, -1.0)
Vector2D.DOWN = _Const(Vector2D, 0.0, 1.0)


@dataclass(eq=False)
class IntPoint:
    """Mutable 2D point of integers."""

    x: int = 0
    y: int = 0

    def __post_init__(self):
        self.x = int(self.x)
        self.y = int(self.y)

    def __add__(self, other):
        return IntPoint(self.x + other.x, self.y + other.y)

    def __floordiv__(self, value):
        """Divide both components, truncating toward zero."""
        return IntPoint(_trunc_div(self.x, value), _trunc_div(self.y, value))

    def __iadd__(self, other):
        self.x += other.x
        self.y += other.y
        return self

    def __eq__(self, other):
        if not isinstance(other, IntPoint):
            return NotImplemented
        return self.x == other.x and self.y == other.y


IntPoint.LEFT = _Const(IntPoint, -1, 0)
IntPoint.RIGHT = _Const(IntPoint, 1, 0)
IntPoint.UP = _Const(IntPoint, 0, -1)
IntPoint.DOWN = _Const(IntPoint, 0, 1)


@dataclass(frozen=True, eq=False)
class Color:
    """RGBA colour; equality ignores alpha."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    @classmethod
    def from_value(cls, value):
        """Build a colour from a packed 32-bit value (R in the lowest byte)."""
        value &= 0xFFFFFFFF
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF, (value >> 24) & 0xFF)

    def value(self):
        """Packed 32-bit value with R in the lowest byte."""
        return (self.r & 0xFF) | ((self.g & 0xFF) << 8) | ((self.b & 0xFF) << 16) | ((self.a & 0xFF) << 24)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self):
        return hash((self.r, self.g, self.b))


Color.WHITE = Color(255, 255, 255, 0)
Color.BLACK = Color(0, 0, 0, 0)
Color.MAGENTA = Color(255, 0, 255, 0)
Color.CYAN = Color(0, 255, 255, 0)
Color.YELLOW = Color(255, 255, 0, 0)
Color.RED = Color(255, 0, 0, 0)


class CollisionType(enum.Enum):
    POINT = 0
    RECT = 1
    CIRCLE = 2


@dataclass
class Transform:
    """Scale and centre location of an axis-aligned shape."""

    scale: Vector2D = field(default_factory=Vector2D)
    location: Vector2D = field(default_factory=Vector2D)

    def copy(self):
        return Transform(self.scale.copy(), self.location.copy())

    def center_left_top(self):
        return self.location - self.scale.half()

    def center_left_bottom(self):
        return Vector2D(self.location.x - self.scale.hx(), self.location.y + self.scale.hy())

    def center_right_top(self):
        return Vector2D(self.location.x + self.scale.hx(), self.location.y - self.scale.hy())

    def center_right_bottom(self):
        return self.location + self.scale.half()

    def center_left(self):
        return self.location.x - self.scale.hx()

    def center_right(self):
        return self.location.x + self.scale.hx()

    def center_top(self):
        return self.location.y - self.scale.hy()

    def center_bottom(self):
        return self.location.y + self.scale.hy()


def point_to_circle(left, right):
    point = left.copy()
    point.scale = Vector2D()
    return circle_to_circle(point, right)


def point_to_rect(left, right):
    point = left.copy()
    point.scale = Vector2D()
    return rect_to_rect(point, right)


def circle_to_circle(left, right):
    distance = (left.location - right.location).length()
    return distance < left.scale.hx() + right.scale.hx()


def rect_to_rect(left, right):
    if left.center_left() > right.center_right():
        return False
    if left.center_right() < right.center_left():
        return False
    if left.center_top() > right.center_bottom():
        return False
    if left.center_bottom() < right.center_top():
        return False
    return True


def rect_to_circle(left, right):
    return circle_to_rect(right, left)


def circle_to_rect(left, right):
    wide = right.copy()
    wide.scale.x += left.scale.x
    tall = right.copy()
    tall.scale.y += left.scale.x

    if point_to_rect(left, wide) or point_to_rect(left, tall):
        return True

    corner_circle = Transform(scale=left.scale.copy())
    for corner in (
        right.center_left_top(),
        right.center_left_bottom(),
        right.center_right_top(),
        right.center_right_bottom(),
    ):
        corner_circle.location = corner
        if point_to_circle(left, corner_circle):
            return True
    return False


_COLLISION_TESTS = {
    (CollisionType.RECT, CollisionType.RECT): rect_to_rect,
    (CollisionType.CIRCLE, CollisionType.CIRCLE): circle_to_circle,
    (CollisionType.RECT, CollisionType.CIRCLE): rect_to_circle,
    (CollisionType.CIRCLE, CollisionType.RECT): circle_to_rect,
}


def collision(left_type, left, right_type, right):
    """Test two shapes of the given types for overlap."""
    try:
        test = _COLLISION_TESTS[(left_type, right_type)]
    except KeyError:
        raise EngineError(
            f"no collision test between {left_type.name} and {right_type.name}"
        ) from None
    return test(left, right)