import math

import pytest

from spriteworks.debug import EngineError
from spriteworks.vecmath import (
    Color,
    CollisionType,
    IntPoint,
    Transform,
    Vector2D,
    circle_to_circle,
    circle_to_rect,
    clamp,
    clamp_max,
    clamp_min,
    collision,
    lerp,
    rect_to_circle,
    rect_to_rect,
)


def test_clamp_family():
    assert clamp(5, 0, 3) == 3
    assert clamp(-2, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
    assert clamp_max(9, 4) == 4
    assert clamp_min(1, 4) == 4
    assert clamp_min(7, 4) == 7


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_length_and_normalize():
    v = Vector2D(3, 4)
    assert v.length() == pytest.approx(5.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v == Vector2D(3, 4)
    v.normalize()
    assert v == n


def test_normalize_zero_vector_unchanged():
    v = Vector2D()
    v.normalize()
    assert v == Vector2D(0, 0)


def test_truncation_and_point():
    v = Vector2D(-1.7, 2.9)
    assert v.ix() == -1
    assert v.convert_to_point() == IntPoint(v.ix(), v.iy())
    assert v.equal_to_int(Vector2D(-1.2, 2.1))


def test_operators():
    a = Vector2D(1, 2)
    b = Vector2D(3, 5)
    assert (a + b) - b == a
    assert -(-a) == a
    assert (a * 2) / 2 == a
    assert (b / b) == Vector2D(1, 1)
    c = a.copy()
    c += b
    c -= b
    assert c == a
    c *= Vector2D(0, 1)
    assert c.is_zeroed()
    assert a.dot(Vector2D(0, 1)) == a.y


def test_constants_are_not_shared():
    v = Vector2D.ZERO
    v += Vector2D.RIGHT
    assert Vector2D.ZERO == Vector2D(0, 0)
    assert Vector2D.LEFT == -Vector2D.RIGHT
    assert Vector2D.UP == -Vector2D.DOWN


def test_str_format():
    assert str(Vector2D(1.5, -2)) == "X : [1.500000] Y : [-2.000000]"


def test_int_point_ops():
    p = IntPoint(-3, 3) // 2
    assert p.x == -p.y
    q = IntPoint.LEFT + IntPoint.RIGHT
    assert q == IntPoint(0, 0)
    q += IntPoint.UP
    assert q == IntPoint.UP


def test_color_round_trip_and_equality():
    c = Color(10, 20, 30, 40)
    back = Color.from_value(c.value())
    assert (back.r, back.g, back.b, back.a) == (10, 20, 30, 40)
    assert Color.RED == Color(255, 0, 0, 255)
    assert Color.MAGENTA != Color.CYAN
    assert Color() == Color.WHITE


def _rect(x, y, w, h):
    return Transform(scale=Vector2D(w, h), location=Vector2D(x, y))


def test_rect_to_rect():
    assert rect_to_rect(_rect(0, 0, 10, 10), _rect(5, 5, 10, 10))
    assert not rect_to_rect(_rect(0, 0, 10, 10), _rect(50, 0, 10, 10))


def test_circle_to_circle():
    assert circle_to_circle(_rect(0, 0, 10, 10), _rect(5, 0, 10, 10))
    assert not circle_to_circle(_rect(0, 0, 10, 10), _rect(10, 0, 10, 10))


def test_circle_rect_symmetry():
    circle = _rect(12, 0, 6, 6)
    box = _rect(0, 0, 20, 20)
    assert circle_to_rect(circle, box) == rect_to_circle(box, circle)
    far = _rect(100, 100, 6, 6)
    assert not circle_to_rect(far, box)


def test_collision_dispatch():
    a = _rect(0, 0, 10, 10)
    b = _rect(3, 3, 10, 10)
    assert collision(CollisionType.RECT, a, CollisionType.RECT, b) == rect_to_rect(a, b)
    assert collision(CollisionType.CIRCLE, a, CollisionType.RECT, b) == circle_to_rect(a, b)


def test_collision_point_type_raises():
    with pytest.raises(EngineError):
        collision(CollisionType.POINT, Transform(), CollisionType.RECT, Transform())


def test_transform_edges_consistent():
    t = _rect(4, 6, 2, 8)
    assert t.center_left_top() == Vector2D(t.center_left(), t.center_top())
    assert t.center_right_bottom() == Vector2D(t.center_right(), t.center_bottom())
    assert t.center_left_bottom() == Vector2D(t.center_left(), t.center_bottom())
    assert t.center_right_top() == Vector2D(t.center_right(), t.center_top())
    copy = t.copy()
    copy.location += Vector2D(1, 1)
    assert t.location == Vector2D(4, 6)
    assert not math.isnan(t.center_left())