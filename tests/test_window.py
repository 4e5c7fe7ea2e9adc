import pytest

from spriteworks.debug import EngineError
from spriteworks.vecmath import Vector2D
from spriteworks.window import EngineWindow


def test_initial_state():
    window = EngineWindow()
    assert window.title == "Window"
    assert window.back_buffer is None
    assert window.window_size == Vector2D(0, 0)


def test_set_scale_creates_buffers():
    window = EngineWindow("Game")
    window.set_window_pos_and_scale(Vector2D(10, 20), Vector2D(64, 48))
    assert window.window_size == Vector2D(64, 48)
    assert window.position == Vector2D(10, 20)
    assert window.back_buffer.image_scale() == Vector2D(64, 48)
    assert window.window_image.image_scale() == Vector2D(64, 48)


def test_same_integer_size_keeps_buffer():
    window = EngineWindow()
    window.set_window_pos_and_scale(Vector2D(), Vector2D(32, 32))
    first = window.back_buffer
    window.set_window_pos_and_scale(Vector2D(5, 5), Vector2D(32.4, 32.7))
    assert window.back_buffer is first
    window.set_window_pos_and_scale(Vector2D(), Vector2D(16, 32))
    assert window.back_buffer is not first
    assert window.back_buffer.image_scale() == Vector2D(16, 32)


def test_size_is_copied():
    window = EngineWindow()
    scale = Vector2D(8, 8)
    window.set_window_pos_and_scale(Vector2D(), scale)
    scale.x = 99
    assert window.window_size == Vector2D(8, 8)


def test_zero_size_change_raises():
    window = EngineWindow()
    window.set_window_pos_and_scale(Vector2D(), Vector2D(8, 8))
    with pytest.raises(EngineError):
        window.set_window_pos_and_scale(Vector2D(), Vector2D(0, 8))


def test_set_title():
    window = EngineWindow()
    window.set_window_title("Level 1")
    assert window.title == "Level 1"