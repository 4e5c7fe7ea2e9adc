"""On-screen debug text and shape overlays, gathered per frame."""

import enum
from dataclasses import dataclass, field

from spriteworks.debug import EngineError
from spriteworks.vecmath import Transform, Vector2D

__all__ = [
    "DebugPosType",
    "set_is_debug",
    "switch_is_debug",
    "core_output_string",
    "core_debug_render",
    "print_engine_debug_render",
]

_LINE_HEIGHT = 20


class DebugPosType(enum.Enum):
    RECT = "rect"
    CIRCLE = "circle"


@dataclass
class _DebugText:
    text: str
    pos: Vector2D


@dataclass
class _DebugShape:
    trans: Transform
    pos_type: DebugPosType


@dataclass
class _DebugState:
    enabled: bool = True
    texts: list = field(default_factory=list)
    shapes: list = field(default_factory=list)
    text_pos: Vector2D = field(default_factory=Vector2D)


_state = _DebugState()


def set_is_debug(is_debug):
    _state.enabled = bool(is_debug)


def switch_is_debug():
    _state.enabled = not _state.enabled


def core_output_string(text, pos=None):
    """Queue a line of text; without pos, lines stack down the screen."""
    if not _state.enabled:
        return
    if pos is None:
        _state.texts.append(_DebugText(str(text), _state.text_pos.copy()))
        _state.text_pos.y += _LINE_HEIGHT
    else:
        _state.texts.append(_DebugText(str(text), pos.copy()))


def core_debug_render(trans, pos_type):
    """Queue a rectangle or circle outline for this frame."""
    if not _state.enabled:
        return
    _state.shapes.append(_DebugShape(trans.copy(), pos_type))


def print_engine_debug_render(back_buffer):
    """Draw everything queued onto back_buffer and empty the queues."""
    if not _state.enabled:
        return
    if back_buffer is None:
        raise EngineError("no back buffer to draw debug output on")

    for entry in _state.texts:
        back_buffer.draw_text(entry.text, entry.pos)
    _state.text_pos = Vector2D()
    _state.texts.clear()

    for shape in _state.shapes:
        left_top = shape.trans.center_left_top()
        right_bottom = shape.trans.center_right_bottom()
        bounds = (left_top.ix(), left_top.iy(), right_bottom.ix(), right_bottom.iy())
        if shape.pos_type is DebugPosType.RECT:
            back_buffer.draw_rectangle(*bounds)
        elif shape.pos_type is DebugPosType.CIRCLE:
            back_buffer.draw_ellipse(*bounds)
    _state.shapes.clear()