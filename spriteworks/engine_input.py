"""Keyboard and mouse button state tracking with bound actions."""

import enum
from dataclasses import dataclass, field
from typing import Callable, List

from spriteworks.debug import EngineError

__all__ = ["KeyEvent", "EngineKey", "EngineInput"]

VK_LBUTTON = 0x01
VK_RBUTTON = 0x02
VK_SPACE = 0x20
VK_PRIOR = 0x21
VK_NEXT = 0x22
VK_END = 0x23
VK_HOME = 0x24
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28
VK_SELECT = 0x29
VK_PRINT = 0x2A
VK_EXECUTE = 0x2B
VK_SNAPSHOT = 0x2C
VK_INSERT = 0x2D
VK_DELETE = 0x2E
VK_HELP = 0x2F
VK_NUMPAD0 = 0x60
VK_MULTIPLY = 0x6A
VK_ADD = 0x6B
VK_SEPARATOR = 0x6C
VK_SUBTRACT = 0x6D
VK_DECIMAL = 0x6E
VK_DIVIDE = 0x6F
VK_F1 = 0x70

_KEY_CODES = sorted(
    {ord(c) for c in "QWERTYUIOPASDFGHJKLZXCVBNM1234567890"}
    | {
        VK_LBUTTON, VK_RBUTTON, VK_LEFT, VK_RIGHT, VK_UP, VK_DOWN,
        VK_SPACE, VK_PRIOR, VK_NEXT, VK_END, VK_HOME, VK_SELECT, VK_PRINT,
        VK_EXECUTE, VK_SNAPSHOT, VK_INSERT, VK_DELETE, VK_HELP,
        VK_MULTIPLY, VK_ADD, VK_SEPARATOR, VK_SUBTRACT, VK_DECIMAL, VK_DIVIDE,
    }
    | set(range(VK_NUMPAD0, VK_NUMPAD0 + 10))
    | set(range(VK_F1, VK_F1 + 24))
)


class KeyEvent(enum.Enum):
    DOWN = "down"
    PRESS = "press"
    FREE = "free"
    UP = "up"


@dataclass
class EngineKey:
    """State of one key: down on the first pressed frame, up on the first released one."""

    key: int = -1
    is_down: bool = False
    is_press: bool = False
    is_up: bool = False
    is_free: bool = True
    press_time: float = 0.0
    free_time: float = 0.0
    press_events: List[Callable[[], None]] = field(default_factory=list)
    down_events: List[Callable[[], None]] = field(default_factory=list)
    up_events: List[Callable[[], None]] = field(default_factory=list)
    free_events: List[Callable[[], None]] = field(default_factory=list)

    def _set(self, down, press, free, up):
        self.is_down, self.is_press, self.is_free, self.is_up = down, press, free, up

    def key_check(self, pressed, delta_time):
        """Advance the state by one frame given whether the key is held."""
        if pressed:
            if self.is_press:
                self.press_time += delta_time
            if self.is_free:
                self._set(True, True, False, False)
            elif self.is_down:
                self.free_time = 0.0
                self._set(False, True, False, False)
        else:
            if self.is_free:
                self.free_time += delta_time
            if self.is_press:
                self._set(False, False, True, True)
            elif self.is_up:
                self.press_time = 0.0
                self._set(False, False, True, False)

    def event_check(self):
        """Call the actions bound to every state the key is in."""
        for active, events in (
            (self.is_down, self.down_events),
            (self.is_press, self.press_events),
            (self.is_free, self.free_events),
            (self.is_up, self.up_events),
        ):
            if active:
                for event in list(events):
                    event()


def _code(key):
    if isinstance(key, str):
        if len(key) != 1:
            raise EngineError(f"a key name must be one character: {key!r}")
        return ord(key.upper())
    return int(key)


class EngineInput:
    """All known keys; key_state(code) reports whether a key is held right now."""

    _instance = None

    def __init__(self, key_state=None):
        self._key_state = key_state if key_state is not None else (lambda code: False)
        self._keys = {code: EngineKey(code) for code in _KEY_CODES}

    @classmethod
    def instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _key(self, key):
        try:
            return self._keys[_code(key)]
        except KeyError:
            raise EngineError(f"key is not registered: {key!r}") from None

    def key_check(self, delta_time):
        for code, key in self._keys.items():
            key.key_check(bool(self._key_state(code)), delta_time)

    def event_check(self, delta_time):
        for key in self._keys.values():
            key.event_check()

    def is_double_click(self, key, time):
        state = self._key(key)
        return state.is_down and state.free_time < time

    def is_down(self, key):
        return self._key(key).is_down

    def is_up(self, key):
        return self._key(key).is_up

    def is_press(self, key):
        return self._key(key).is_press

    def press_time(self, key):
        return self._key(key).press_time

    def is_free(self, key):
        return self._key(key).is_free

    def bind_action(self, key, event_type, function):
        state = self._key(key)
        {
            KeyEvent.DOWN: state.down_events,
            KeyEvent.PRESS: state.press_events,
            KeyEvent.FREE: state.free_events,
            KeyEvent.UP: state.up_events,
        }[event_type].append(function)