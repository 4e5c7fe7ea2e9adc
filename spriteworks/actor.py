"""Actors: objects placed in a level that own components."""

from spriteworks.core_debug import DebugPosType, core_debug_render
from spriteworks.engine_object import EngineObject
from spriteworks.time_event import TimeEvent
from spriteworks.vecmath import Transform, Vector2D

__all__ = ["Actor", "GameMode", "begin_pending_components"]

_DEBUG_MARK_SIZE = 6

_pending_components = []


def begin_pending_components():
    """Start every component created since the last call."""
    pending = list(_pending_components)
    _pending_components.clear()
    for component in pending:
        component.begin_play()


class Actor(EngineObject):
    """Something in a level with a location, components and timed events."""

    def __init__(self, name=""):
        super().__init__(name)
        self.world = None
        self.transform = Transform()
        self.time_eventer = TimeEvent()
        self.components = []
        self.has_begun_play = False
        self.in_current_level = False

    def begin_play(self):
        """Called once when the actor enters its level."""
        self.has_begun_play = True

    def level_change_start(self):
        """Called when the actor's level becomes the current one."""
        self.in_current_level = True

    def level_change_end(self):
        """Called when the actor's level stops being the current one."""
        self.in_current_level = False

    @property
    def actor_location(self):
        return self.transform.location.copy()

    def set_actor_location(self, location):
        self.transform.location = location.copy()

    def add_actor_location(self, direction):
        self.transform.location += direction

    def create_default_sub_object(self, component_type):
        """Create a component owned by this actor; it starts with the next pending batch."""
        component = component_type()
        component.actor = self
        self.components.append(component)
        _pending_components.append(component)
        return component

    def _camera_pos(self):
        if self.world is None:
            return Vector2D()
        return self.world.camera_pos

    def tick(self, delta_time):
        if self.is_debug():
            mark = Transform(
                scale=Vector2D(_DEBUG_MARK_SIZE, _DEBUG_MARK_SIZE),
                location=self.transform.location - self._camera_pos(),
            )
            core_debug_render(mark, DebugPosType.CIRCLE)

        self.time_eventer.update(delta_time)

        for component in list(self.components):
            if component.is_active():
                component.component_tick(delta_time)

    def release_time_check(self, delta_time):
        super().release_time_check(delta_time)
        for component in self.components:
            component.release_time_check(delta_time)

    def release_check(self, delta_time):
        """Drop destroyed components and let the rest run their own checks."""
        super().release_check(delta_time)
        kept = []
        for component in self.components:
            if component.is_destroy():
                continue
            component.release_check(delta_time)
            kept.append(component)
        self.components = kept


class GameMode(Actor):
    """The actor that holds a level's rules."""