"""Collision shapes attached to actors."""

import enum

from spriteworks.component import SceneComponent
from spriteworks.core_debug import DebugPosType, core_debug_render
from spriteworks.debug import EngineError
from spriteworks.vecmath import CollisionType, Vector2D, collision

__all__ = ["Collision2D"]


def _group_number(group):
    if isinstance(group, enum.Enum):
        return int(group.value)
    return int(group)


class Collision2D(SceneComponent):
    """A rectangle or circle in a numbered collision group.

    Enter, stay and end callbacks receive the other shape's actor.
    """

    def __init__(self, name=""):
        super().__init__(name)
        self.collision_type = CollisionType.CIRCLE
        self._group = -1
        self._touching = set()
        self.enter = None
        self.stay = None
        self.end = None

    @property
    def group(self):
        return self._group

    @group.setter
    def group(self, value):
        self._group = _group_number(value)

    def _world(self):
        return None if self.actor is None else self.actor.world

    def begin_play(self):
        super().begin_play()
        if self._group < 0:
            raise EngineError("a collision group cannot be negative")
        world = self._world()
        if world is None:
            raise EngineError("the collision's actor is not in a level")
        world.push_collision(self)
        if self.enter is not None or self.stay is not None or self.end is not None:
            world.push_check_collision(self)

    def component_tick(self, delta_time):
        super().component_tick(delta_time)
        if not (self.is_debug() or self.actor.is_debug()):
            return
        trans = self.actor_transform()
        world = self._world()
        if world is not None:
            trans.location -= world.camera_pos
        if self.collision_type is CollisionType.RECT:
            core_debug_render(trans, DebugPosType.RECT)
        elif self.collision_type is CollisionType.CIRCLE:
            core_debug_render(trans, DebugPosType.CIRCLE)

    def collision(self, other_group, next_pos=None, limit=None):
        """Actors of other_group overlapping this shape moved by next_pos.

        At most limit actors are returned when limit is given.
        """
        if not self.is_active():
            return []
        world = self._world()
        if world is None:
            return []
        offset = Vector2D() if next_pos is None else next_pos
        others = world.collisions.get(_group_number(other_group), ())

        result = []
        for other in list(others):
            if other is self or not other.is_active():
                continue
            this_trans = self.actor_transform()
            this_trans.location += offset
            if collision(self.collision_type, this_trans, other.collision_type, other.actor_transform()):
                result.append(other.actor)
                if limit is not None and len(result) >= limit:
                    break
        return result

    def collision_once(self, other_group, next_pos=None):
        """The first overlapping actor of other_group, or None."""
        found = self.collision(other_group, next_pos, 1)
        return found[0] if found else None

    def collision_all(self, other_group, next_pos=None):
        return self.collision(other_group, next_pos)

    def _register_check(self):
        world = self._world()
        if world is not None:
            world.push_check_collision(self)

    def set_collision_enter(self, function):
        self.enter = function
        self._register_check()

    def set_collision_stay(self, function):
        self.stay = function
        self._register_check()

    def set_collision_end(self, function):
        self.end = function
        self._register_check()

    def collision_event_check(self, other):
        """Fire enter, stay or end depending on how contact with other changed."""
        touching = collision(
            self.collision_type,
            self.actor_transform(),
            other.collision_type,
            other.actor_transform(),
        )
        if touching:
            if other not in self._touching:
                if self.enter is not None:
                    self.enter(other.actor)
                self._touching.add(other)
            elif self.stay is not None:
                self.stay(other.actor)
        elif other in self._touching:
            if self.end is not None:
                self.end(other.actor)
            self._touching.discard(other)