"""Components that attach to actors."""

from spriteworks.debug import EngineError
from spriteworks.engine_object import EngineObject
from spriteworks.vecmath import Transform

__all__ = ["ActorComponent", "SceneComponent"]


class ActorComponent(EngineObject):
    """A part of an actor; it lives and dies with its owner."""

    def __init__(self, name=""):
        super().__init__(name)
        self.actor = None
        self.has_begun_play = False
        self.tick_time = 0.0

    def begin_play(self):
        """Called once after the owning actor has entered a level."""
        self.has_begun_play = True

    def component_tick(self, delta_time):
        """Called every frame while the component is active; counts time ticked."""
        self.tick_time += delta_time

    def is_active(self):
        own = super().is_active()
        if self.actor is None:
            return own
        return own and self.actor.is_active()

    def is_destroy(self):
        own = super().is_destroy()
        if self.actor is None:
            return own
        return own or self.actor.is_destroy()


class SceneComponent(ActorComponent):
    """A component with a location relative to its actor and a scale of its own."""

    def __init__(self, name=""):
        super().__init__(name)
        self.transform = Transform()

    @property
    def component_location(self):
        return self.transform.location.copy()

    @component_location.setter
    def component_location(self, location):
        self.transform.location = location.copy()

    @property
    def component_scale(self):
        return self.transform.scale.copy()

    @component_scale.setter
    def component_scale(self, scale):
        self.transform.scale = scale.copy()

    def actor_transform(self):
        """The component's transform placed in world space by its actor."""
        if self.actor is None:
            raise EngineError("the component is not attached to an actor")
        return Transform(
            scale=self.transform.scale.copy(),
            location=self.actor.transform.location + self.transform.location,
        )