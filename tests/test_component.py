import pytest

from spriteworks.actor import Actor
from spriteworks.component import ActorComponent, SceneComponent
from spriteworks.debug import EngineError
from spriteworks.vecmath import Vector2D


def _attach(component_type):
    actor = Actor()
    component = component_type()
    component.actor = actor
    return actor, component


def test_component_inactive_when_actor_inactive():
    actor, component = _attach(ActorComponent)
    assert component.is_active() is True
    actor.set_active(False)
    assert component.is_active() is False


def test_component_inactive_when_itself_inactive():
    _, component = _attach(ActorComponent)
    component.set_active(False)
    assert component.is_active() is False


def test_component_destroyed_with_actor():
    actor, component = _attach(ActorComponent)
    assert component.is_destroy() is False
    actor.destroy()
    assert component.is_destroy() is True
    assert component.is_active() is False


def test_component_own_destroy_leaves_actor():
    actor, component = _attach(ActorComponent)
    component.destroy()
    assert component.is_destroy() is True
    assert actor.is_destroy() is False


def test_actor_transform_adds_actor_location():
    actor, component = _attach(SceneComponent)
    actor.set_actor_location(Vector2D(10, 20))
    component.component_location = Vector2D(1, 2)
    component.component_scale = Vector2D(4, 6)
    trans = component.actor_transform()
    assert trans.location == Vector2D(11, 22)
    assert trans.scale == Vector2D(4, 6)


def test_actor_transform_returns_copy():
    actor, component = _attach(SceneComponent)
    component.component_scale = Vector2D(3, 3)
    trans = component.actor_transform()
    trans.scale.x = 99
    assert component.component_scale == Vector2D(3, 3)


def test_component_location_property_copies():
    _, component = _attach(SceneComponent)
    location = Vector2D(5, 5)
    component.component_location = location
    location.x = 0
    assert component.component_location == Vector2D(5, 5)


def test_actor_transform_without_actor_raises():
    component = SceneComponent()
    with pytest.raises(EngineError):
        component.actor_transform()