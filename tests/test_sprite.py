import pytest

from spriteworks.debug import EngineError
from spriteworks.image import EngineImage
from spriteworks.sprite import EngineSprite
from spriteworks.vecmath import Transform, Vector2D


def _frame(x, y, w, h):
    return Transform(scale=Vector2D(w, h), location=Vector2D(x, y))


def test_push_and_get():
    image = EngineImage("SHEET")
    sprite = EngineSprite("SHEET")
    sprite.push_data(image, _frame(0, 0, 4, 4))
    sprite.push_data(image, _frame(4, 0, 4, 4))
    assert len(sprite) == 2
    data = sprite.get_sprite_data(1)
    assert data.image is image
    assert data.transform.location == Vector2D(4, 0)
    assert sprite.get_sprite_data().transform.location == Vector2D(0, 0)


def test_pushed_transform_is_copied():
    sprite = EngineSprite()
    trans = _frame(1, 2, 3, 4)
    sprite.push_data(EngineImage(), trans)
    trans.location.x = 100
    assert sprite.get_sprite_data(0).transform.location == Vector2D(1, 2)


def test_zero_scale_rejected():
    with pytest.raises(EngineError):
        EngineSprite().push_data(EngineImage(), _frame(0, 0, 0, 5))


def test_index_out_of_range():
    sprite = EngineSprite("S")
    sprite.push_data(EngineImage(), _frame(0, 0, 1, 1))
    with pytest.raises(EngineError):
        sprite.get_sprite_data(1)
    with pytest.raises(EngineError):
        sprite.get_sprite_data(-1)


def test_clear():
    sprite = EngineSprite()
    sprite.push_data(EngineImage(), _frame(0, 0, 1, 1))
    sprite.clear_sprite_data()
    assert len(sprite) == 0
    with pytest.raises(EngineError):
        sprite.get_sprite_data(0)