"""Sprites: lists of image regions."""

from dataclasses import dataclass

from spriteworks.debug import EngineError
from spriteworks.engine_object import EngineObject
from spriteworks.vecmath import Transform

__all__ = ["SpriteData", "EngineSprite"]


@dataclass
class SpriteData:
    """An image and the region of it that one sprite frame uses."""

    image: object
    transform: Transform


class EngineSprite(EngineObject):
    """Ordered frames cut from one or more images."""

    def __init__(self, name=""):
        super().__init__(name)
        self._data = []

    def __len__(self):
        return len(self._data)

    def push_data(self, image, trans):
        if trans.scale.is_zeroed():
            raise EngineError("cannot make a sprite frame of zero size")
        self._data.append(SpriteData(image, trans.copy()))

    def get_sprite_data(self, index=0):
        if index < 0 or index >= len(self._data):
            raise EngineError(f"sprite index {index} is out of range: {self.name}")
        return self._data[index]

    def clear_sprite_data(self):
        self._data.clear()