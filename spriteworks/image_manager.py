"""Registry of loaded images and the sprites cut from them."""

from spriteworks.debug import EngineError
from spriteworks.directory import EngineDirectory
from spriteworks.enginepath import EnginePath
from spriteworks.image import EngineImage
from spriteworks.sprite import EngineSprite
from spriteworks.text import to_upper
from spriteworks.vecmath import Transform, Vector2D

__all__ = ["ImageManager"]


def _whole_frame(image):
    return Transform(scale=image.image_scale(), location=Vector2D())


class ImageManager:
    """Images and sprites by upper-cased key name."""

    _instance = None

    def __init__(self):
        self.images = {}
        self.sprites = {}

    @classmethod
    def instance(cls):
        """The shared manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, path, key_name=None):
        """Load one image file as an image and a one-frame sprite.

        The key defaults to the file name.
        """
        engine_path = EnginePath(path)
        if key_name is None:
            key_name = engine_path.file_name()
        if engine_path.is_directory():
            raise EngineError(f"a directory cannot be loaded as an image: {path}")
        if not engine_path.is_exists():
            raise EngineError(f"not a valid file path: {path}")

        upper = to_upper(str(key_name))
        if upper in self.images or upper in self.sprites:
            raise EngineError(f"an image is already loaded under this name: {upper}")

        image = EngineImage(upper)
        image.load(path)
        self.images[upper] = image

        sprite = EngineSprite(upper)
        sprite.push_data(image, _whole_frame(image))
        self.sprites[upper] = sprite
        return sprite

    def load_folder(self, path, key_name=None):
        """Load every file below a directory as the frames of one sprite.

        The key defaults to the directory name.
        """
        engine_path = EnginePath(path)
        if key_name is None:
            key_name = engine_path.directory_name()
        if not engine_path.is_exists():
            raise EngineError(f"not a valid file path: {path}")

        upper = to_upper(str(key_name))
        if upper in self.sprites:
            raise EngineError(f"a sprite is already loaded under this name: {upper}")

        sprite = EngineSprite(upper)
        self.sprites[upper] = sprite

        for file in EngineDirectory(path).get_all_file():
            file_key = to_upper(file.file_name())
            image = self.find_image(file_key)
            if image is None:
                image = EngineImage(file_key)
                image.load(str(file))
                self.images[file_key] = image
            sprite.push_data(image, _whole_frame(image))
        return sprite

    def _sprite_and_image(self, key_name):
        upper = to_upper(str(key_name))
        if upper not in self.sprites:
            raise EngineError(f"tried to cut a sprite that does not exist: {key_name}")
        if upper not in self.images:
            raise EngineError(f"tried to cut a sprite from an image that does not exist: {key_name}")
        return upper, self.sprites[upper], self.images[upper]

    @staticmethod
    def _check_size(size, key_name):
        if size.ix() <= 0 or size.iy() <= 0:
            raise EngineError(f"sprite cutting size must be positive: {key_name}")

    @staticmethod
    def _cut(sprite, image, size):
        scale = image.image_scale()
        columns = scale.ix() // size.ix()
        rows = scale.iy() // size.iy()
        for row in range(rows):
            for column in range(columns):
                location = Vector2D(column * size.x, row * size.y)
                sprite.push_data(image, Transform(scale=size.copy(), location=location))

    def cutting_sprite(self, key_name, columns, rows):
        """Cut a loaded image's sprite into a grid of columns by rows frames."""
        _, sprite, image = self._sprite_and_image(key_name)
        if columns <= 0 or rows <= 0:
            raise EngineError(f"cannot cut a sprite into {columns}x{rows} frames: {key_name}")
        sprite.clear_sprite_data()
        scale = image.image_scale()
        scale.x /= columns
        scale.y /= rows
        return self.cutting_sprite_by_size(key_name, scale)

    def cutting_sprite_by_size(self, key_name, size):
        """Cut a loaded image's sprite into frames of size; the image must divide evenly."""
        upper, sprite, image = self._sprite_and_image(key_name)
        sprite.clear_sprite_data()
        sprite.name = upper
        image.name = upper
        self._check_size(size, key_name)

        scale = image.image_scale()
        if scale.ix() % size.ix() != 0:
            raise EngineError(f"sprite width does not divide evenly: {key_name}")
        if scale.iy() % size.iy() != 0:
            raise EngineError(f"sprite height does not divide evenly: {key_name}")

        self._cut(sprite, image, size)
        return sprite

    def cutting_sprite_from_image(self, new_sprite_name, image_name, size):
        """Make or refill a sprite named new_sprite_name from frames of a loaded image."""
        sprite_upper = to_upper(str(new_sprite_name))
        image_upper = to_upper(str(image_name))
        if image_upper not in self.images:
            raise EngineError(
                f"tried to cut a sprite from an image that does not exist: {image_name}"
            )
        self._check_size(size, image_name)

        sprite = self.sprites.get(sprite_upper)
        if sprite is None:
            sprite = EngineSprite(sprite_upper)
            self.sprites[sprite_upper] = sprite
        image = self.images[image_upper]

        sprite.clear_sprite_data()
        sprite.name = sprite_upper
        image.name = image_upper
        self._cut(sprite, image, size)
        return sprite

    def is_load_sprite(self, key_name):
        return to_upper(str(key_name)) in self.sprites

    def find_sprite(self, key_name):
        """The sprite under key_name; raises if it was never loaded."""
        upper = to_upper(str(key_name))
        try:
            return self.sprites[upper]
        except KeyError:
            raise EngineError(f"tried to use a sprite that is not loaded: {key_name}") from None

    def find_image(self, key_name):
        """The image under key_name, or None."""
        return self.images.get(to_upper(str(key_name)))