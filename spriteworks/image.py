"""Raster images in memory, with the blits and drawing the engine needs."""

from PIL import Image, ImageChops, ImageDraw, ImageFont

from spriteworks.debug import EngineError
from spriteworks.engine_object import EngineObject
from spriteworks.enginepath import EnginePath
from spriteworks.text import to_upper
from spriteworks.vecmath import Color, IntPoint, Vector2D

__all__ = ["EngineImage"]

_MODE = "RGBA"
_BLACK = (0, 0, 0, 255)
_WHITE = (255, 255, 255, 255)
_MAGENTA = (255, 0, 255, 255)


def _size(scale):
    return scale.ix(), scale.iy()


class EngineImage(EngineObject):
    """An RGBA image that can be created blank, loaded from disk and blitted."""

    def __init__(self, name=""):
        super().__init__(name)
        self.image = None

    def _require_image(self):
        if self.image is None:
            raise EngineError(f"image {self.name!r} has not been created or loaded")
        return self.image

    @staticmethod
    def _require_target(target):
        if target is None:
            raise EngineError("the target image does not exist")
        return target._require_image()

    def create(self, scale):
        """Make a blank black image of the given size."""
        width, height = _size(scale)
        if width <= 0 or height <= 0:
            raise EngineError(f"cannot create an image of size {width}x{height}")
        self.image = Image.new(_MODE, (width, height), _BLACK)

    def load(self, path):
        """Load a .png or .bmp file; transparent PNG pixels show magenta."""
        extension = to_upper(EnginePath(path).extension())
        if extension not in (".PNG", ".BMP"):
            raise EngineError(f"failed to load image: {path}")
        try:
            with Image.open(path) as source:
                source.load()
                loaded = source.convert(_MODE)
        except OSError as exc:
            raise EngineError(f"failed to load image: {path}") from exc

        if extension == ".PNG":
            background = Image.new(_MODE, loaded.size, _MAGENTA)
            composed = Image.alpha_composite(background, loaded)
            composed.putalpha(loaded.getchannel("A"))
            loaded = composed
        self.image = loaded

    def image_scale(self):
        if self.image is None:
            return Vector2D()
        width, height = self.image.size
        return Vector2D(width, height)

    def _region(self, image_trans, render_trans):
        source = self._require_image()
        left, top = image_trans.location.ix(), image_trans.location.iy()
        width, height = _size(image_trans.scale)
        out_width, out_height = _size(render_trans.scale)
        if width <= 0 or height <= 0 or out_width <= 0 or out_height <= 0:
            return None
        region = source.crop((left, top, left + width, top + height))
        if (out_width, out_height) != (width, height):
            region = region.resize((out_width, out_height), Image.NEAREST)
        return region

    @staticmethod
    def _left_top(trans):
        corner = trans.center_left_top()
        return corner.ix(), corner.iy()

    def copy_to_bit(self, target, trans):
        """Copy this image from its origin onto target, centred on trans."""
        target_image = self._require_target(target)
        source = self._require_image()
        width, height = _size(trans.scale)
        if width <= 0 or height <= 0:
            return
        target_image.paste(source.crop((0, 0, width, height)), self._left_top(trans))

    def copy_to_trans(self, target, render_trans, image_trans, color=None):
        """Blit a part of this image, stretched, skipping pixels of the key colour."""
        key = Color(255, 0, 255, 0) if color is None else color
        target_image = self._require_target(target)
        region = self._region(image_trans, render_trans)
        if region is None:
            return
        red, green, blue = region.convert("RGB").split()
        match = ImageChops.multiply(
            ImageChops.multiply(
                red.point(lambda v: 255 if v == key.r else 0),
                green.point(lambda v: 255 if v == key.g else 0),
            ),
            blue.point(lambda v: 255 if v == key.b else 0),
        )
        mask = ImageChops.invert(match)
        target_image.paste(region, self._left_top(render_trans), mask)

    def copy_to_alpha(self, target, render_trans, image_trans, alpha):
        """Blit a part of this image, blended by its own alpha scaled by alpha/255."""
        target_image = self._require_target(target)
        region = self._region(image_trans, render_trans)
        if region is None:
            return
        factor = max(0, min(255, int(alpha)))
        mask = region.getchannel("A").point(lambda v: v * factor // 255)
        target_image.paste(region, self._left_top(render_trans), mask)

    def get_color(self, point, default_color=Color.WHITE):
        """Colour of the pixel at point, or default_color outside the image."""
        if isinstance(point, Vector2D):
            point = point.convert_to_point()
        elif not isinstance(point, IntPoint):
            point = IntPoint(*point)
        if self.image is None:
            return default_color
        width, height = self.image.size
        if point.x < 0 or point.y < 0 or point.x >= width or point.y >= height:
            return default_color
        red, green, blue, _ = self.image.getpixel((point.x, point.y))
        return Color(red, green, blue, 0)

    def _box(self, left, top, right, bottom):
        if right - 1 < left or bottom - 1 < top:
            return None
        return [int(left), int(top), int(right) - 1, int(bottom) - 1]

    def draw_rectangle(self, left, top, right, bottom):
        """White rectangle with a black outline; right and bottom are exclusive."""
        draw = ImageDraw.Draw(self._require_image())
        box = self._box(left, top, right, bottom)
        if box is not None:
            draw.rectangle(box, fill=_WHITE, outline=_BLACK)

    def draw_ellipse(self, left, top, right, bottom):
        """White ellipse with a black outline inside the given bounds."""
        draw = ImageDraw.Draw(self._require_image())
        box = self._box(left, top, right, bottom)
        if box is not None:
            draw.ellipse(box, fill=_WHITE, outline=_BLACK)

    def draw_text(self, text, pos):
        """Draw black text with its top-left corner at pos."""
        draw = ImageDraw.Draw(self._require_image())
        draw.text((pos.ix(), pos.iy()), str(text), fill=_BLACK, font=ImageFont.load_default())