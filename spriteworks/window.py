"""Off-screen main window: a front image and a back buffer of the same size."""

from spriteworks.image import EngineImage
from spriteworks.vecmath import Vector2D

__all__ = ["EngineWindow"]


class EngineWindow:
    """Window surface that the engine renders into.

    Its images are created when the size is first set.
    """

    def __init__(self, title="Window"):
        self.title = title
        self.position = Vector2D()
        self.window_size = Vector2D()
        self.window_image = None
        self.back_buffer = None
        self.mouse_pos = Vector2D()

    def set_window_pos_and_scale(self, pos, scale):
        """Move and resize; the images are recreated only when the integer size changes."""
        if not self.window_size.equal_to_int(scale):
            back_buffer = EngineImage("BACKBUFFER")
            back_buffer.create(scale)
            window_image = EngineImage("WINDOW")
            window_image.create(scale)
            self.back_buffer = back_buffer
            self.window_image = window_image
        self.window_size = scale.copy()
        self.position = pos.copy()

    def set_window_title(self, text):
        self.title = text