"""Camera component and the main camera used to map world to screen."""

from __future__ import annotations

from .component import Component, Transform
from .enums import ComponentType
from .vector import Vector2

#: Size of the render target; cameras take it as their resolution.
screen_resolution: Vector2 = Vector2.ZERO


class Camera(Component):
    """Centres the view on its owner's position."""

    def __init__(self) -> None:
        super().__init__(ComponentType.CAMERA)
        self.target = None
        self.distance = Vector2.ZERO
        self.resolution = Vector2.ZERO
        self.look_position = Vector2.ZERO

    def calculate_position(self, pos: Vector2) -> Vector2:
        """Screen position of a world position."""
        return pos - self.distance

    def initialize(self) -> None:
        self.resolution = screen_resolution

    def update(self) -> None:
        transform = self.owner.get_component(Transform)
        self.look_position = transform.position
        self.distance = self.look_position - self.resolution * 0.5


main_camera: Camera | None = None


def to_screen(pos: Vector2) -> Vector2:
    """Map a world position through the main camera, if there is one."""
    if main_camera is None:
        return pos
    return main_camera.calculate_position(pos)