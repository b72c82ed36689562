"""Named entities and the components attached to game objects."""

from __future__ import annotations

from typing import Any

from .enums import ComponentType
from .vector import Vector2


class Entity:
    """Something with a name."""

    def __init__(self, name: str = "") -> None:
        self.name = name


class Component(Entity):
    """Base of every component; the lifecycle hooks do nothing by default."""

    def __init__(self, component_type: ComponentType) -> None:
        super().__init__()
        self.component_type = component_type
        self.owner: Any = None

    def initialize(self) -> None:
        """Prepare the component; called when it is added."""

    def update(self) -> None:
        """Advance the component by one frame."""

    def late_update(self) -> None:
        """Run after every object has been updated."""

    def render(self, surface: Any) -> None:
        """Draw the component onto a surface."""


class Transform(Component):
    """Position, scale and rotation (in degrees) of a game object."""

    def __init__(self) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.position: Vector2 = Vector2.ZERO
        self.scale: Vector2 = Vector2.ONE
        self.rotation: float = 0.0


class Script(Component):
    """Base for behaviour components."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SCRIPT)