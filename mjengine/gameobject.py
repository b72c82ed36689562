"""Game objects: containers of components, one per component kind."""

from __future__ import annotations

from typing import Any, TypeVar

from .component import Component, Transform
from .enums import ComponentType

C = TypeVar("C", bound=Component)


class GameObject:
    """Holds components in slots by kind and drives their lifecycle."""

    def __init__(self) -> None:
        self._slots: list[Component | None] = [None] * int(ComponentType.END)
        self.add_component(Transform)

    @property
    def components(self) -> list[Component]:
        """Attached components in slot order."""
        return [component for component in self._slots if component is not None]

    def initialize(self) -> None:
        for component in self.components:
            component.initialize()

    def update(self) -> None:
        for component in self.components:
            component.update()

    def late_update(self) -> None:
        for component in self.components:
            component.late_update()

    def render(self, surface: Any) -> None:
        for component in self.components:
            component.render(surface)

    def add_component(self, component_type: type[C]) -> C:
        """Create a component, attach it in its kind's slot and return it."""
        component = component_type()
        component.initialize()
        component.owner = self
        self._slots[component.component_type] = component
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """The first attached component of the given class, or None."""
        return next(
            (c for c in self._slots if isinstance(c, component_type)),
            None,
        )


class Dog(GameObject):
    """A dog in the play scene."""


class Player(GameObject):
    """The player character."""