"""Layers, scenes, the scene manager and object instantiation."""

from __future__ import annotations

from typing import Any, TypeVar

from .component import Entity, Transform
from .enums import LayerType
from .gameobject import GameObject
from .vector import Vector2

S = TypeVar("S", bound="Scene")
G = TypeVar("G", bound=GameObject)


class Layer(Entity):
    """An ordered group of game objects."""

    def __init__(self) -> None:
        super().__init__()
        self.game_objects: list[GameObject] = []

    def initialize(self) -> None:
        for game_object in self.game_objects:
            game_object.initialize()

    def update(self) -> None:
        for game_object in self.game_objects:
            game_object.update()

    def late_update(self) -> None:
        for game_object in self.game_objects:
            game_object.late_update()

    def render(self, surface: Any) -> None:
        for game_object in self.game_objects:
            game_object.render(surface)

    def add_game_object(self, game_object: GameObject | None) -> None:
        """Append a game object; None is ignored."""
        if game_object is not None:
            self.game_objects.append(game_object)


class Scene(Entity):
    """A set of layers processed in layer order."""

    def __init__(self) -> None:
        super().__init__()
        self.layers: list[Layer] = [Layer() for _ in range(int(LayerType.MAX))]
        self.entered = False

    def initialize(self) -> None:
        for layer in self.layers:
            layer.initialize()

    def update(self) -> None:
        for layer in self.layers:
            layer.update()

    def late_update(self) -> None:
        for layer in self.layers:
            layer.late_update()

    def render(self, surface: Any) -> None:
        for layer in self.layers:
            layer.render(surface)

    def on_enter(self) -> None:
        """Mark the scene as entered; called when it becomes active."""
        self.entered = True

    def on_exit(self) -> None:
        """Mark the scene as left; called when another scene is loaded."""
        self.entered = False

    def add_game_object(self, layer_type: LayerType, game_object: GameObject) -> None:
        self.layers[layer_type].add_game_object(game_object)

    def get_layer(self, layer_type: LayerType) -> Layer:
        return self.layers[layer_type]


class SceneManager:
    """Keeps scenes by name and forwards the frame to the active one."""

    def __init__(self) -> None:
        self.scenes: dict[str, Scene] = {}
        self.active_scene: Scene | None = None
        self.initialized = False

    def create_scene(self, scene_type: type[S], name: str) -> S:
        """Create, activate and initialize a scene; an existing name is kept."""
        scene = scene_type()
        scene.name = name
        self.active_scene = scene
        scene.initialize()
        self.scenes.setdefault(name, scene)
        return scene

    def load_scene(self, name: str) -> Scene | None:
        """Leave the active scene and enter the named one; None if unknown."""
        if self.active_scene is not None:
            self.active_scene.on_exit()
        scene = self.scenes.get(name)
        if scene is None:
            return None
        self.active_scene = scene
        scene.on_enter()
        return scene

    def _active(self) -> Scene:
        if self.active_scene is None:
            raise RuntimeError("no active scene")
        return self.active_scene

    def initialize(self) -> None:
        """Mark the manager as ready to run frames."""
        self.initialized = True

    def update(self) -> None:
        self._active().update()

    def late_update(self) -> None:
        self._active().late_update()

    def render(self, surface: Any) -> None:
        self._active().render(surface)


scene_manager = SceneManager()


def instantiate(
    object_type: type[G],
    layer_type: LayerType,
    position: Vector2 | None = None,
) -> G:
    """Create a game object in a layer of the active scene, optionally placed."""
    scene = scene_manager.active_scene
    if scene is None:
        raise RuntimeError("no active scene")
    game_object = object_type()
    scene.get_layer(layer_type).add_game_object(game_object)
    if position is not None:
        game_object.get_component(Transform).position = Vector2(position.x, position.y)
    return game_object