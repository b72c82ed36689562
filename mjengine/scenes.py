"""The game's scenes and the loading of its resources and scenes."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from . import input as input_module
from . import renderer
from . import resources as resources_module
from . import scene as scene_module
from .animation import Animator
from .component import Transform
from .enums import LayerType
from .gameobject import Dog, GameObject, Player
from .input import KeyCode
from .renderer import Camera
from .resources import Texture
from .scene import Scene
from .scripts import DogScript, PlayerScript
from .vector import Vector2

DEFAULT_RESOURCE_DIR = Path("..") / "Resource"

#: Texture keys and their files relative to the resource directory.
RESOURCE_FILES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("BG", ("kirby.png",)),
    ("Warrior", ("Warrior_.bmp",)),
    ("Warrior2", ("warrior", "Warrior_Red.png")),
    ("skill", ("skill.png",)),
    ("Dog", ("dog.png",)),
)

TEXT_COLOUR = (0, 0, 0)
FONT_SIZE = 20
_font_cache: dict[int, pygame.font.Font] = {}


def _draw_text(surface: pygame.Surface, text: str) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
        _font_cache.clear()
    font = _font_cache.get(FONT_SIZE)
    if font is None:
        font = _font_cache[FONT_SIZE] = pygame.font.Font(None, FONT_SIZE)
    surface.blit(font.render(text, True, TEXT_COLOUR), (0, 0))


class _CaptionedScene(Scene):
    """A scene that shows its caption and switches scene when N goes down."""

    caption = ""

    def __init__(self) -> None:
        super().__init__()
        self.keyboard = input_module.keyboard
        self.manager = scene_module.scene_manager

    def _switch_on_key(self, target: str) -> None:
        if self.keyboard.get_key_down(KeyCode.N):
            self.manager.load_scene(target)

    def _spawn(self, object_type, layer_type: LayerType, position: Vector2 | None = None):
        game_object = object_type()
        self.add_game_object(layer_type, game_object)
        if position is not None:
            game_object.get_component(Transform).position = position
        return game_object


class PlayScene(_CaptionedScene):
    """The scene with the camera, the player and the dog."""

    caption = "Play Scene"

    def __init__(self) -> None:
        super().__init__()
        self.player: Player | None = None

    def initialize(self) -> None:
        camera_object = self._spawn(GameObject, LayerType.NONE, Vector2(808.0, 450.0))
        renderer.main_camera = camera_object.add_component(Camera)

        player = self._spawn(Player, LayerType.PLAYER)
        player.add_component(PlayerScript)
        player_texture = resources_module.registry.find("Warrior2", Texture)
        animator = player.add_component(Animator)
        for name, top in (("Idle", 0.0), ("Walk", 192.0), ("Attack1", 384.0), ("Attack2", 576.0)):
            animator.create_animation(
                name, player_texture, Vector2(0.0, top), Vector2(192.0, 192.0), Vector2.ZERO, 6, 0.1
            )
        animator.play_animation("Idle", True)
        player.get_component(Transform).position = Vector2(100.0, 100.0)
        self.player = player

        dog = self._spawn(Dog, LayerType.PLAYER)
        dog.add_component(DogScript)
        dog_texture = resources_module.registry.find("Dog", Texture)
        dog_animator = dog.add_component(Animator)
        for name, top in (
            ("DownWalk", 0.0),
            ("RightWalk", 32.0),
            ("UpWalk", 64.0),
            ("LeftWalk", 96.0),
            ("SitDown", 128.0),
            ("SideSitDown", 160.0),
        ):
            dog_animator.create_animation(
                name, dog_texture, Vector2(0.0, top), Vector2(32.0, 32.0), Vector2.ZERO, 4, 0.3
            )
        dog_transform = dog.get_component(Transform)
        dog_transform.position = Vector2(200.0, 200.0)
        dog_transform.scale = Vector2(3.0, 3.0)
        dog_animator.play_animation("SitDown", False)

        super().initialize()

    def late_update(self) -> None:
        super().late_update()
        self._switch_on_key("TitleScene")

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        _draw_text(surface, self.caption)


class TitleScene(_CaptionedScene):
    """The title screen."""

    caption = "Title Scene"

    def late_update(self) -> None:
        super().late_update()
        self._switch_on_key("PlayScene")

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)
        _draw_text(surface, self.caption)


def load_resources(base_dir: str | os.PathLike[str] = DEFAULT_RESOURCE_DIR) -> None:
    """Load the game's textures from base_dir into the resource registry."""
    base = Path(base_dir)
    for key, parts in RESOURCE_FILES:
        resources_module.registry.load(Texture, key, base.joinpath(*parts))


def create_scenes() -> None:
    """Create the title and play scenes; the play scene ends up active."""
    manager = scene_module.scene_manager
    manager.create_scene(TitleScene, "TitleScene")
    manager.create_scene(PlayScene, "PlayScene")


def load_scenes() -> None:
    """Enter the play scene."""
    scene_module.scene_manager.load_scene("PlayScene")