"""Sprite-sheet animations and the animator component that plays them."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

from .clock import delta_time
from .component import Component, Transform
from .enums import ComponentType, ResourceType
from .renderer import to_screen
from .resources import Resource, ResourceError, Texture, TextureType
from .vector import Vector2


@dataclass
class Sprite:
    """One frame of an animation: a region of the sheet and how long it shows."""

    left_top: Vector2 = field(default_factory=lambda: Vector2.ZERO)
    size: Vector2 = field(default_factory=lambda: Vector2.ZERO)
    offset: Vector2 = field(default_factory=lambda: Vector2.ZERO)
    duration: float = 0.0


class Animation(Resource):
    """A row of frames cut from a sprite sheet."""

    def __init__(self) -> None:
        super().__init__(ResourceType.ANIMATION)
        self.animator: Animator | None = None
        self.texture: Texture | None = None
        self.sheet: list[Sprite] = []
        self.index = -1
        self.time = 0.0
        self.complete = False

    def load(self, path: str | os.PathLike[str]) -> None:
        raise ResourceError("animations are built from sprite sheets, not loaded from files")

    def update(self) -> None:
        """Advance to the next frame once the current one has shown long enough."""
        if self.complete:
            return
        self.time += delta_time()
        if self.sheet[self.index].duration < self.time:
            self.time = 0.0
            if self.index < len(self.sheet) - 1:
                self.index += 1
            else:
                self.complete = True

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current frame centred on the owner's position."""
        if self.texture is None or self.texture.image is None:
            return
        transform = self.animator.owner.get_component(Transform)
        pos = to_screen(transform.position)
        scale = transform.scale
        sprite = self.sheet[self.index]

        frame_size = (int(sprite.size.x), int(sprite.size.y))
        frame = pygame.Surface(frame_size, pygame.SRCALPHA)
        area = pygame.Rect((int(sprite.left_top.x), int(sprite.left_top.y)), frame_size)
        frame.blit(self.texture.image, (0, 0), area)

        width = max(int(sprite.size.x * scale.x), 0)
        height = max(int(sprite.size.y * scale.y), 0)
        if (width, height) != frame_size:
            frame = pygame.transform.scale(frame, (width, height))

        left = pos.x - sprite.size.x * 0.5
        top = pos.y - sprite.size.y * 0.5

        if self.texture.texture_type is TextureType.PNG and transform.rotation:
            pivot = pygame.math.Vector2(pos.x, pos.y)
            centre = pygame.math.Vector2(left + width / 2, top + height / 2)
            centre = pivot + (centre - pivot).rotate(transform.rotation)
            rotated = pygame.transform.rotate(frame, -transform.rotation)
            surface.blit(rotated, rotated.get_rect(center=(round(centre.x), round(centre.y))))
        elif self.texture.texture_type in (TextureType.BMP, TextureType.PNG):
            surface.blit(frame, (int(left), int(top)))

    def create_animation(
        self,
        name: str,
        sprite_sheet: Texture | None,
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> None:
        """Cut sprite_length frames of the given size, left to right, from the sheet."""
        self.texture = sprite_sheet
        self.sheet.extend(
            Sprite(
                left_top=Vector2(left_top.x + size.x * i, left_top.y),
                size=size,
                offset=offset,
                duration=duration,
            )
            for i in range(sprite_length)
        )

    def reset(self) -> None:
        """Restart from the first frame."""
        self.time = 0.0
        self.index = 0
        self.complete = False


class Animator(Component):
    """Holds named animations and plays one of them."""

    def __init__(self) -> None:
        super().__init__(ComponentType.ANIMATOR)
        self.animations: dict[str, Animation] = {}
        self.active_animation: Animation | None = None
        self.loop = False

    def update(self) -> None:
        if self.active_animation is None:
            return
        self.active_animation.update()
        if self.active_animation.complete and self.loop:
            self.active_animation.reset()

    def render(self, surface: pygame.Surface) -> None:
        if self.active_animation is not None:
            self.active_animation.render(surface)

    def create_animation(
        self,
        name: str,
        sprite_sheet: Texture | None,
        left_top: Vector2,
        size: Vector2,
        offset: Vector2,
        sprite_length: int,
        duration: float,
    ) -> None:
        """Add an animation under name unless one already exists."""
        if self.find_animation(name) is not None:
            return
        animation = Animation()
        animation.create_animation(name, sprite_sheet, left_top, size, offset, sprite_length, duration)
        animation.animator = self
        self.animations[name] = animation

    def find_animation(self, name: str) -> Animation | None:
        return self.animations.get(name)

    def play_animation(self, name: str, loop: bool = True) -> None:
        """Start the named animation from its first frame; unknown names are ignored."""
        animation = self.find_animation(name)
        if animation is None:
            return
        self.active_animation = animation
        animation.reset()
        self.loop = loop