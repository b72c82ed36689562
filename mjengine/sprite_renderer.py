"""Component that draws a whole texture at its owner's position."""

from __future__ import annotations

import pygame

from .component import Component, Transform
from .enums import ComponentType
from .renderer import to_screen
from .resources import Texture, TextureType
from .vector import Vector2

#: Colour treated as transparent when drawing bitmap textures.
TRANSPARENT_KEY = (255, 0, 255)


class SpriteRenderer(Component):
    """Draws a texture with its top-left corner at the owner's position."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SPRITE_RENDERER)
        self.texture: Texture | None = None
        self.size: Vector2 = Vector2.ONE

    def render(self, surface: pygame.Surface) -> None:
        """Draw the texture scaled by size and the owner's scale."""
        if self.texture is None:
            raise RuntimeError("sprite renderer has no texture")
        texture = self.texture
        if texture.image is None or texture.texture_type is TextureType.NONE:
            return

        transform = self.owner.get_component(Transform)
        pos = to_screen(transform.position)
        scale = transform.scale

        width = max(int(texture.width * self.size.x * scale.x), 0)
        height = max(int(texture.height * self.size.y * scale.y), 0)
        image = texture.image
        if (width, height) != image.get_size():
            image = pygame.transform.scale(image, (width, height))

        if texture.texture_type is TextureType.BMP:
            keyed = image.copy()
            keyed.set_colorkey(TRANSPARENT_KEY)
            surface.blit(keyed, (int(pos.x), int(pos.y)))
        elif transform.rotation:
            pivot = pygame.math.Vector2(pos.x, pos.y)
            centre = pygame.math.Vector2(pos.x + width / 2, pos.y + height / 2)
            centre = pivot + (centre - pivot).rotate(transform.rotation)
            rotated = pygame.transform.rotate(image, -transform.rotation)
            surface.blit(rotated, rotated.get_rect(center=(round(centre.x), round(centre.y))))
        else:
            surface.blit(image, (int(pos.x), int(pos.y)))