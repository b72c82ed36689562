"""Loadable resources, textures and the resource registry."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar

import pygame

from .component import Entity
from .enums import ResourceType


class ResourceError(Exception):
    """A resource could not be loaded."""


class Resource(Entity, ABC):
    """A named asset loaded from a path."""

    def __init__(self, resource_type: ResourceType) -> None:
        super().__init__()
        self.resource_type = resource_type
        self.path = ""

    @abstractmethod
    def load(self, path: str | os.PathLike[str]) -> None:
        """Load the resource; raise ResourceError on failure."""


class TextureType(Enum):
    """Image format of a texture."""

    BMP = "bmp"
    PNG = "png"
    NONE = "none"


class Texture(Resource):
    """An image loaded from a .bmp or .png file."""

    def __init__(self) -> None:
        super().__init__(ResourceType.TEXTURE)
        self.texture_type = TextureType.NONE
        self.image: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def load(self, path: str | os.PathLike[str]) -> None:
        path = os.fspath(path)
        extension = path.rsplit(".", 1)[-1]
        if extension == "bmp":
            texture_type = TextureType.BMP
        elif extension == "png":
            texture_type = TextureType.PNG
        else:
            return
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"cannot load texture {path!r}: {exc}") from exc
        self.texture_type = texture_type
        self.image = image
        self.width, self.height = image.get_size()


R = TypeVar("R", bound=Resource)


class ResourceRegistry:
    """Resources loaded once and found again by key."""

    def __init__(self) -> None:
        self._resources: dict[str, Resource] = {}

    def find(self, key: str, kind: type[R]) -> R | None:
        """The resource under key if it is of the given kind, else None."""
        resource = self._resources.get(key)
        return resource if isinstance(resource, kind) else None

    def load(self, kind: type[R], key: str, path: str | os.PathLike[str]) -> R:
        """Load a resource under key, or return the one already loaded."""
        resource = self.find(key, kind)
        if resource is not None:
            return resource
        resource = kind()
        resource.load(path)
        resource.name = key
        resource.path = os.fspath(path)
        self._resources.setdefault(key, resource)
        return resource


registry = ResourceRegistry()