"""Enumerations shared across the engine."""

from enum import IntEnum


class ComponentType(IntEnum):
    """Kinds of component; the value is the component's slot on its object."""

    TRANSFORM = 0
    SPRITE_RENDERER = 1
    ANIMATOR = 2
    SCRIPT = 3
    CAMERA = 4
    END = 5


class LayerType(IntEnum):
    """Render and update layers of a scene, in drawing order."""

    NONE = 0
    BACKGROUND = 1
    PLAYER = 2
    ANIMAL = 3
    PARTICLE = 4
    MAX = 16


class ResourceType(IntEnum):
    """Kinds of loadable resource."""

    TEXTURE = 0
    AUDIO_CLIP = 1
    ANIMATION = 2
    PREFAB = 3
    END = 4