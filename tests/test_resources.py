import pygame
import pytest

from mjengine.enums import ResourceType
from mjengine.resources import (
    Resource,
    ResourceError,
    ResourceRegistry,
    Texture,
    TextureType,
)


def _image_file(tmp_path, name, size):
    surface = pygame.Surface(size)
    surface.fill((10, 200, 30))
    path = tmp_path / name
    pygame.image.save(surface, str(path))
    return path


def test_load_png(tmp_path):
    path = _image_file(tmp_path, "a.png", (3, 2))
    texture = Texture()
    texture.load(str(path))
    assert texture.texture_type is TextureType.PNG
    assert (texture.width, texture.height) == (3, 2)
    assert texture.image.get_size() == (3, 2)


def test_load_bmp(tmp_path):
    path = _image_file(tmp_path, "b.bmp", (5, 4))
    texture = Texture()
    texture.load(path)
    assert texture.texture_type is TextureType.BMP
    assert (texture.width, texture.height) == (5, 4)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ResourceError):
        Texture().load(str(tmp_path / "missing.png"))


def test_unknown_extension_leaves_texture_empty(tmp_path):
    texture = Texture()
    texture.load(str(tmp_path / "sound.wav"))
    assert texture.texture_type is TextureType.NONE
    assert texture.image is None


def test_texture_resource_type():
    assert Texture().resource_type is ResourceType.TEXTURE


def test_resource_is_abstract():
    with pytest.raises(TypeError):
        Resource(ResourceType.TEXTURE)


def test_registry_load_sets_name_and_path(tmp_path):
    path = str(_image_file(tmp_path, "c.png", (2, 2)))
    registry = ResourceRegistry()
    texture = registry.load(Texture, "BG", path)
    assert texture.name == "BG"
    assert texture.path == path
    assert registry.find("BG", Texture) is texture


def test_registry_load_is_cached(tmp_path):
    path = str(_image_file(tmp_path, "d.png", (2, 2)))
    registry = ResourceRegistry()
    first = registry.load(Texture, "Dog", path)
    assert registry.load(Texture, "Dog", path) is first


def test_registry_find_missing_or_wrong_kind(tmp_path):
    class Other(Resource):
        def __init__(self):
            super().__init__(ResourceType.PREFAB)

        def load(self, path):
            pass

    path = str(_image_file(tmp_path, "e.png", (2, 2)))
    registry = ResourceRegistry()
    registry.load(Texture, "T", path)
    assert registry.find("nothing", Texture) is None
    assert registry.find("T", Other) is None


def test_registry_failed_load_is_not_stored(tmp_path):
    registry = ResourceRegistry()
    with pytest.raises(ResourceError):
        registry.load(Texture, "bad", str(tmp_path / "nope.png"))
    assert registry.find("bad", Texture) is None