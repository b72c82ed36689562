import pygame
import pytest

from mjengine import renderer
from mjengine import resources as resources_module
from mjengine import scene as scene_module
from mjengine.editor import main, parse_args
from mjengine.resources import ResourceRegistry
from mjengine.scene import SceneManager
from mjengine.scenes import PlayScene
from mjengine.vector import Vector2

FILES = (
    ("kirby.png",),
    ("Warrior_.bmp",),
    ("warrior", "Warrior_Red.png"),
    ("skill.png",),
    ("dog.png",),
)


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    manager = SceneManager()
    monkeypatch.setattr(scene_module, "scene_manager", manager)
    monkeypatch.setattr(resources_module, "registry", ResourceRegistry())
    monkeypatch.setattr(renderer, "main_camera", None)
    monkeypatch.setattr(renderer, "screen_resolution", Vector2.ZERO)
    return manager


def write_resources(directory):
    for parts in FILES:
        path = directory.joinpath(*parts)
        path.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(pygame.Surface((16, 16)), str(path))


def test_parse_args_defaults():
    args = parse_args([])
    assert args.width == 1600
    assert args.height == 900
    assert args.frames == 0


def test_parse_args_overrides(tmp_path):
    args = parse_args(["--width", "640", "--height", "480", "--resources", str(tmp_path), "--frames", "5"])
    assert (args.width, args.height, args.frames) == (640, 480, 5)
    assert args.resources == str(tmp_path)


@pytest.mark.parametrize(
    "argv",
    [["--width", "abc"], ["--width", "0"], ["--height", "-3"], ["--frames", "-1"]],
)
def test_parse_args_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_main_runs_frames(headless, tmp_path):
    write_resources(tmp_path)
    status = main(["--width", "320", "--height", "240", "--resources", str(tmp_path), "--frames", "3"])
    assert status == 0
    assert isinstance(headless.active_scene, PlayScene)
    assert set(headless.scenes) == {"TitleScene", "PlayScene"}
    assert renderer.screen_resolution == Vector2(320.0, 240.0)


def test_main_reports_missing_resources(headless, tmp_path, capsys):
    status = main(["--width", "320", "--height", "240", "--resources", str(tmp_path), "--frames", "1"])
    assert status == 1
    assert "error:" in capsys.readouterr().err
    assert headless.scenes == {}