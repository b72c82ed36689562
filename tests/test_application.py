import pygame
import pytest

from mjengine import renderer
from mjengine.application import Application
from mjengine.clock import Clock
from mjengine.input import Input, KeyCode
from mjengine.scene import Scene, SceneManager
from mjengine.vector import Vector2

WHITE = (255, 255, 255, 255)
BLUE = (0, 0, 255, 255)


class PaintingScene(Scene):
    def __init__(self):
        super().__init__()
        self.events = []

    def update(self):
        self.events.append("update")

    def late_update(self):
        self.events.append("late_update")

    def render(self, surface):
        self.events.append("render")
        surface.fill((0, 0, 255), pygame.Rect(50, 50, 5, 5))


@pytest.fixture(autouse=True)
def restore_resolution(monkeypatch):
    monkeypatch.setattr(renderer, "screen_resolution", Vector2.ZERO)


@pytest.fixture
def held():
    return set()


@pytest.fixture
def app(held):
    times = iter([1.0, 1.5, 2.0, 2.5])
    clock = Clock(timer=lambda: next(times))
    keyboard = Input(probe=lambda code: code in held)
    scenes = SceneManager()
    scenes.create_scene(PaintingScene, "paint")
    return Application(keyboard=keyboard, clock=clock, scenes=scenes)


def test_initialize_takes_surface_size(app):
    surface = pygame.Surface((120, 80))
    app.initialize(surface)
    assert (app.width, app.height) == (120, 80)
    assert app.back_buffer.get_size() == (120, 80)
    assert renderer.screen_resolution == Vector2(120, 80)


def test_render_before_initialize_raises(app):
    with pytest.raises(RuntimeError):
        app.render()


def test_run_drives_scene_in_order(app):
    app.initialize(pygame.Surface((100, 100)))
    app.run()
    assert app.scenes.active_scene.events == ["update", "late_update", "render"]


def test_run_advances_clock(app):
    app.initialize(pygame.Surface((100, 100)))
    app.run()
    assert app.clock.delta_time == pytest.approx(0.5)


def test_run_reads_keyboard(app, held):
    app.initialize(pygame.Surface((100, 100)))
    held.add(KeyCode.N)
    app.run()
    assert app.keyboard.get_key_down(KeyCode.N)
    app.run()
    assert app.keyboard.get_key(KeyCode.N)


def test_render_copies_back_buffer_to_target(app):
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    app.initialize(surface)
    app.run()
    assert tuple(surface.get_at((52, 52))) == BLUE
    assert tuple(surface.get_at((90, 90))) == WHITE
    assert tuple(app.back_buffer.get_at((52, 52))) == BLUE


def test_render_clears_previous_frame(app):
    surface = pygame.Surface((100, 100))
    app.initialize(surface)
    app.back_buffer.fill((255, 0, 0))
    app.run()
    assert tuple(surface.get_at((80, 20))) == WHITE