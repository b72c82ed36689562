import pygame

from mjengine import clock as clock_module
from mjengine.clock import Clock, delta_time


def _timer(values):
    it = iter(values)
    return lambda: next(it)


def test_update_measures_interval():
    clock = Clock(timer=_timer([0.0, 0.5, 1.0]))
    clock.initialize()
    clock.update()
    assert clock.delta_time == 0.5
    clock.update()
    assert clock.delta_time == 0.5


def test_delta_starts_at_zero():
    assert Clock().delta_time == 0.0


def test_module_delta_time_reads_main_clock(monkeypatch):
    monkeypatch.setattr(clock_module.main_clock, "delta_time", 0.125)
    assert delta_time() == 0.125


def test_fps_text():
    clock = Clock()
    clock.delta_time = 0.5
    assert clock.fps_text() == "Time : 2"


def test_fps_text_without_elapsed_time():
    assert Clock().fps_text() == "Time : 0"


def test_render_draws_and_accumulates():
    clock = Clock()
    clock.delta_time = 0.25
    surface = pygame.Surface((200, 50))
    surface.fill((255, 255, 255))
    clock.render(surface)
    clock.render(surface)
    assert clock.elapsed == clock.delta_time * 2
    pixels = [surface.get_at((x, y))[:3] for x in range(60) for y in range(20)]
    assert (0, 0, 0) in pixels