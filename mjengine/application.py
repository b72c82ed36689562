"""The application: runs one frame of input, timing, scenes and drawing."""

from __future__ import annotations

import pygame

from . import clock as clock_module
from . import input as input_module
from . import renderer
from . import scene as scene_module
from .clock import Clock
from .input import Input
from .scene import SceneManager
from .vector import Vector2

BACKGROUND = (255, 255, 255)


class Application:
    """Owns the render target and a back buffer it draws each frame into."""

    def __init__(
        self,
        keyboard: Input | None = None,
        clock: Clock | None = None,
        scenes: SceneManager | None = None,
    ) -> None:
        self.keyboard = keyboard if keyboard is not None else input_module.keyboard
        self.clock = clock if clock is not None else clock_module.main_clock
        self.scenes = scenes if scenes is not None else scene_module.scene_manager
        self.surface: pygame.Surface | None = None
        self.back_buffer: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def initialize(self, surface: pygame.Surface) -> None:
        """Attach the render target, create the back buffer and start subsystems."""
        self.surface = surface
        self.width, self.height = surface.get_size()
        renderer.screen_resolution = Vector2(float(self.width), float(self.height))
        self.back_buffer = pygame.Surface((self.width, self.height))
        self.keyboard.initialize()
        self.clock.initialize()
        self.scenes.initialize()

    def run(self) -> None:
        """Process one frame."""
        self.update()
        self.late_update()
        self.render()

    def update(self) -> None:
        self.keyboard.update()
        self.clock.update()
        self.scenes.update()

    def late_update(self) -> None:
        self.scenes.late_update()

    def render(self) -> None:
        """Draw the frame into the back buffer, then copy it to the target."""
        if self.surface is None or self.back_buffer is None:
            raise RuntimeError("application is not initialized")
        self.back_buffer.fill(BACKGROUND)
        self.clock.render(self.back_buffer)
        self.scenes.render(self.back_buffer)
        self.surface.blit(self.back_buffer, (0, 0))