"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable

import pygame


class Clock:
    """Measures the time between frames and shows the frame rate."""

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self.timer = timer
        self.delta_time = 0.0
        self.elapsed = 0.0
        self._previous = 0.0
        self._font: pygame.font.Font | None = None

    def initialize(self) -> None:
        """Start measuring from now."""
        self._previous = self.timer()

    def update(self) -> None:
        """Record the time passed since the previous update."""
        now = self.timer()
        self.delta_time = now - self._previous
        self._previous = now

    def fps_text(self) -> str:
        """The frame-rate line drawn by render."""
        fps = int(1.0 / self.delta_time) if self.delta_time > 0 else 0
        return f"Time : {fps}"

    def render(self, surface: pygame.Surface) -> None:
        """Draw the frame rate in the top-left corner."""
        self.elapsed += self.delta_time
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        text = self._font.render(self.fps_text(), False, (0, 0, 0), (255, 255, 255))
        surface.blit(text, (0, 0))


main_clock = Clock()


def delta_time() -> float:
    """Seconds elapsed during the last frame of the main clock."""
    return main_clock.delta_time