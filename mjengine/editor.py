"""The editor window: opens a window and runs the game loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from .application import Application
from .resources import ResourceError
from .scenes import DEFAULT_RESOURCE_DIR, create_scenes, load_resources, load_scenes

WINDOW_TITLE = "Editor Window"
DEFAULT_WIDTH = 1600
DEFAULT_HEIGHT = 900


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the editor's command line."""
    parser = argparse.ArgumentParser(prog="mjengine-editor", description="Run the game in a window.")
    parser.add_argument("--width", type=_positive, default=DEFAULT_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=_positive, default=DEFAULT_HEIGHT, help="window height in pixels")
    parser.add_argument(
        "--resources",
        default=str(DEFAULT_RESOURCE_DIR),
        help="directory holding the game's images",
    )
    parser.add_argument(
        "--frames",
        type=_non_negative,
        default=0,
        help="stop after this many frames; 0 runs until the window is closed",
    )
    return parser.parse_args(argv)


def _run(application: Application, frames: int) -> None:
    count = 0
    while True:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            return
        application.run()
        pygame.display.flip()
        count += 1
        if frames and count >= frames:
            return


def main(argv: list[str] | None = None) -> int:
    """Open the window, load the game and run it until closed."""
    args = parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(WINDOW_TITLE)
        application = Application()
        application.initialize(surface)
        try:
            load_resources(args.resources)
        except ResourceError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        create_scenes()
        load_scenes()
        _run(application, args.frames)
    finally:
        pygame.quit()
    return 0