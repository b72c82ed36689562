"""Keyboard state tracking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable

import pygame


class KeyState(Enum):
    """Transition of a key during the last update."""

    DOWN = "down"
    PRESSED = "pressed"
    UP = "up"
    NONE = "none"


class KeyCode(IntEnum):
    """Keys the engine tracks."""

    Q = 0
    W = 1
    E = 2
    R = 3
    T = 4
    Y = 5
    U = 6
    I = 7  # noqa: E741
    O = 8  # noqa: E741
    P = 9
    A = 10
    S = 11
    D = 12
    F = 13
    G = 14
    H = 15
    J = 16
    K = 17
    L = 18
    Z = 19
    X = 20
    C = 21
    V = 22
    B = 23
    N = 24
    M = 25
    LEFT = 26
    RIGHT = 27
    DOWN = 28
    UP = 29


_ARROWS = {
    KeyCode.LEFT: pygame.K_LEFT,
    KeyCode.RIGHT: pygame.K_RIGHT,
    KeyCode.DOWN: pygame.K_DOWN,
    KeyCode.UP: pygame.K_UP,
}


def _pygame_key(code: KeyCode) -> int:
    if code in _ARROWS:
        return _ARROWS[code]
    return pygame.key.key_code(code.name.lower())


def _pygame_probe(code: KeyCode) -> bool:
    return bool(pygame.key.get_pressed()[_pygame_key(code)])


@dataclass
class Key:
    """Tracked state of one key."""

    code: KeyCode
    state: KeyState = KeyState.NONE
    pressed: bool = False


class Input:
    """Turns raw "is the key held" readings into down/pressed/up transitions."""

    def __init__(self, probe: Callable[[KeyCode], bool] | None = None) -> None:
        self.probe = probe or _pygame_probe
        self._keys: dict[KeyCode, Key] = {}

    def initialize(self) -> None:
        """Start tracking every key as released."""
        self._keys = {code: Key(code) for code in KeyCode}

    def update(self) -> None:
        """Read every key once and update its state."""
        for key in self._keys.values():
            if self.probe(key.code):
                key.state = KeyState.PRESSED if key.pressed else KeyState.DOWN
                key.pressed = True
            else:
                key.state = KeyState.UP if key.pressed else KeyState.NONE
                key.pressed = False

    def get_key_down(self, code: KeyCode) -> bool:
        """True on the frame the key went down."""
        return self._keys[code].state is KeyState.DOWN

    def get_key_up(self, code: KeyCode) -> bool:
        """True on the frame the key was released."""
        return self._keys[code].state is KeyState.UP

    def get_key(self, code: KeyCode) -> bool:
        """True while the key stays held after the frame it went down."""
        return self._keys[code].state is KeyState.PRESSED


keyboard = Input()