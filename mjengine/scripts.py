"""Behaviour scripts for the dog and the player character."""

from __future__ import annotations

import random
from enum import Enum, IntEnum

from . import input as input_module
from .animation import Animator
from .clock import delta_time
from .component import Script, Transform
from .input import KeyCode
from .vector import Vector2

#: Walking speed in world units per second.
WALK_SPEED = 100.0
#: Seconds the dog stays seated before it starts walking.
SIT_DURATION = 3.0
#: Seconds the dog walks before it sits down again.
WALK_DURATION = 2.0


class DogState(Enum):
    """What the dog is doing."""

    SITDOWN = "sitdown"
    WALK = "walk"
    SIDE_SIT_DOWN = "side_sit_down"


class Direction(IntEnum):
    """Direction the dog walks in."""

    LEFT = 0
    RIGHT = 1
    DOWN = 2
    UP = 3
    END = 4


_WALK_ANIMATIONS = {
    Direction.LEFT: "LeftWalk",
    Direction.RIGHT: "RightWalk",
    Direction.DOWN: "DownWalk",
    Direction.UP: "UpWalk",
}

_DIRECTION_STEPS = {
    Direction.LEFT: Vector2(-1.0, 0.0),
    Direction.RIGHT: Vector2(1.0, 0.0),
    Direction.DOWN: Vector2(0.0, 1.0),
    Direction.UP: Vector2(0.0, -1.0),
}


class DogScript(Script):
    """Sits for a while, walks in a random direction, then sits again."""

    def __init__(self) -> None:
        super().__init__()
        self.state = DogState.SITDOWN
        self.animator: Animator | None = None
        self.time = 0.0
        self.direction = Direction.DOWN
        self.rng = random.Random()

    def update(self) -> None:
        if self.animator is None:
            self.animator = self.owner.get_component(Animator)
        if self.state is DogState.WALK:
            self._move()
        else:
            self._sit_down()

    def _sit_down(self) -> None:
        self.time += delta_time()
        if self.time > SIT_DURATION:
            self.state = DogState.WALK
            self.direction = Direction(self.rng.randrange(4))
            self._play_walk_animation(self.direction)
            self.time = 0.0

    def _move(self) -> None:
        self.time += delta_time()
        if self.time > WALK_DURATION:
            if self.rng.randrange(2) == 0:
                self.state = DogState.SITDOWN
                self.animator.play_animation("SitDown", False)
            else:
                self.state = DogState.SIDE_SIT_DOWN
                self.animator.play_animation("SideSitDown", False)
        self._translate(self.owner.get_component(Transform))

    def _play_walk_animation(self, direction: Direction) -> None:
        name = _WALK_ANIMATIONS.get(direction)
        if name is None:
            raise ValueError(f"no walk animation for direction {direction.name}")
        self.animator.play_animation(name)

    def _translate(self, transform: Transform) -> None:
        step = _DIRECTION_STEPS.get(self.direction)
        if step is not None:
            transform.position = transform.position + step * (WALK_SPEED * delta_time())


class PlayerState(Enum):
    """What the player character is doing."""

    IDLE = "idle"
    WALK = "walk"
    ATTACK1 = "attack1"
    ATTACK2 = "attack2"


_ARROW_STEPS = {
    KeyCode.RIGHT: Vector2(1.0, 0.0),
    KeyCode.LEFT: Vector2(-1.0, 0.0),
    KeyCode.UP: Vector2(0.0, -1.0),
    KeyCode.DOWN: Vector2(0.0, 1.0),
}


class PlayerScript(Script):
    """Moves the player with the arrow keys."""

    def __init__(self) -> None:
        super().__init__()
        self.state = PlayerState.IDLE
        self.animator: Animator | None = None
        self.keyboard = input_module.keyboard

    def update(self) -> None:
        if self.animator is None:
            self.animator = self.owner.get_component(Animator)
        if self.state is PlayerState.IDLE:
            self._idle()
        elif self.state is PlayerState.WALK:
            self._move()

    def _idle(self) -> None:
        for code in _ARROW_STEPS:
            if self.keyboard.get_key(code):
                self.state = PlayerState.WALK
                self.animator.play_animation("Walk")

    def _move(self) -> None:
        transform = self.owner.get_component(Transform)
        position = transform.position
        for code, step in _ARROW_STEPS.items():
            if self.keyboard.get_key(code):
                position = position + step * (WALK_SPEED * delta_time())
        transform.position = position

        if any(self.keyboard.get_key_up(code) for code in _ARROW_STEPS):
            self.state = PlayerState.IDLE
            self.animator.play_animation("Idle")