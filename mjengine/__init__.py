"""A small component-based 2D game engine on pygame, with a sample game."""

__version__ = "0.1.0"