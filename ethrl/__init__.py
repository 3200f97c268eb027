"""A small 2D game engine and a side-scrolling platformer built on it."""

__version__ = "0.1.0"