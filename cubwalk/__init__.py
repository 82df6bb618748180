"""A raycasting first-person walker over a textured tile map, with its helper modules."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "chars",
    "config",
    "linked",
    "lines",
    "memory",
    "movement",
    "output",
    "render",
    "textops",
    "textures",
    "world",
]