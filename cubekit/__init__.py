"""Scene file lines, map checks, colours, player setup and XPM textures for a raycasting game."""

__version__ = "0.1.0"