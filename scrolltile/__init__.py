"""Scrollable tiling layout building blocks: geometry, options, outputs, animations, focus rings, tiles and view offsets."""

__version__ = "0.1.0"