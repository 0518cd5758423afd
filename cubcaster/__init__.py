"""Raycasting renderer for .cub scene files: parsing, validation, rendering and a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]