"""A top-down zombie survival shooter built on pygame, with window-free game logic."""

__version__ = "0.1.0"
__all__ = ["__version__"]