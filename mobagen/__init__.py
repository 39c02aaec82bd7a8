"""A small 2D game toolkit: grid points, vectors, colours, outline shapes and chess."""

__version__ = "0.1.0"