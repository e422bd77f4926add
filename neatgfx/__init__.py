"""Math, cameras, shader and texture data, and batched 2D quad assembly for small graphics engines."""

__version__ = "0.1.0"