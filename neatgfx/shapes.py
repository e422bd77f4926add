"""Drawable 2D shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    """Something that can queue itself on a :class:`Renderer2D`."""

    @abstractmethod
    def draw(self, renderer):
        """Queue this shape on ``renderer``."""


@dataclass
class Quad(Shape):
    """An axis-aligned flat-coloured quad."""

    position: tuple = (0.0, 0.0, 0.0)
    size: tuple = (1.0, 1.0)
    color: tuple = (1.0, 0.0, 1.0, 1.0)

    def draw(self, renderer):
        renderer.draw_quad(self.position, self.size, self.color)