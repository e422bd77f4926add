"""Vertex buffer layouts: named attributes with computed offsets and stride."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from neatgfx.shader_types import ShaderDataType, base_type, component_count, size_in_bytes


@dataclass
class BufferElement:
    """One vertex attribute; size, component count and GL type are derived."""

    type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False)
    component_count: int = field(init=False)
    data_type: int = field(init=False)
    offset: int = field(default=0, init=False)
    index: int = field(default=0, init=False)

    def __post_init__(self):
        self.size = size_in_bytes(self.type)
        self.component_count = component_count(self.type)
        self.data_type = base_type(self.type)


class BufferLayout:
    """An ordered set of attributes laid out back to back in one vertex."""

    def __init__(self, elements=()):
        self._elements = []
        offset = 0
        for index, element in enumerate(elements):
            placed = dataclasses.replace(element)
            placed.index = index
            placed.offset = offset
            offset += placed.size
            self._elements.append(placed)
        self._stride = offset

    @property
    def stride(self):
        """Total size of one vertex in bytes."""
        return self._stride

    @property
    def elements(self):
        return tuple(self._elements)

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def __repr__(self):
        return f"BufferLayout({self._elements!r})"