"""Batched 2D quad rendering: vertex assembly, texture slots and draw statistics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from neatgfx.buffers import BufferElement, BufferLayout
from neatgfx.constants import radians
from neatgfx.shader_types import ShaderDataType
from neatgfx.texture import Texture2D
from neatgfx.transform import rotate_z, scale, translate

DEFAULT_MAX_QUADS = 10000
DEFAULT_MAX_TEXTURE_SLOTS = 32

VERTEX_LAYOUT = BufferLayout(
    [
        BufferElement(ShaderDataType.VECTOR4F, "position"),
        BufferElement(ShaderDataType.VECTOR4F, "color"),
        BufferElement(ShaderDataType.VECTOR2F, "textureCoordinate"),
        BufferElement(ShaderDataType.FLOAT, "textureIndex"),
        BufferElement(ShaderDataType.FLOAT, "tilingFactor"),
    ]
)

_DEFAULT_POSITIONS = np.array(
    [
        [-0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, 0.0, 1.0],
        [0.5, 0.5, 0.0, 1.0],
        [-0.5, 0.5, 0.0, 1.0],
    ]
)

_FULL_COORDINATES = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_WHITE = (1.0, 1.0, 1.0, 1.0)


def quad_indices(max_quads):
    """Index buffer drawing each quad's four vertices as two triangles."""
    pattern = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)
    offsets = np.arange(max_quads, dtype=np.uint32) * 4
    return (offsets[:, None] + pattern[None, :]).reshape(-1)


@dataclass(frozen=True)
class QuadVertex:
    """One vertex of a quad as it is laid out in the vertex buffer."""

    position: tuple = (0.0, 0.0, 0.0, 0.0)
    color: tuple = (1.0, 0.0, 1.0, 1.0)
    texture_coordinate: tuple = (0.0, 0.0)
    texture_index: int = 0
    tiling_factor: float = 1.0


@dataclass
class Statistics:
    """Counters collected between calls to ``reset_stats``."""

    draw_calls: int = 0
    quad_count: int = 0

    @property
    def total_vertex_count(self):
        return self.quad_count * 4

    @property
    def total_index_count(self):
        return self.quad_count * 6


def _vector(values, length, what):
    array = np.asarray(values, dtype=float)
    if array.shape != (length,):
        raise ValueError(f"{what} needs {length} components")
    return array


class QuadBatch:
    """Vertices of up to ``max_quads`` quads waiting to be drawn together."""

    def __init__(self, max_quads=DEFAULT_MAX_QUADS):
        if max_quads <= 0:
            raise ValueError("a batch must hold at least one quad")
        self.max_quads = max_quads
        self.vertices = []
        self.index_count = 0

    @property
    def max_vertices(self):
        return self.max_quads * 4

    @property
    def max_indexes(self):
        return self.max_quads * 6

    @property
    def data_size(self):
        """Size in bytes of the vertex data held so far."""
        return len(self.vertices) * VERTEX_LAYOUT.stride

    def add_quad(self, model_matrix, color, texture_coordinates, texture_index,
                 tiling_factor):
        """Append the four corners of the unit quad transformed by ``model_matrix``."""
        if self.is_full():
            raise OverflowError("quad batch is full")
        corners = np.asarray(model_matrix, dtype=float) @ _DEFAULT_POSITIONS.T
        color = tuple(float(c) for c in _vector(color, 4, "color"))
        coordinates = np.asarray(texture_coordinates, dtype=float).reshape(4, 2)
        for corner, coordinate in zip(corners.T, coordinates):
            self.vertices.append(
                QuadVertex(
                    tuple(float(c) for c in corner),
                    color,
                    tuple(float(c) for c in coordinate),
                    int(texture_index),
                    float(tiling_factor),
                )
            )
        self.index_count += 6

    def reset(self):
        self.vertices = []
        self.index_count = 0

    def is_full(self):
        return self.index_count >= self.max_indexes


class Renderer2D:
    """Collects quads into batches and hands each batch to ``draw_callback``.

    The callback is called as ``draw_callback(vertices, index_count, textures,
    camera_transform)``, where ``textures[i]`` is the texture bound to slot ``i``.
    Slot 0 always holds a 1x1 white texture used by untextured quads.
    """

    def __init__(self, draw_callback=None, max_quads=DEFAULT_MAX_QUADS,
                 max_texture_slots=DEFAULT_MAX_TEXTURE_SLOTS):
        if max_texture_slots < 2:
            raise ValueError("at least two texture slots are needed")
        self._draw_callback = draw_callback
        self._batch = QuadBatch(max_quads)
        self._max_texture_slots = max_texture_slots
        self.white_texture = Texture2D(1, 1)
        self.white_texture.set_data(b"\xff\xff\xff\xff")
        self._texture_slots = [self.white_texture]
        self._camera_transform = np.identity(4)
        self._stats = Statistics()

    @property
    def batch(self):
        return self._batch

    @property
    def stats(self):
        return Statistics(self._stats.draw_calls, self._stats.quad_count)

    @property
    def camera_transform(self):
        return self._camera_transform.copy()

    def reset_stats(self):
        self._stats = Statistics()

    def begin_scene(self, camera_transform):
        """Start a scene; accepts a 4x4 matrix or a camera with ``camera_transform()``."""
        produce = getattr(camera_transform, "camera_transform", None)
        matrix = produce() if callable(produce) else camera_transform
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError("camera transform must be a 4x4 matrix")
        self._camera_transform = matrix
        self._start_new_batch()

    def end_scene(self):
        self._draw()

    def _start_new_batch(self):
        self._batch.reset()
        del self._texture_slots[1:]

    def _draw(self):
        if self._draw_callback is not None:
            self._draw_callback(
                tuple(self._batch.vertices),
                self._batch.index_count,
                tuple(self._texture_slots),
                self._camera_transform.copy(),
            )
        self._stats.draw_calls += 1

    def _flush_if_full(self):
        if self._batch.is_full():
            self._draw()
            self._start_new_batch()

    def _texture_slot(self, texture):
        for index, bound in enumerate(self._texture_slots[1:], start=1):
            if bound == texture:
                return index
        if len(self._texture_slots) >= self._max_texture_slots:
            self._draw()
            self._start_new_batch()
        self._texture_slots.append(texture)
        return len(self._texture_slots) - 1

    @staticmethod
    def _model(position, size, angle_degrees=None):
        position = np.asarray(position, dtype=float)
        if position.shape == (2,):
            position = np.append(position, 0.0)
        elif position.shape != (3,):
            raise ValueError("position needs two or three components")
        width, height = _vector(size, 2, "size")
        model = translate(position)
        if angle_degrees is not None:
            model = model @ rotate_z(radians(angle_degrees))
        return model @ scale((width, height, 1.0))

    def _submit(self, model, color, coordinates, texture_index, tiling_factor):
        self._batch.add_quad(model, color, coordinates, texture_index, tiling_factor)
        self._stats.quad_count += 1

    def draw_quad(self, position, size, color):
        """Queue a flat-coloured quad centred on ``position``."""
        self._flush_if_full()
        self._submit(self._model(position, size), color, _FULL_COORDINATES, 0, 1.0)

    def draw_textured_quad(self, position, size, texture, tint=_WHITE,
                           tiling_factor=1.0):
        """Queue a textured quad centred on ``position``."""
        self._flush_if_full()
        index = self._texture_slot(texture)
        self._submit(
            self._model(position, size), tint, texture.coordinates, index, tiling_factor
        )

    def draw_rotated_quad(self, position, size, angle_degrees, color):
        """Queue a flat-coloured quad rotated ``angle_degrees`` about its centre."""
        self._flush_if_full()
        self._submit(
            self._model(position, size, angle_degrees), color, _FULL_COORDINATES, 0, 1.0
        )

    def draw_rotated_textured_quad(self, position, size, angle_degrees, texture,
                                   tint=_WHITE, tiling_factor=1.0):
        """Queue a textured quad rotated ``angle_degrees`` about its centre."""
        self._flush_if_full()
        index = self._texture_slot(texture)
        self._submit(
            self._model(position, size, angle_degrees),
            tint,
            texture.coordinates,
            index,
            tiling_factor,
        )