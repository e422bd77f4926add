"""Two-dimensional textures and sub-regions of them."""

from __future__ import annotations

import itertools

import numpy as np
from PIL import Image

GL_RGB = 0x1907
GL_RGBA = 0x1908
GL_RGB8 = 0x8051
GL_RGBA8 = 0x8058

_FORMATS = {
    4: (GL_RGBA8, GL_RGBA),
    3: (GL_RGB8, GL_RGB),
}

_FULL_COORDINATES = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))

_ids = itertools.count(1)


class TextureFormatError(ValueError):
    """Raised for an image whose colour channel layout is not supported."""


class Texture2D:
    """An RGB or RGBA texture; textures compare equal when they share storage."""

    def __init__(self, width, height):
        self._allocate(width, height, 4)

    def _allocate(self, width, height, channels, pixels=None):
        if width <= 0 or height <= 0:
            raise ValueError("texture dimensions must be positive")
        try:
            self._internal_format, self._data_format = _FORMATS[channels]
        except KeyError:
            raise TextureFormatError(
                f"color channel format not supported: {channels} channels"
            ) from None
        self._id = next(_ids)
        self._width = width
        self._height = height
        self._channels = channels
        self._pixels = bytearray(width * height * channels)
        if pixels is not None:
            self.set_data(pixels)

    @classmethod
    def from_file(cls, path):
        """Load an RGB or RGBA image, flipped so the first row is the bottom one."""
        with Image.open(path) as image:
            image.load()
            if image.mode == "P":
                image = image.convert("RGBA" if "transparency" in image.info else "RGB")
            channels = {"RGBA": 4, "RGB": 3}.get(image.mode)
            if channels is None:
                raise TextureFormatError(
                    f"color channel format not supported: {image.mode}"
                )
            flipped = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
            texture = cls.__new__(cls)
            texture._allocate(flipped.width, flipped.height, channels, flipped.tobytes())
        return texture

    @property
    def id(self):
        return self._id

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def channels(self):
        return self._channels

    @property
    def internal_format(self):
        return self._internal_format

    @property
    def data_format(self):
        return self._data_format

    @property
    def data(self):
        """Pixel bytes, bottom row first."""
        return bytes(self._pixels)

    @property
    def coordinates(self):
        """Texture coordinates of the corners: bottom-left, bottom-right, top-right, top-left."""
        return np.array(_FULL_COORDINATES)

    def set_data(self, data):
        """Replace all pixels; ``data`` must cover the whole texture."""
        data = bytes(data)
        if len(data) != len(self._pixels):
            raise ValueError(
                f"texture data must be {len(self._pixels)} bytes, got {len(data)}"
            )
        self._pixels[:] = data

    def __eq__(self, other):
        if not isinstance(other, Texture2D):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return (
            f"{type(self).__name__}(id={self._id}, width={self._width}, "
            f"height={self._height}, channels={self._channels})"
        )


class SubTexture2D(Texture2D):
    """A rectangular region of a texture, sharing the texture's storage."""

    def __init__(self, texture, bottom_left, upper_right):
        self._id = texture._id
        self._width = texture._width
        self._height = texture._height
        self._channels = texture._channels
        self._internal_format = texture._internal_format
        self._data_format = texture._data_format
        self._pixels = texture._pixels
        left, bottom = (float(c) for c in bottom_left)
        right, top = (float(c) for c in upper_right)
        self._coordinates = (
            (left, bottom),
            (right, bottom),
            (right, top),
            (left, top),
        )

    @property
    def coordinates(self):
        return np.array(self._coordinates)

    @classmethod
    def from_index(cls, texture, indexes, cell_size, size_in_cells=(1, 1)):
        """Region covering ``size_in_cells`` cells starting at cell ``indexes``."""
        i, j = indexes
        cell_x, cell_y = cell_size
        span_x, span_y = size_in_cells
        bottom_left = (
            i * cell_x / texture.width,
            j * cell_y / texture.height,
        )
        upper_right = (
            (i + span_x) * cell_x / texture.width,
            (j + span_y) * cell_y / texture.height,
        )
        return cls(texture, bottom_left, upper_right)