"""Shader data types and their mapping to OpenGL type codes."""

from __future__ import annotations

import enum

GL_INT = 0x1404
GL_FLOAT = 0x1406
GL_FLOAT_VEC2 = 0x8B50
GL_FLOAT_VEC3 = 0x8B51
GL_FLOAT_VEC4 = 0x8B52
GL_INT_VEC2 = 0x8B53
GL_INT_VEC3 = 0x8B54
GL_INT_VEC4 = 0x8B55
GL_BOOL = 0x8B56
GL_FLOAT_MAT3 = 0x8B5B
GL_FLOAT_MAT4 = 0x8B5C
GL_SAMPLER_2D = 0x8B5E
GL_FRAGMENT_SHADER = 0x8B30
GL_VERTEX_SHADER = 0x8B31


class ShaderTypeError(ValueError):
    """Raised for a shader data type or type code with no known mapping."""


class ShaderDataType(enum.Enum):
    NONE = 0
    FLOAT = 1
    VECTOR2F = 2
    VECTOR3F = 3
    VECTOR4F = 4
    FLOAT_ARRAY = 5
    VECTOR2_ARRAY = 6
    VECTOR3_ARRAY = 7
    VECTOR4_ARRAY = 8
    MATRIX2F = 9
    MATRIX3F = 10
    MATRIX4F = 11
    MATRIX2_ARRAY = 12
    MATRIX3_ARRAY = 13
    MATRIX4_ARRAY = 14
    INT = 15
    VECTOR2I = 16
    VECTOR3I = 17
    VECTOR4I = 18
    INT_ARRAY = 19
    IVECTOR2_ARRAY = 20
    IVECTOR3_ARRAY = 21
    IVECTOR4_ARRAY = 22
    BOOL = 23


_T = ShaderDataType

# type -> (component count, base GL type, GL type)
_TABLE = {
    _T.FLOAT: (1, GL_FLOAT, GL_FLOAT),
    _T.VECTOR2F: (2, GL_FLOAT, GL_FLOAT_VEC2),
    _T.VECTOR3F: (3, GL_FLOAT, GL_FLOAT_VEC3),
    _T.VECTOR4F: (4, GL_FLOAT, GL_FLOAT_VEC4),
    _T.MATRIX3F: (3 * 3, GL_FLOAT, GL_FLOAT_MAT3),
    _T.MATRIX4F: (4 * 4, GL_FLOAT, GL_FLOAT_MAT4),
    _T.INT: (1, GL_INT, GL_INT),
    _T.VECTOR2I: (2, GL_INT, GL_INT_VEC2),
    _T.VECTOR3I: (3, GL_INT, GL_INT_VEC3),
    _T.VECTOR4I: (4, GL_INT, GL_INT_VEC4),
    _T.BOOL: (1, GL_BOOL, GL_BOOL),
}

_SINGLE_FROM_GL = {
    GL_FLOAT: _T.FLOAT,
    GL_FLOAT_VEC2: _T.VECTOR2F,
    GL_FLOAT_VEC3: _T.VECTOR3F,
    GL_FLOAT_VEC4: _T.VECTOR4F,
    GL_FLOAT_MAT3: _T.MATRIX3F,
    GL_FLOAT_MAT4: _T.MATRIX4F,
    GL_INT: _T.INT,
    GL_SAMPLER_2D: _T.INT,
}

_STAGES = {
    "vertex": GL_VERTEX_SHADER,
    "fragment": GL_FRAGMENT_SHADER,
    "pixel": GL_FRAGMENT_SHADER,
}


def _entry(data_type):
    try:
        return _TABLE[data_type]
    except KeyError:
        raise ShaderTypeError(f"unknown shader data type: {data_type!r}") from None


def size_in_bytes(data_type):
    """Size of one value of ``data_type`` in bytes."""
    return 4 * _entry(data_type)[0]


def component_count(data_type):
    """Number of scalar components in one value of ``data_type``."""
    return _entry(data_type)[0]


def base_type(data_type):
    """GL scalar type code of the components of ``data_type``."""
    return _entry(data_type)[1]


def gl_type(data_type):
    """GL uniform type code of ``data_type``."""
    return _entry(data_type)[2]


def to_shader_data_type(gl_type_code, count):
    """Shader data type of a uniform with the given GL type code and array size."""
    if count == 1 and gl_type_code in _SINGLE_FROM_GL:
        return _SINGLE_FROM_GL[gl_type_code]
    if gl_type_code == GL_SAMPLER_2D and count > 1:
        return ShaderDataType.INT_ARRAY
    raise ShaderTypeError(
        f"unknown uniform type: 0x{gl_type_code:X} with count {count}"
    )


def shader_stage_from_name(name):
    """GL shader stage constant for a ``#type`` name in a shader source file."""
    try:
        return _STAGES[name]
    except KeyError:
        raise ShaderTypeError(f"unknown shader type: {name!r}") from None