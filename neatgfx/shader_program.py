"""Shader programs assembled from ``#type``-tagged source files, and a named library of them."""

from __future__ import annotations

import re
from pathlib import Path

from neatgfx.shader_types import (
    GL_FRAGMENT_SHADER,
    GL_VERTEX_SHADER,
    shader_stage_from_name,
)

_TYPE_TOKEN = "#type"
_NOT_BLANK = re.compile(r"[^ \t]")
_NAME_END = re.compile(r"[ \t\r\n]")
_LINE_END = re.compile(r"[\r\n]")
_NOT_LINE_END = re.compile(r"[^\r\n]")

_MAX_STAGES = 2


class ShaderSyntaxError(ValueError):
    """Raised when a combined shader source file is malformed."""


def split_shader_source(text):
    """Split a combined source into ``{stage: source}`` using ``#type <stage>`` lines.

    Each stage's source starts at the first non-empty line after its ``#type``
    line and runs up to the next ``#type`` token. A later section for the same
    stage replaces an earlier one.
    """
    sources = {}
    pos = text.find(_TYPE_TOKEN)
    while pos != -1:
        name_begin = _NOT_BLANK.search(text, pos + len(_TYPE_TOKEN))
        name_end = name_begin and _NAME_END.search(text, name_begin.start())
        line_end = name_end and _LINE_END.search(text, name_end.start())
        if line_end is None:
            raise ShaderSyntaxError("shader source syntax error: '#type' line has no end")

        stage = shader_stage_from_name(text[name_begin.start():name_end.start()])

        body = _NOT_LINE_END.search(text, line_end.start())
        body_start = len(text) if body is None else body.start()
        pos = text.find(_TYPE_TOKEN, body_start)
        sources[stage] = text[body_start:] if pos == -1 else text[body_start:pos]
    return sources


class ShaderProgram:
    """A named set of shader stage sources, at most one vertex and one fragment."""

    def __init__(self, name, sources):
        sources = dict(sources)
        if len(sources) > _MAX_STAGES:
            raise ShaderSyntaxError(
                f"the maximum number of supported shaders is {_MAX_STAGES}"
            )
        self.name = name
        self._sources = sources

    @classmethod
    def from_file(cls, path, name=None):
        """Read a combined source file; the name defaults to the file's stem."""
        path = Path(path)
        text = path.read_bytes().decode("utf-8")
        return cls(path.stem if name is None else name, split_shader_source(text))

    @classmethod
    def from_sources(cls, name, vertex_source, fragment_source):
        return cls(
            name,
            {GL_VERTEX_SHADER: vertex_source, GL_FRAGMENT_SHADER: fragment_source},
        )

    @property
    def sources(self):
        return dict(self._sources)

    @property
    def vertex_source(self):
        return self._sources.get(GL_VERTEX_SHADER)

    @property
    def fragment_source(self):
        return self._sources.get(GL_FRAGMENT_SHADER)

    def __repr__(self):
        return f"ShaderProgram(name={self.name!r}, stages={sorted(self._sources)!r})"


class ShaderLibrary:
    """Shader programs stored under unique names."""

    def __init__(self):
        self._shaders = {}

    def add(self, shader, name=None):
        """Store ``shader``; giving ``name`` renames the shader first."""
        key = shader.name if name is None else name
        if key in self._shaders:
            raise ValueError(f"shader program {key!r} already exists")
        shader.name = key
        self._shaders[key] = shader

    def load(self, path, name=None):
        """Read a shader program from ``path``, store it and return it."""
        shader = ShaderProgram.from_file(path, name)
        self.add(shader)
        return shader

    def get(self, name):
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"shader program {name!r} not found") from None

    def __contains__(self, name):
        return name in self._shaders

    def __len__(self):
        return len(self._shaders)

    def __iter__(self):
        return iter(self._shaders)