import pytest

from neatgfx.shader_program import (
    ShaderLibrary,
    ShaderProgram,
    ShaderSyntaxError,
    split_shader_source,
)
from neatgfx.shader_types import GL_FRAGMENT_SHADER, GL_VERTEX_SHADER, ShaderTypeError

VERTEX = "void main() { gl_Position = vec4(0.0); }\n"
FRAGMENT = "void main() { color = vec4(1.0); }\n"
COMBINED = f"#type vertex\n{VERTEX}#type fragment\n{FRAGMENT}"


def test_split_two_stages():
    sources = split_shader_source(COMBINED)
    assert sources == {GL_VERTEX_SHADER: VERTEX, GL_FRAGMENT_SHADER: FRAGMENT}


def test_split_pixel_alias_and_crlf_and_blank_lines():
    text = f"#type  pixel\r\n\r\n{FRAGMENT}"
    assert split_shader_source(text) == {GL_FRAGMENT_SHADER: FRAGMENT}


def test_split_later_section_replaces_earlier():
    text = "#type vertex\nfirst\n#type vertex\nsecond\n"
    assert split_shader_source(text) == {GL_VERTEX_SHADER: "second\n"}


def test_split_without_token_is_empty():
    assert split_shader_source(VERTEX) == {}


def test_split_missing_line_end_raises():
    with pytest.raises(ShaderSyntaxError):
        split_shader_source("#type vertex")


def test_split_unknown_stage_raises():
    with pytest.raises(ShaderTypeError):
        split_shader_source("#type geometry\ncode\n")


def test_from_sources():
    program = ShaderProgram.from_sources("flat", VERTEX, FRAGMENT)
    assert program.name == "flat"
    assert program.vertex_source == VERTEX
    assert program.fragment_source == FRAGMENT


def test_too_many_stages_raises():
    with pytest.raises(ShaderSyntaxError):
        ShaderProgram("x", {1: "a", 2: "b", 3: "c"})


def test_from_file_uses_stem(tmp_path):
    path = tmp_path / "texture.glsl"
    path.write_text(COMBINED)
    program = ShaderProgram.from_file(path)
    assert program.name == "texture"
    assert program.sources == split_shader_source(COMBINED)


def test_from_file_with_name(tmp_path):
    path = tmp_path / "texture.glsl"
    path.write_text(COMBINED)
    assert ShaderProgram.from_file(path, "custom").name == "custom"


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ShaderProgram.from_file(tmp_path / "absent.glsl")


def test_library_add_and_get():
    library = ShaderLibrary()
    program = ShaderProgram.from_sources("flat", VERTEX, FRAGMENT)
    library.add(program)
    assert "flat" in library
    assert library.get("flat") is program


def test_library_add_with_name_renames():
    library = ShaderLibrary()
    program = ShaderProgram.from_sources("flat", VERTEX, FRAGMENT)
    library.add(program, "renamed")
    assert program.name == "renamed"
    assert "flat" not in library
    assert library.get("renamed") is program


def test_library_duplicate_raises():
    library = ShaderLibrary()
    library.add(ShaderProgram.from_sources("flat", VERTEX, FRAGMENT))
    with pytest.raises(ValueError):
        library.add(ShaderProgram.from_sources("flat", VERTEX, FRAGMENT))
    assert len(library) == 1


def test_library_missing_raises():
    with pytest.raises(KeyError):
        ShaderLibrary().get("nothing")


def test_library_load(tmp_path):
    path = tmp_path / "texture.glsl"
    path.write_text(COMBINED)
    library = ShaderLibrary()
    program = library.load(path)
    assert library.get("texture") is program
    assert program.vertex_source == VERTEX