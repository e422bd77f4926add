# neatgfx

Building blocks for a small real-time graphics engine, in pure Python on top
of NumPy and Pillow.

- **Math**: `Quaternion`, `norm` and `normalize` (`neatgfx.quaternion`),
  `quat_log`, `quat_exp`, `quat_pow` and `inverse_sqrt`
  (`neatgfx.exponential`), `mix`, `quadratic_bezier`, `cubic_bezier`,
  `quat_mix`, `quat_lerp` and `quat_slerp` (`neatgfx.interpolation`), 4×4
  transforms `translate`, `rotate`, `rotate_x/y/z`, `scale` and
  `rotate_quaternion` (`neatgfx.transform`), `orthographic`, `perspective`,
  `look_at_rh` and `look_at_lh` (`neatgfx.projection`), and numeric constants
  with `radians`/`degrees` (`neatgfx.constants`).
- **Cameras**: `Camera` (`neatgfx.camera`) with an orthographic or
  perspective projection and Euler orientation in degrees; `Camera2D`
  (`neatgfx.camera2d`), an orthographic camera in the xy plane that keeps its
  height or width fixed (`KeepAspect`) as its size and zoom change.
- **Rendering data**: `ShaderDataType` with `size_in_bytes`,
  `component_count`, `base_type`, `gl_type`, `to_shader_data_type` and
  `shader_stage_from_name` (`neatgfx.shader_types`); `BufferElement` and
  `BufferLayout` with computed offsets and stride (`neatgfx.buffers`);
  `split_shader_source`, `ShaderProgram` and `ShaderLibrary`
  (`neatgfx.shader_program`); `Texture2D` and sprite-sheet `SubTexture2D`
  (`neatgfx.texture`).
- **Batched 2D quads**: `Renderer2D` (`neatgfx.renderer2d`) turns quads into
  vertex batches (`QuadBatch` of `QuadVertex`), assigns texture slots, keeps
  `Statistics`, and hands each batch to a callback you supply. `Quad`
  (`neatgfx.shapes`) is a shape that queues itself on a renderer.
- **Helpers**: a block-allocated `MemoryPool` (`neatgfx.memory_pool`) and an
  `FPSCounter` (`neatgfx.fps_counter`).

## Installation

```
pip install neatgfx
```

## Drawing quads

`Renderer2D` calls `draw_callback(vertices, index_count, textures,
camera_transform)` whenever a batch is complete: at `end_scene()`, when the
batch reaches `max_quads`, or when all texture slots are in use. Slot 0 of
`textures` is always a 1×1 white texture.

```python
from neatgfx.camera2d import Camera2D
from neatgfx.renderer2d import Renderer2D
from neatgfx.shapes import Quad

def submit(vertices, index_count, textures, camera_transform):
    print(f"drawing {index_count // 6} quads with {len(textures)} texture(s)")

camera = Camera2D((0.0, 0.0), 16 / 9)
renderer = Renderer2D(submit)

renderer.begin_scene(camera)  # or camera.camera_transform()
for row in range(20):
    for column in range(20):
        Quad((0.1 * column, 0.1 * row, 0.0), (0.1, 0.1),
             (row / 20, column / 20, 1.0, 1.0)).draw(renderer)
renderer.draw_rotated_quad((0.0, 0.75, 0.5), (0.5, 0.5), 45.0,
                           (0.65, 0.78, 0.2, 1.0))
renderer.end_scene()

print(renderer.stats.draw_calls, renderer.stats.quad_count)
```

Textured quads use `draw_textured_quad` and `draw_rotated_textured_quad`:

```python
from neatgfx.texture import Texture2D, SubTexture2D

sheet = Texture2D.from_file("spritesheet.png")
stairs = SubTexture2D.from_index(sheet, (7, 6), (64, 64))
renderer.begin_scene(camera)
renderer.draw_textured_quad((0.0, -0.5, 0.5), (1.0, 1.0), stairs)
renderer.end_scene()
```

## Quaternions

```python
from neatgfx.constants import radians
from neatgfx.quaternion import Quaternion
from neatgfx.interpolation import quat_slerp

a = Quaternion.identity()
b = Quaternion.from_angle_axis(radians(90.0), (0.0, 0.0, 1.0))
half = quat_slerp(a, b, 0.5)
print(half.rotate((1.0, 0.0, 0.0)))
```

## Cameras

```python
from neatgfx.camera import Camera

camera = Camera((0.0, 0.0, 3.0)).set_perspective(45.0, 16 / 9, 0.1, 100.0)
camera.rotate(0.0, 30.0, 0.0)
camera.move_forward(1.0)
mvp = camera.camera_transform()  # projection_matrix() @ view_matrix()
```

Reading `left`/`right`/`bottom`/`top` on a perspective camera, or
`field_of_view`/`aspect_ratio` on an orthographic one, raises
`WrongCameraTypeError`; using either before a projection is chosen raises
`CameraTypeNotSetError`.

## Shader sources

`split_shader_source` splits a combined file on `#type vertex` and
`#type fragment` (or `pixel`) lines into a `{stage: source}` mapping.
`ShaderProgram.from_file` reads such a file, naming the program after the
file's stem unless a name is given, and `ShaderLibrary` stores programs under
unique names.

## What this package does not do

It issues no graphics API calls and opens no windows. `ShaderProgram` holds
source text only and does not compile or link shaders; `Texture2D` keeps its
pixels in memory and does not upload them; `Renderer2D` assembles vertex data
and leaves the actual drawing to your callback. There is no input handling,
event loop or application runner.

## Running the tests

```
pip install -e ".[test]"
pytest
```