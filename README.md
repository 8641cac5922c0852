# kantera

Building blocks for procedural video rendering in pure Python, with no
third-party dependencies.

A scene is a tree of *renders*. Every render can be asked for a single pixel
with `sample(u, v, time, res)`, where `(u, v)` is a position normalised to the
full resolution `res = (res_x, res_y)`, or asked for a block of frames with
`render(ro)`, which returns a flat list of pixels ordered frame by frame, then
row by row, then column by column. A `RenderOpt` says which columns, rows and
frames to produce, at what full resolution and frame rate.

## Modules

- `kantera.pixel`: `Rgba` (floating point, defaults to opaque black) and
  `RgbU8` (8 bits per channel). Both have `normal_blend(rhs, alpha)`;
  `RgbU8.to_rgba()` converts to `Rgba`. `Rgba` supports `+` and
  multiplication by a number.
- `kantera.vector`: frozen `Vec2` and `Vec3` with element-wise `+ - * / %`,
  scaling by a number, `zero()`, `one()`, `is_zero()`, `is_one()`, and
  `lerp(a, b, v)`.
- `kantera.timed`: the `Timed` base class and `value_at(timed, time)`, which
  evaluates a `Timed` or returns any other value unchanged. `Cycle` repeats a
  timed value, `Sine` is a sine wave with a plain or timed amplitude, `Map`
  applies a function, `Add` and `Mul` combine two timed values.
- `kantera.path`: `Path`, a keyframed `Timed` value. `Path(first_value)`
  starts at time 0; `append(d_time, value, point_type)` adds a keyframe
  `d_time` seconds after the last one (a negative `d_time` raises
  `ValueError`). Segment types are `Constant()`, `Linear()`,
  `Bezier2(handle)` and `Bezier3(handle_1, handle_2)`. Before the first
  keyframe the path holds its first value, after the last its last value.
- `kantera.path_rect`: `closed_path_rect(path)` gives the integer bounding box
  `(left, top, right, bottom)` of a path of `Vec2` points (Bézier handles
  included; `Bezier2` segments raise `ValueError`), and `expand_rect(rect,
  size)` grows a box on every side.
- `kantera.util`: `hsl_to_rgb`, `rgb_to_hsl` (hue in turns), `noise` (3-D
  Perlin noise) and `u32_noise` (an experimental 32-bit integer hash).
- `kantera.render`: `RenderOpt`, the `Render` base class (its default
  `render` samples every pixel; its default `duration` is infinite) and
  `Dummy`, a colourful test pattern.

### Render nodes (`kantera.renders`)

- `transform`: `Transform(source, transformer)` samples `source` at
  coordinates mapped by a function of `(u, v, time, res)`. Transformers come
  from `Mat` (an affine matrix with `translate`, `scale`, `rotate`, `apply`
  and `get_transformer`), `timed_to_transformer` / `path_to_transformer`
  (translation, scale and rotation about the centre, each plain or timed),
  `camera_shake(size)` and `camera_shake2(size, time_scale)`.
- `basic`: `Clip(source, start, end)` shifts a render in time and gives it a
  duration; `Plain(timed)` fills every pixel with one (possibly timed) value;
  `Sample(f)` wraps a function of `(u, v, time, res)`; `MapRender(source,
  map)` post-processes whole frames; `FunctionalRender(f)` builds frames from
  `f(ro, time)`; `PixelInto(source, convert)` converts every pixel.
- `extrapolation`: `Frame(source, frame_type, constant=None)` fills outside
  the unit square per `FrameType` (`CONSTANT`, `EXTEND`, `REPEAT`,
  `REFLECT`); `TimeExtrapolate(source, length, extrapolation_type,
  constant=None)` does the same for time per `ExtrapolationType` (adding
  `NONE`); `RgbTransform(source, transformer)` samples each colour channel at
  its own position.
- `composite`: `Composite(layers)` stacks `(render, CompositeMode)` pairs
  over opaque black. `CompositeMode()` replaces what is below;
  `CompositeMode(blend=True, alpha=...)` blends over it with a plain or timed
  alpha.
- `sequencing`: `Sequence(default).append(time, restart, render)` cuts
  between pages; `Sequencer(default).append(time, z, render)` places clips on
  layers and blends them, drawn in order of layer then start time.
- `blur`: `Bokeh(source, max_size, size)` box-blurs with a timed radius;
  `Filter(source, kernel)` convolves with an odd-sized `Kernel`, which
  `make_gaussian_filter(w, h, d)` can build.
- `color_sampling`: `ColorSampling(source, ColorSamplingType.T422)` (or
  `T444`, `T420`, `T411`) simulates chroma subsampling in YPbPr, with
  `rgb_to_ypbpr` and `ypbpr_to_rgb` available on their own.

Renders that only work on whole frames (`MapRender`, `FunctionalRender`,
`Sequencer`, `Bokeh`, `Filter`, `ColorSampling`) raise `TypeError` from
`sample`.

## Example

```python
from kantera.path import Path, Linear, Constant
from kantera.pixel import Rgba
from kantera.render import RenderOpt
from kantera.renders.basic import Plain

fade = (
    Path(Rgba(0.0, 0.0, 0.0, 1.0))
    .append(1.0, Rgba(1.0, 0.0, 0.0, 1.0), Linear())
    .append(1.0, Rgba(1.0, 1.0, 1.0, 1.0), Constant())
)

ro = RenderOpt(
    x_range=range(0, 4),
    y_range=range(0, 3),
    res_x=4,
    res_y=3,
    frame_range=range(0, 30),
    framerate=30,
)
pixels = Plain(fade).render(ro)  # 30 * 4 * 3 pixels, frame by frame
```

Renders nest: wrap one in a `Transform` to move it, a `Clip` to shift it in
time, a `Composite` to blend layers, or a `Sequence` to cut between scenes.

## What it does not do

kantera only computes pixel values in memory. It does not read or write image
or video files, draw text or rasterise paths (`path_rect` only measures
them), produce audio, or offer a command-line tool or scripting language;
feeding the pixel lists to an encoder or display is left to the caller.

## Tests

```
pip install -e .[test]
pytest
```