# kzkit

Small, dependency-free building blocks for a game practice tool:

- `kzkit.numfmt`: the number-to-text conversions (`format_integer`,
  `format_fixed`, `format_exponential`) driven by `FormatFlags`. Output is
  built in a bounded 32-character buffer; fixed-point values round half to
  even, and the exponent of exponential output is estimated with a fast
  logarithm approximation.
- `kzkit.printf`: `sprintf` and `snprintf` with the field semantics of a
  compact embedded printf. Integers wrap to the width of their C type on a
  32-bit target, `%b` prints binary, `%g` keeps trailing zeros. Mismatched
  formats and arguments raise `FormatError`.
- `kzkit.watches`: memory watches. `format_watch_value` decodes big-endian
  bytes according to a `WatchType` (unsigned, signed, hexadecimal or float of
  8, 16 or 32 bits); `Watch.value_text` and `Watch.render` produce the text and
  the `(x, y, text)` items to draw, with the label placed after the value for
  floating watches.
- `kzkit.scene_table`: the scene and entrance table (`Scene`,
  `build_scenes`). Entrances that crash the game are listed, as
  `CRASH_ENTRANCE`, only when `crash_warp` is true.
- `kzkit.scenes`: scene categories per game release (`SceneCategory`,
  `build_categories`, `GAME_VERSIONS`) and lookup by id with `find_scene`.
- `kzkit.vec_math`: immutable 3D vectors (`Vec3`) and directions as pitch and
  yaw (`SphericalCoord`, `vec_to_spherical`, `spherical_to_vec`,
  `vec_to_geographic`, `geographic_to_vec`). `Vec3.cross` keeps the game's
  own z component formula.
- `kzkit.segments`: segmented address resolution (`SegmentTable` with
  `find` and `relocate`, `phys_to_kseg0`).
- `kzkit.number_input`: the state of a digit-by-digit number editor
  (`NumberInput`, `Nav`), signed when given a negative base.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Format values the way the embedded printf does:

```python
from kzkit.printf import sprintf, snprintf

sprintf("%08.3f", 3.14159)    # '0003.142'
sprintf("%#x", 255)           # '0xff'
snprintf(4, "%s", "abcdef")   # ('abc', 6): truncated text and the full length
```

Display a watched value:

```python
from kzkit.watches import Watch, WatchType, format_watch_value

format_watch_value(WatchType.S16, b"\xff\xfe")   # '-2'
watch = Watch(address=0x801EF670, watch_type=WatchType.X8)
watch.value_text(b"\x2a")                         # '2A'
```

Look up a scene:

```python
from kzkit.scenes import find_scene, build_categories

scene = find_scene(210, crash_warp=False)
scene.name          # 'east clock town'
scene.entrances[0]  # 'termina field'
[c.name for c in build_categories("NZSJ")][-1]   # 'beta'
```

Resolve a segmented address:

```python
from kzkit.segments import SegmentTable

table = SegmentTable()
table.segments[6] = 0x00200000
hex(table.find(0x06000010))   # '0x80200010'
```

Edit a number one digit at a time:

```python
from kzkit.number_input import NumberInput, Nav

field = NumberInput(base=16, length=4)
field.activate()          # start editing; returns None
field.navigate(Nav.UP)    # raise the selected (lowest) digit
field.activate()          # commit; returns 1
field.display()           # '0001'
```

## What it does not do

The package works on values and bytes handed to it. It does not read or
write game memory, draw anything on screen, build menus, save or load game
states, or store settings; `Watch.render` only returns the text items and
their positions, and `NumberInput` only keeps the editor's state.